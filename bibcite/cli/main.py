"""Main CLI entry point and application setup."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click
import msgspec
from click.exceptions import Exit
from rich.console import Console
from rich.table import Table

from bibcite import __version__
from bibcite.cite import Cite
from bibcite.citations.locales import LOCALES
from bibcite.citations.styles import get_style_registry
from bibcite.cli.config import load_config, output_options
from bibcite.core.exceptions import BibciteError
from bibcite.core.models import OutputType

logger = logging.getLogger(__name__)


@dataclass
class Context:
    """State shared by all subcommands of one invocation."""

    console: Console
    config: dict[str, Any] = field(default_factory=dict)
    debug: bool = False


LOG_FORMAT = "%(levelname)s: %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Route library log records to stderr at a level picked by the flags."""
    level = logging.WARNING
    if verbose or debug:
        level = logging.DEBUG
    if quiet:
        level = logging.ERROR

    logging.basicConfig(
        level=level,
        format=DEBUG_LOG_FORMAT if debug else LOG_FORMAT,
        datefmt="%H:%M:%S",
    )


def create_console(no_color: bool = False) -> Console:
    """Console for tables and status lines."""
    if no_color:
        return Console(no_color=True, highlight=False, color_system=None)
    return Console()


def load_entries(path: Path) -> list[dict[str, Any]]:
    """Load CSL-JSON entries from a file.

    The file holds either a JSON array of entries or a single entry.
    """
    try:
        data = msgspec.json.decode(path.read_bytes())
    except msgspec.DecodeError as e:
        raise click.ClickException(f"Invalid CSL-JSON in {path}: {e}")

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise click.ClickException(f"Expected a list of entries in {path}")
    return data


class BibciteGroup(click.Group):
    """Command group reporting unexpected errors without a traceback."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except (click.ClickException, click.Abort, Exit):
            raise
        except KeyboardInterrupt:
            click.echo("Interrupted", err=True)
            ctx.exit(130)
        except Exception as e:
            if isinstance(ctx.obj, Context) and ctx.obj.debug:
                raise
            logger.debug("Unhandled error", exc_info=True)
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


@click.group(cls=BibciteGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.version_option(
    version=__version__, prog_name="bibcite", message="bibcite version %(version)s"
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
    config: Path | None,
) -> None:
    """Format CSL-JSON bibliographies.

    Output CSL-JSON, BibTeX or a rendered bibliography in one of the
    built-in citation styles.
    """
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)

    try:
        config_data = load_config(config)
    except ValueError as e:
        if debug:
            raise
        click.echo(f"Error loading config file: {e}", err=True)
        ctx.exit(1)

    ctx.obj = Context(
        console=create_console(no_color=no_color),
        config=config_data,
        debug=debug,
    )


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--type",
    "-t",
    "output_type",
    type=click.Choice([t.value for t in OutputType]),
    help="Output type (default: string)",
)
@click.option("--style", "-s", help="csl, bibtex or citation-<style>")
@click.option("--lang", "-l", help="RFC 5646 language of the output")
@click.option(
    "--locale-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Custom locale JSON",
)
@click.option(
    "--template-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Custom style template JSON",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write to file instead of stdout",
)
@click.pass_obj
def get(
    obj: Context,
    file: Path,
    output_type: str | None,
    style: str | None,
    lang: str | None,
    locale_file: Path | None,
    template_file: Path | None,
    output: Path | None,
) -> None:
    """Format the entries in FILE."""
    defaults = output_options(obj.config)
    cite = Cite(load_entries(file), options=defaults, renderer=None)

    options = {
        "format": "string",
        "type": output_type or defaults.get("type") or "string",
        "style": style,
        "lang": lang,
    }
    if locale_file:
        options["locale"] = locale_file.read_text(encoding="utf-8")
    if template_file:
        options["template"] = template_file.read_text(encoding="utf-8")

    try:
        result = cite.get(options)
    except BibciteError as e:
        raise click.ClickException(str(e))

    if result is None:
        raise click.ClickException(
            f"Invalid options: type {options['type']!r} "
            f"with style {style or defaults.get('style', 'csl')!r}"
        )

    if output:
        output.write_text(result, encoding="utf-8")
        obj.console.print(f"[green]✓[/green] Wrote {len(cite)} entries to {output}")
    else:
        click.echo(result)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def ids(file: Path) -> None:
    """List the entry IDs in FILE."""
    for item_id in Cite(load_entries(file), renderer=None).get_ids():
        click.echo(item_id)


@cli.command()
@click.pass_obj
def styles(obj: Context) -> None:
    """List built-in citation styles."""
    table = Table(title="Citation styles")
    table.add_column("Style", style="cyan")
    table.add_column("Name")
    table.add_column("Format", style="dim")

    for info in get_style_registry().list_styles(detailed=True):
        table.add_row(f"citation-{info['id']}", info["title"], info["citation-format"])

    obj.console.print(table)


@cli.command()
@click.pass_obj
def locales(obj: Context) -> None:
    """List built-in locales."""
    table = Table(title="Locales")
    table.add_column("Language", style="cyan")
    table.add_column("and")
    table.add_column("et al.")

    for lang, data in LOCALES.items():
        table.add_row(lang, data["terms"]["and"], data["terms"]["et-al"])

    obj.console.print(table)


def main() -> None:
    """Entry point for the bibcite command."""
    cli()


if __name__ == "__main__":
    main()
