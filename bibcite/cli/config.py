"""CLI settings read from YAML files and the environment.

Files are read in order, later ones overriding earlier ones:

1. ``$XDG_CONFIG_HOME/bibcite/config.yaml``
2. ``.bibcite.yaml`` in the working directory
3. ``bibcite.yaml`` in the working directory

``BIBCITE_STYLE`` and ``BIBCITE_LANG`` override the ``output`` section.
"""

import os
from pathlib import Path
from typing import Any

import yaml

ENV_OUTPUT_KEYS = {"BIBCITE_STYLE": "style", "BIBCITE_LANG": "lang"}


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse one YAML settings file; an empty file gives no settings."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Error reading config file: {e}")

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


def default_config_paths() -> list[Path]:
    """Settings files, lowest precedence first."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return [
        Path(base) / "bibcite" / "config.yaml",
        Path(".bibcite.yaml"),
        Path("bibcite.yaml"),
    ]


def merge(base: dict[str, Any], other: dict[str, Any]) -> dict[str, Any]:
    """Combine two settings mappings, recursing into nested sections."""
    merged = dict(base)
    for key, value in other.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Collect settings for one CLI run.

    An explicit ``path`` replaces the default locations.
    """
    if path is not None:
        config = read_config_file(path)
    else:
        config = {}
        for candidate in default_config_paths():
            if candidate.exists():
                config = merge(config, read_config_file(candidate))

    env = {
        key: os.environ[var]
        for var, key in ENV_OUTPUT_KEYS.items()
        if os.environ.get(var)
    }
    return merge(config, {"output": env}) if env else config


def output_options(config: dict[str, Any]) -> dict[str, Any]:
    """Instance-level output options from a configuration."""
    output = config.get("output") or {}
    if not isinstance(output, dict):
        raise ValueError("Config key 'output' must be a mapping")
    return output
