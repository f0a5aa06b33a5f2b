"""HTML markup helpers."""

from bs4 import BeautifulSoup
from bs4.element import PageElement

PARSER = "html.parser"


def strip_tags(markup: str) -> str:
    """Remove every tag from markup and decode character references."""
    if not markup:
        return ""
    return BeautifulSoup(markup, PARSER).get_text()


def render_fragment(markup: str) -> list[PageElement]:
    """Parse markup into its top-level nodes.

    The nodes are detached from the parser's document, so callers can
    insert them into another tree.
    """
    soup = BeautifulSoup(markup, PARSER)
    return [node.extract() for node in list(soup.contents)]
