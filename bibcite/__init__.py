"""Output formatting for CSL-JSON bibliography collections.

The :class:`~bibcite.cite.Cite` collection turns a list of CSL-JSON entries
into CSL-JSON, BibTeX, or a rendered bibliography in one of the built-in or
custom citation styles.
"""

__version__ = "0.3.0"

from bibcite.cite import Cite

__all__ = ["Cite", "__version__"]
