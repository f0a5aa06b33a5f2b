"""Output pipelines for entry collections.

This module selects and runs the pipeline for a requested output type and
style, and turns its text into a live value when asked to.
"""

from .bibliography import (
    get_bibliography,
    get_bibliography_html,
    get_prefixed_entry,
)
from .dispatch import format_output
from .materialize import materialize
from .pipelines import (
    Pipeline,
    select_pipeline,
)

__all__ = [
    "format_output",
    "select_pipeline",
    "Pipeline",
    "get_bibliography",
    "get_bibliography_html",
    "get_prefixed_entry",
    "materialize",
]
