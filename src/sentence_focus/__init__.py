"""Highlight the sentence under the cursor in a line of editor text.

The package resolves sentence boundaries around a cursor offset and projects
them onto ``active-sentence``/``active-paragraph`` highlight spans that an
editor host renders as decorations.
"""

from .core.models import HighlightRole, HighlightSpan, Line, SentenceBounds, SentenceConfig
from .project.highlight import project_highlights
from .resolve.boundaries import resolve_sentence_bounds

__version__ = "0.1.0"

__all__ = [
    "HighlightRole",
    "HighlightSpan",
    "Line",
    "SentenceBounds",
    "SentenceConfig",
    "project_highlights",
    "resolve_sentence_bounds",
    "__version__",
]
