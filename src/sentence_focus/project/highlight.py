"""Project resolved sentence bounds onto highlight spans for one line.

The projector is the only consumer of the resolver.  It adds one rule on top
of it: when the cursor has no closing delimiter to its right (typically
because it sits just after the last sentence of the line) the search is
retried one character to the left so that the sentence just finished stays
highlighted.

Output spans are ordered left to right, never overlap and together cover the
line exactly when the line is non‑empty:

``[line.start, start)`` active-paragraph, ``[start, end)`` active-sentence,
``[end, line.end)`` active-paragraph, omitting empty pieces.
"""

from __future__ import annotations

from sentence_focus.core.models import HighlightRole, HighlightSpan, Line, SentenceBounds, SentenceConfig
from sentence_focus.resolve.boundaries import resolve_sentence_bounds
from sentence_focus.utils.logging import get_logger

logger = get_logger(__name__)


def _bounds_with_retry(line: Line, pos: int, config: SentenceConfig) -> SentenceBounds:
    bounds = resolve_sentence_bounds(line, pos, config)
    if bounds.is_open and pos > line.start:
        logger.debug("open sentence at %d, retrying at %d", pos, pos - 1)
        bounds = resolve_sentence_bounds(line, pos - 1, config)
    return bounds


def project_highlights(line: Line, pos: int, config: SentenceConfig) -> list[HighlightSpan]:
    """Return the highlight spans for cursor ``pos`` on ``line``.

    An empty line yields no spans.  When the resolved sentence is empty the
    whole line is emitted as a single active-paragraph span.
    """

    bounds = _bounds_with_retry(line, pos, config)
    start = bounds.start
    end = bounds.resolve_end(line)

    spans: list[HighlightSpan] = []
    if start != end:
        if start > line.start:
            spans.append(HighlightSpan(line.start, start, HighlightRole.ACTIVE_PARAGRAPH))
        spans.append(HighlightSpan(start, end, HighlightRole.ACTIVE_SENTENCE))
        if end < line.end:
            spans.append(HighlightSpan(end, line.end, HighlightRole.ACTIVE_PARAGRAPH))
    elif line.length:
        spans.append(HighlightSpan(line.start, line.end, HighlightRole.ACTIVE_PARAGRAPH))
    return spans


def active_sentence_text(line: Line, pos: int, config: SentenceConfig) -> str:
    """Return the text of the sentence highlighted for ``pos``, or ``""``."""

    for span in project_highlights(line, pos, config):
        if span.role is HighlightRole.ACTIVE_SENTENCE:
            return line.text[span.start - line.start : span.end - line.start]
    return ""


__all__ = ["project_highlights", "active_sentence_text"]
