"""Utility functions for working with lines and highlight spans.

The helpers in this module are pure and framework agnostic.  Spans are
represented as half‑open intervals ``[start, end)`` where ``start`` is inclusive
and ``end`` is exclusive.  Boundary touching spans therefore do not overlap.
"""

from __future__ import annotations

from bisect import bisect_right

from sentence_focus.core.models import HighlightSpan, Line
from sentence_focus.utils.errors import CursorOutOfBoundsError, OverlapError


def build_line_starts(text: str) -> tuple[int, ...]:
    """Return the starting character index for each line in ``text``."""

    starts = [0]
    for idx, char in enumerate(text):
        if char == "\n":
            starts.append(idx + 1)
    return tuple(starts)


def line_at(text: str, pos: int, line_starts: tuple[int, ...] | None = None) -> Line:
    """Return the :class:`Line` of ``text`` containing offset ``pos``.

    A cursor sitting right before a newline belongs to the line the newline
    terminates.  ``line_starts`` may be passed to avoid rescanning ``text``.
    """

    if not 0 <= pos <= len(text):
        raise CursorOutOfBoundsError(f"cursor {pos} outside document of length {len(text)}")
    starts = line_starts if line_starts is not None else build_line_starts(text)
    idx = bisect_right(starts, pos) - 1
    start = starts[idx]
    end = starts[idx + 1] - 1 if idx + 1 < len(starts) else len(text)
    return Line(start, text[start:end])


def spans_overlap(a: tuple[int, int], b: tuple[int, int]) -> bool:
    """Return ``True`` if span ``a`` overlaps span ``b``."""

    return not (a[1] <= b[0] or b[1] <= a[0])


def ensure_non_overlapping(spans: list[HighlightSpan]) -> None:
    """Ensure that ``spans`` do not overlap.

    Raises :class:`OverlapError` if any pair of spans overlaps.
    """

    ordered = sorted(spans, key=lambda s: s.start)
    for prev, cur in zip(ordered, ordered[1:], strict=False):
        if spans_overlap((prev.start, prev.end), (cur.start, cur.end)):
            msg = f"Spans overlap: {prev} and {cur}"
            raise OverlapError(msg)


__all__ = ["build_line_starts", "line_at", "spans_overlap", "ensure_non_overlapping"]
