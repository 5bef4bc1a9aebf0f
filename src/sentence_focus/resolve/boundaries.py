"""Sentence boundary resolution around a cursor.

Given a :class:`~sentence_focus.core.models.Line` and a cursor offset, the
resolver scans left from the cursor for the delimiter that closes the
previous sentence and right from the cursor for the delimiter that closes the
current one.  It is a best‑effort character heuristic, not a tokenizer:

* a delimiter completing one of the configured titles (``Mr.``) is skipped;
* runs of delimiters (``...``, ``?!``) are absorbed into one boundary;
* extra characters (closing quotes, ``*``) trailing the delimiter belong to
  the sentence they close;
* spaces after the previous sentence are not part of the current one.

Scanning never crosses the line.  If no closing delimiter exists to the right
the end is *open* (``None``) and the caller decides what it means.  Degenerate
inputs such as an empty line or an empty delimiter set produce a result and
never raise.
"""

from __future__ import annotations

from collections.abc import Iterable

from sentence_focus.core.models import Line, SentenceBounds, SentenceConfig
from sentence_focus.utils.errors import CursorOutOfBoundsError


def ends_with_title(text: str, titles: Iterable[str], index: int) -> bool:
    """Return ``True`` if a title ends exactly at ``text[index]``.

    ``index`` is the position of a candidate delimiter.  Titles longer than
    the text up to and including ``index`` cannot match.
    """

    for title in titles:
        begin = index + 1 - len(title)
        if begin >= 0 and text[begin : index + 1] == title:
            return True
    return False


def find_sentence_start(text: str, rel: int, config: SentenceConfig) -> int:
    """Return the line‑relative start of the sentence containing ``rel``."""

    delimiters = config.delimiters
    extras = config.extra_characters
    n = len(text)
    for i in range(rel - 1, -1, -1):
        if text[i] not in delimiters or ends_with_title(text, config.titles, i):
            continue

        offset = 1
        while i + offset < min(rel, n) and text[i + offset] == " ":
            offset += 1
        # Closing quotes or emphasis markers glued to the delimiter.
        while (
            i + offset < min(rel, n)
            and text[i + offset] in extras
            and text[i + offset - 1] in delimiters
        ):
            offset += 1
        return i + offset
    return 0


def find_sentence_end(text: str, rel: int, config: SentenceConfig) -> int | None:
    """Return the line‑relative end of the sentence containing ``rel``.

    The end includes absorbed delimiters and extra characters.  ``None`` means
    no closing delimiter exists between ``rel`` and the end of the line.
    """

    delimiters = config.delimiters
    extras = config.extra_characters
    n = len(text)
    for i in range(rel, n):
        if text[i] not in delimiters or ends_with_title(text, config.titles, i):
            continue

        offset = 1
        while i + offset < n and text[i + offset] in delimiters:
            offset += 1
        while i + offset < n and text[i + offset] in extras:
            offset += 1
        return i + offset
    return None


def resolve_sentence_bounds(line: Line, pos: int, config: SentenceConfig) -> SentenceBounds:
    """Resolve absolute sentence bounds for cursor ``pos`` on ``line``.

    Raises :class:`CursorOutOfBoundsError` when ``pos`` lies outside
    ``[line.start, line.end]``.
    """

    if not line.contains(pos):
        raise CursorOutOfBoundsError(
            f"cursor {pos} outside line [{line.start}, {line.end}]"
        )
    rel = pos - line.start
    start = find_sentence_start(line.text, rel, config)
    end = find_sentence_end(line.text, rel, config)
    return SentenceBounds(
        start=line.start + start,
        end=None if end is None else line.start + end,
    )


__all__ = [
    "ends_with_title",
    "find_sentence_start",
    "find_sentence_end",
    "resolve_sentence_bounds",
]
