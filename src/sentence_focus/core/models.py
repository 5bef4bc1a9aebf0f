"""Core value types for sentence resolution and highlighting.

All offsets are absolute document offsets unless stated otherwise.  Spans
follow the half‑open interval convention ``[start, end)`` where ``start`` is
inclusive and ``end`` is exclusive, so spans touching at a boundary do not
overlap.  Every type here is immutable; a changed configuration or line is a
new value.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from sentence_focus.utils.errors import SpanOutOfBoundsError

DEFAULT_SENTENCE_DELIMITERS = ".!?"
DEFAULT_EXTRA_CHARACTERS = "*“”‘’"
DEFAULT_TITLES = ("Mr.", "Ms.", "Mrs.")


class HighlightRole(Enum):
    """Role of a highlight span.  Values are the CSS classes hosts apply."""

    ACTIVE_SENTENCE = "active-sentence"
    ACTIVE_PARAGRAPH = "active-paragraph"


@dataclass(slots=True, frozen=True)
class Line:
    """One line of a document.

    ``start`` is the absolute offset of the first character and ``text`` the
    raw line content without its terminating newline.
    """

    start: int
    text: str

    def __post_init__(self) -> None:
        if self.start < 0:
            raise SpanOutOfBoundsError(f"invalid line start {self.start}")

    @property
    def end(self) -> int:
        """Absolute offset one past the last character."""

        return self.start + len(self.text)

    @property
    def length(self) -> int:
        return len(self.text)

    def contains(self, pos: int) -> bool:
        """Return ``True`` if ``pos`` is a valid cursor offset on this line."""

        return self.start <= pos <= self.end


@dataclass(slots=True, frozen=True)
class SentenceBounds:
    """Absolute sentence bounds; ``end`` is ``None`` when the sentence is open."""

    start: int
    end: int | None

    @property
    def is_open(self) -> bool:
        return self.end is None

    def resolve_end(self, line: Line) -> int:
        """Return ``end`` or, for an open sentence, the end of ``line``."""

        return line.end if self.end is None else self.end


@dataclass(slots=True, frozen=True)
class HighlightSpan:
    """A highlighted region of a line."""

    start: int
    end: int
    role: HighlightRole

    def __post_init__(self) -> None:
        if self.end <= self.start or self.start < 0:
            raise SpanOutOfBoundsError(f"invalid span [{self.start}, {self.end})")

    @property
    def length(self) -> int:
        return self.end - self.start


def _split_titles(titles: str | Iterable[str]) -> tuple[str, ...]:
    entries = titles.split("\n") if isinstance(titles, str) else list(titles)
    # An empty title would match before every delimiter.
    return tuple(dict.fromkeys(t for t in entries if t))


@dataclass(slots=True, frozen=True)
class SentenceConfig:
    """Character sets driving the boundary scans.

    ``titles`` should each end with a member of ``delimiters``; entries that do
    not are kept but can never suppress a boundary.
    """

    delimiters: frozenset[str]
    extra_characters: frozenset[str]
    titles: tuple[str, ...] = ()

    @classmethod
    def from_strings(
        cls,
        sentence_delimiters: str,
        extra_characters: str,
        titles: str | Iterable[str] = (),
    ) -> "SentenceConfig":
        """Build a config from raw settings strings.

        Delimiter and extra strings are split into single characters; a titles
        string is split on newlines.
        """

        return cls(
            delimiters=frozenset(sentence_delimiters),
            extra_characters=frozenset(extra_characters),
            titles=_split_titles(titles),
        )

    @classmethod
    def default(cls) -> "SentenceConfig":
        return cls.from_strings(DEFAULT_SENTENCE_DELIMITERS, DEFAULT_EXTRA_CHARACTERS, DEFAULT_TITLES)

    def replace(self, **changes: object) -> "SentenceConfig":
        """Return a copy with ``changes`` applied."""

        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]


__all__ = [
    "DEFAULT_SENTENCE_DELIMITERS",
    "DEFAULT_EXTRA_CHARACTERS",
    "DEFAULT_TITLES",
    "HighlightRole",
    "Line",
    "SentenceBounds",
    "HighlightSpan",
    "SentenceConfig",
]
