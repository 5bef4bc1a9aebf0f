from dataclasses import FrozenInstanceError

import pytest

from sentence_focus.core.models import (
    HighlightRole,
    HighlightSpan,
    Line,
    SentenceBounds,
    SentenceConfig,
)
from sentence_focus.utils.errors import SpanOutOfBoundsError


def test_line_fields() -> None:
    line = Line(10, "Hello.")
    assert line.end == 16
    assert line.length == 6
    assert line.contains(10) and line.contains(16)
    assert not line.contains(9) and not line.contains(17)


def test_line_negative_start() -> None:
    with pytest.raises(SpanOutOfBoundsError):
        Line(-1, "x")


def test_sentence_bounds_resolve_end() -> None:
    line = Line(0, "abc")
    assert SentenceBounds(0, None).is_open
    assert SentenceBounds(0, None).resolve_end(line) == 3
    assert SentenceBounds(0, 2).resolve_end(line) == 2


def test_highlight_span_immutable() -> None:
    span = HighlightSpan(0, 4, HighlightRole.ACTIVE_SENTENCE)
    assert span.length == 4
    with pytest.raises(FrozenInstanceError):
        span.start = 1  # type: ignore[misc]


@pytest.mark.parametrize("start,end", [(-1, 2), (5, 5), (4, 3)])
def test_highlight_span_validation(start: int, end: int) -> None:
    with pytest.raises(ValueError):
        HighlightSpan(start, end, HighlightRole.ACTIVE_PARAGRAPH)


def test_role_values_are_css_classes() -> None:
    assert HighlightRole.ACTIVE_SENTENCE.value == "active-sentence"
    assert HighlightRole.ACTIVE_PARAGRAPH.value == "active-paragraph"


def test_config_from_strings() -> None:
    cfg = SentenceConfig.from_strings(".!", "*”", "Mr.\nDr.\n\nMr.")
    assert cfg.delimiters == frozenset({".", "!"})
    assert cfg.extra_characters == frozenset({"*", "”"})
    assert cfg.titles == ("Mr.", "Dr.")


def test_config_titles_list_and_empty() -> None:
    assert SentenceConfig.from_strings(".", "", ["Ms.", ""]).titles == ("Ms.",)
    assert SentenceConfig.from_strings(".", "", "").titles == ()


def test_config_default_and_replace() -> None:
    cfg = SentenceConfig.default()
    assert cfg.delimiters == frozenset(".!?")
    assert cfg.extra_characters == frozenset("*“”‘’")
    assert cfg.titles == ("Mr.", "Ms.", "Mrs.")
    changed = cfg.replace(titles=())
    assert changed.titles == ()
    assert cfg.titles == ("Mr.", "Ms.", "Mrs.")


def test_config_titles_split_on_newline_only() -> None:
    cfg = SentenceConfig.from_strings(".", "", "Mr. Dr.\x0cSt.\nMs.")
    assert cfg.titles == ("Mr. Dr.\x0cSt.", "Ms.")
