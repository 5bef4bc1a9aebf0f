"""Editor-facing focus state.

:class:`FocusSession` mirrors what an editor host does with the projector:
spans are recomputed from scratch whenever the document or the selection
changes, and highlighting is switched off while the view scrolls until the
next edit or cursor move.  The session holds no reference to any editor
object; the host feeds it the document text and the cursor offset.
"""

from __future__ import annotations

from sentence_focus.config.schema import ConfigModel
from sentence_focus.core.models import HighlightSpan, Line, SentenceConfig
from sentence_focus.project.highlight import project_highlights
from sentence_focus.utils.logging import get_logger
from sentence_focus.utils.textspan import line_at

logger = get_logger(__name__)


class FocusSession:
    """Track highlight spans and the highlighting-active flag for one view."""

    def __init__(self, config: SentenceConfig, *, reset_on_scroll: bool = True) -> None:
        self._config = config
        self.reset_on_scroll = reset_on_scroll
        self._text = ""
        self._cursor = 0
        self._line = Line(0, "")
        self._spans: list[HighlightSpan] = []
        self.active = False

    @classmethod
    def open(
        cls,
        text: str,
        cursor: int,
        config: SentenceConfig,
        *,
        reset_on_scroll: bool = True,
    ) -> "FocusSession":
        """Create a session and compute the initial spans."""

        session = cls(config, reset_on_scroll=reset_on_scroll)
        session._recompute(text, cursor)
        return session

    @classmethod
    def from_config(cls, cfg: ConfigModel, text: str, cursor: int) -> "FocusSession":
        """Create a session from a loaded :class:`ConfigModel`."""

        return cls.open(
            text, cursor, cfg.sentence_config(), reset_on_scroll=cfg.highlight.reset_on_scroll
        )

    @property
    def config(self) -> SentenceConfig:
        return self._config

    @property
    def line(self) -> Line:
        """The line containing the cursor at the last recomputation."""

        return self._line

    @property
    def spans(self) -> list[HighlightSpan]:
        """Spans from the last recomputation, regardless of ``active``."""

        return list(self._spans)

    @property
    def visible_spans(self) -> list[HighlightSpan]:
        """Spans the host should render right now."""

        return list(self._spans) if self.active else []

    def update(
        self,
        text: str,
        cursor: int,
        *,
        doc_changed: bool = False,
        selection_set: bool = False,
    ) -> bool:
        """Handle a view update.

        Returns ``True`` when the spans were recomputed.  Updates that neither
        change the document nor move the selection are ignored.
        """

        if not (doc_changed or selection_set):
            return False
        self._recompute(text, cursor)
        return True

    def scroll(self) -> None:
        """Handle a scroll event by turning highlighting off."""

        if self.reset_on_scroll and self.active:
            logger.debug("scroll: highlighting off")
            self.active = False

    def reconfigure(self, config: SentenceConfig) -> None:
        """Swap in ``config`` and recompute the spans for the current state."""

        self._config = config
        self._recompute(self._text, self._cursor)

    def _recompute(self, text: str, cursor: int) -> None:
        line = line_at(text, cursor)
        self._text = text
        self._cursor = cursor
        self._line = line
        self._spans = project_highlights(line, cursor, self._config)
        self.active = True
        logger.debug("recomputed %d spans for line at %d", len(self._spans), line.start)


__all__ = ["FocusSession"]
