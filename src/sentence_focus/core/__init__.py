"""Core value types shared by the resolver, projector and session."""

from .models import HighlightRole, HighlightSpan, Line, SentenceBounds, SentenceConfig

__all__ = ["HighlightRole", "HighlightSpan", "Line", "SentenceBounds", "SentenceConfig"]
