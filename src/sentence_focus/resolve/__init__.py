"""Sentence boundary resolution."""

from .boundaries import ends_with_title, resolve_sentence_bounds

__all__ = ["ends_with_title", "resolve_sentence_bounds"]
