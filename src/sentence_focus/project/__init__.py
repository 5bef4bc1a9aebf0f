"""Projection of sentence bounds onto highlight spans."""

from .highlight import active_sentence_text, project_highlights

__all__ = ["active_sentence_text", "project_highlights"]
