"""Typed exceptions for span validation and cursor handling."""


class SpanError(ValueError):
    """Base class for span related errors."""


class OverlapError(SpanError):
    """Raised when two highlight spans overlap."""


class SpanOutOfBoundsError(SpanError):
    """Raised when span coordinates are invalid or out of bounds."""


class CursorOutOfBoundsError(SpanOutOfBoundsError):
    """Raised when a cursor offset falls outside the line it is resolved against."""
