"""Errors raised while separating images."""


class SeparatorError(Exception):
    """Base class for all image separation errors."""


class InvalidArgument(SeparatorError, ValueError):
    """Grid specification is invalid or would produce a zero-size tile."""


class DecodeError(SeparatorError, IOError):
    """Input image is missing, unreadable or in an unknown format."""


class EncodeError(SeparatorError, IOError):
    """A tile could not be written in the input's format."""
