from __future__ import annotations


class BitmapError(Exception):
    """Base class for errors reported by bitmapkit."""


class DecodeError(BitmapError):
    """A bitmap file could not be opened or read."""


class EncodeError(BitmapError):
    """A bitmap file could not be opened or written."""


class InvalidParameter(BitmapError, ValueError):
    """A filter parameter was rejected before the filter ran."""
