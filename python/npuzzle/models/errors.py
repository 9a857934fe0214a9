"""Errors raised by the puzzle engine."""

from __future__ import annotations


class PuzzleError(ValueError):
    """Base class for every error raised by the engine."""


class InvalidSizeError(PuzzleError):
    """``n`` or the side length is out of range or not a square board."""


class InvalidConfigurationError(PuzzleError):
    """A tile configuration has the wrong length, a bad value or a repeat."""


class InvalidTileError(PuzzleError):
    """A tile id outside ``0..n``."""


class InvalidPositionError(PuzzleError):
    """A board position outside ``0..n``."""


class IllegalMoveError(PuzzleError):
    """The tile is valid but not next to the empty tile."""


class ParseError(PuzzleError):
    """Malformed text handed to :func:`parse_sequence`."""
