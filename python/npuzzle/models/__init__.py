from npuzzle.models.errors import (
    IllegalMoveError,
    InvalidConfigurationError,
    InvalidPositionError,
    InvalidSizeError,
    InvalidTileError,
    ParseError,
    PuzzleError,
)
from npuzzle.models.puzzle import (
    MAX_N,
    MAX_SIDE,
    MIN_N,
    MIN_SIDE,
    Direction,
    Puzzle,
    TileListener,
)
from npuzzle.models.sequence import format_sequence, parse_sequence

__all__ = [
    "MAX_N",
    "MAX_SIDE",
    "MIN_N",
    "MIN_SIDE",
    "Direction",
    "IllegalMoveError",
    "InvalidConfigurationError",
    "InvalidPositionError",
    "InvalidSizeError",
    "InvalidTileError",
    "ParseError",
    "Puzzle",
    "PuzzleError",
    "TileListener",
    "format_sequence",
    "parse_sequence",
]
