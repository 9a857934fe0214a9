"""Sliding-tile puzzle (N-puzzle) engine."""

from npuzzle.engine import GameGenerator, GamePlay, GameRecord, GameState
from npuzzle.models import (
    MAX_N,
    MAX_SIDE,
    MIN_N,
    MIN_SIDE,
    Direction,
    IllegalMoveError,
    InvalidConfigurationError,
    InvalidPositionError,
    InvalidSizeError,
    InvalidTileError,
    ParseError,
    Puzzle,
    PuzzleError,
    TileListener,
    format_sequence,
    parse_sequence,
)

__all__ = [
    "MAX_N",
    "MAX_SIDE",
    "MIN_N",
    "MIN_SIDE",
    "Direction",
    "GameGenerator",
    "GamePlay",
    "GameRecord",
    "GameState",
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
