"""Puzzle model for the N-puzzle engine.

A puzzle of capacity ``n`` is a square board of ``n + 1`` cells holding the
tiles ``0..n``.  Tile ``n`` is the empty tile.  Positions are row-major, so
on a 4×4 board position 0 is the top-left cell and position 15 the
bottom-right one.  The puzzle is solved when every tile ``i`` sits at
position ``i``.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable
from enum import StrEnum
from inspect import ismethod
from math import isqrt
from typing import Protocol

from npuzzle.models.errors import (
    IllegalMoveError,
    InvalidConfigurationError,
    InvalidPositionError,
    InvalidSizeError,
    InvalidTileError,
)
from npuzzle.models.sequence import format_sequence, parse_sequence

_LOGGER = logging.getLogger(__name__)

MIN_N = 3
MAX_N = 2**31 - 2
MIN_SIDE = 2
MAX_SIDE = isqrt(2**31 - 1)

# Random moves applied per tile when shuffling a solved puzzle.
SHUFFLE_MOVES_PER_TILE = 100


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class TileListener(Protocol):
    """Callback fired once per completed move."""

    def __call__(self, tile: int, old_position: int, new_position: int) -> None: ...


# -- validation helpers -------------------------------------------------------


def _check_n(n: int) -> None:
    if not MIN_N <= n <= MAX_N:
        raise InvalidSizeError(f"N must be between {MIN_N} and {MAX_N}, got {n}.")
    if isqrt(n + 1) ** 2 != n + 1:
        raise InvalidSizeError(f"N + 1 must be a perfect square, got N = {n}.")


def _n_from_side(side: int) -> int:
    if not MIN_SIDE <= side <= MAX_SIDE:
        raise InvalidSizeError(
            f"Side must be between {MIN_SIDE} and {MAX_SIDE}, got {side}."
        )
    return side * side - 1


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_configuration(n: int, config: Iterable[int]) -> list[int]:
    positions = list(config)
    if len(positions) != n + 1:
        raise InvalidConfigurationError(
            f"Expected {n + 1} tile positions for N = {n}, got {len(positions)}."
        )
    used = [False] * (n + 1)
    for tile, pos in enumerate(positions):
        if not _is_index(pos) or not 0 <= pos <= n:
            raise InvalidConfigurationError(
                f"Invalid position {pos!r} for tile {tile}. "
                f"Must be between 0 and {n}."
            )
        if used[pos]:
            raise InvalidConfigurationError(f"Repeated tile position: {pos}.")
        used[pos] = True
    return positions


def _same_listener(a: TileListener, b: TileListener) -> bool:
    # Bound methods are created on every attribute access.
    if a is b:
        return True
    return (
        ismethod(a)
        and ismethod(b)
        and a.__self__ is b.__self__
        and a.__func__ is b.__func__
    )


class Puzzle:
    """A sliding-tile puzzle with ``n + 1`` tiles, tile ``n`` being empty.

    Two arrays are kept in sync: ``tile_positions[tile]`` is the position of
    a tile and ``position_contents[position]`` is the tile at a position.
    Both are only ever written by :meth:`_swap_with_empty`, so they stay
    inverse permutations of ``0..n``.

    Build instances with the ``solved*``, ``from_*`` and ``random_solvable*``
    class methods.
    """

    def __init__(self, n: int, tile_positions: Iterable[int]) -> None:
        _check_n(n)
        positions = _check_configuration(n, tile_positions)
        contents = [0] * (n + 1)
        for tile, pos in enumerate(positions):
            contents[pos] = tile

        self._n = n
        self._side = isqrt(n + 1)
        self._tile_positions: list[int] = positions
        self._position_contents: list[int] = contents
        self._listeners: list[TileListener] = []

    # -- construction ---------------------------------------------------------

    @classmethod
    def solved(cls, n: int) -> Puzzle:
        """Return the solved puzzle of capacity *n*."""
        return cls(n, range(n + 1))

    @classmethod
    def solved_from_side(cls, side: int) -> Puzzle:
        return cls.solved(_n_from_side(side))

    @classmethod
    def from_configuration(cls, n: int, config: Iterable[int]) -> Puzzle:
        """Create a puzzle where tile ``t`` sits at position ``config[t]``.

        The configuration does not need to be solvable.
        """
        return cls(n, config)

    @classmethod
    def from_configuration_side(cls, side: int, config: Iterable[int]) -> Puzzle:
        return cls(_n_from_side(side), config)

    @classmethod
    def from_string(cls, text: str) -> Puzzle:
        """Create a puzzle from the output of :meth:`to_string`."""
        positions = parse_sequence(text)
        return cls(len(positions) - 1, positions)

    @classmethod
    def random_solvable(cls, n: int, rng: random.Random | None = None) -> Puzzle:
        """Shuffle the solved puzzle with ``100 × n`` random legal moves.

        Every move is legal, so the result is always solvable.  It may
        still come out solved; see ``GameGenerator.generate`` for a
        non-trivial puzzle.
        """
        puzzle = cls.solved(n)
        num_moves = SHUFFLE_MOVES_PER_TILE * n
        puzzle._shuffle(num_moves, rng.choice if rng is not None else random.choice)
        _LOGGER.debug("Shuffled %d-puzzle with %d random moves", n, num_moves)
        return puzzle

    @classmethod
    def random_solvable_side(
        cls, side: int, rng: random.Random | None = None
    ) -> Puzzle:
        return cls.random_solvable(_n_from_side(side), rng)

    # -- queries --------------------------------------------------------------

    @property
    def n(self) -> int:
        return self._n

    @property
    def num_tiles(self) -> int:
        return self._n + 1

    @property
    def side(self) -> int:
        return self._side

    @property
    def empty_tile(self) -> int:
        return self._n

    @property
    def empty_position(self) -> int:
        return self._tile_positions[self._n]

    @property
    def tile_positions(self) -> tuple[int, ...]:
        return tuple(self._tile_positions)

    @property
    def position_contents(self) -> tuple[int, ...]:
        return tuple(self._position_contents)

    def tile_position(self, tile: int) -> int:
        self._check_tile(tile)
        return self._tile_positions[tile]

    def position_tile(self, position: int) -> int:
        self._check_position(position)
        return self._position_contents[position]

    def rows(self) -> list[list[int]]:
        """Return the board as a row-major matrix of tile ids."""
        side = self._side
        return [
            self._position_contents[r * side : (r + 1) * side] for r in range(side)
        ]

    def neighbours(self, position: int) -> list[int]:
        """Positions orthogonally adjacent to *position* (up, down, left, right)."""
        self._check_position(position)
        return self._neighbours(position)

    def is_solved(self) -> bool:
        return all(pos == tile for tile, pos in enumerate(self._tile_positions))

    # -- movement -------------------------------------------------------------

    def can_move(self, tile: int) -> bool:
        self._check_tile(tile)
        return self._is_next_to_empty(self._tile_positions[tile])

    def can_move_at(self, position: int) -> bool:
        self._check_position(position)
        return self._is_next_to_empty(position)

    def move_tile(self, tile: int) -> None:
        """Slide *tile* into the empty slot.

        Raises ``IllegalMoveError`` if the tile is not next to the empty
        tile (the empty tile itself never moves).
        """
        self._check_tile(tile)
        if tile == self._n:
            raise IllegalMoveError("The empty tile cannot be moved.")
        self.move_at(self._tile_positions[tile])

    def move_at(self, position: int) -> None:
        """Slide the tile at *position* into the empty slot."""
        self._check_position(position)
        if not self._is_next_to_empty(position):
            raise IllegalMoveError(
                f"The tile at position {position} is not next to the empty tile "
                f"(position {self.empty_position})."
            )
        empty_pos = self.empty_position
        tile = self._swap_with_empty(position)
        self._fire_tile_moved(tile, position, empty_pos)

    def move_tiles(self, tiles: Iterable[int]) -> None:
        """Move each tile in order.

        Stops at the first illegal move; earlier moves are kept.
        """
        for tile in tiles:
            self.move_tile(tile)

    def move_at_many(self, positions: Iterable[int]) -> None:
        for position in positions:
            self.move_at(position)

    def move_direction(self, tile: int) -> Direction | None:
        """Return the direction *tile* slides in, or ``None`` if it cannot move."""
        self._check_tile(tile)
        return self.move_direction_at(self._tile_positions[tile])

    def move_direction_at(self, position: int) -> Direction | None:
        self._check_position(position)
        if position == self.empty_position:
            return None
        return self.direction_between(position, self.empty_position)

    def direction_between(self, first: int, second: int) -> Direction | None:
        """Direction to go from position *first* to the adjacent *second*.

        Returns ``None`` when the two positions are not adjacent.
        """
        self._check_position(first)
        self._check_position(second)
        side = self._side
        if second == first - side:
            return Direction.UP
        if second == first + side:
            return Direction.DOWN
        if second == first - 1 and second // side == first // side:
            return Direction.LEFT
        if second == first + 1 and second // side == first // side:
            return Direction.RIGHT
        return None

    # -- solvability ----------------------------------------------------------

    def inversions(self) -> int:
        """Count pairs of non-empty tiles that appear out of numeric order."""
        tiles = [t for t in self._position_contents if t != self._n]
        count = 0
        for i, tile in enumerate(tiles):
            count += sum(1 for other in tiles[i + 1 :] if other < tile)
        return count

    def is_solvable(self) -> bool:
        """Return True if some sequence of legal moves reaches the solved state.

        Odd sides need an even number of inversions.  On even sides each
        vertical move changes both the inversion parity and the row of the
        empty tile, so the sum of the inversions and the empty tile's row
        counted from the bottom must be even.
        """
        inversions = self.inversions()
        if self._side % 2 == 1:
            return inversions % 2 == 0
        row_from_bottom = self._side - 1 - self.empty_position // self._side
        return (inversions + row_from_bottom) % 2 == 0

    # -- listeners ------------------------------------------------------------

    def add_listener(self, listener: TileListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: TileListener) -> None:
        """Unregister *listener*; does nothing if it is not registered."""
        for i in range(len(self._listeners) - 1, -1, -1):
            if _same_listener(self._listeners[i], listener):
                del self._listeners[i]
                return

    # -- serialization --------------------------------------------------------

    def to_string(self) -> str:
        """Encode the tile positions, tile 0 first and the empty tile last."""
        return format_sequence(self._tile_positions)

    def copy(self) -> Puzzle:
        """Return a puzzle with the same configuration and no listeners."""
        return Puzzle(self._n, self._tile_positions)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Puzzle(n={self._n}, tile_positions={self._tile_positions!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Puzzle):
            return NotImplemented
        return self._tile_positions == other._tile_positions

    __hash__ = None  # type: ignore[assignment]

    # -- helpers --------------------------------------------------------------

    def _check_tile(self, tile: int) -> None:
        if not _is_index(tile) or not 0 <= tile <= self._n:
            raise InvalidTileError(
                f"Invalid tile: {tile}. Must be between 0 and {self._n}."
            )

    def _check_position(self, position: int) -> None:
        if not _is_index(position) or not 0 <= position <= self._n:
            raise InvalidPositionError(
                f"Invalid position: {position}. Must be between 0 and {self._n}."
            )

    def _neighbours(self, position: int) -> list[int]:
        side = self._side
        row, col = divmod(position, side)
        result: list[int] = []
        if row > 0:
            result.append(position - side)
        if row < side - 1:
            result.append(position + side)
        if col > 0:
            result.append(position - 1)
        if col < side - 1:
            result.append(position + 1)
        return result

    def _is_next_to_empty(self, position: int) -> bool:
        return self.empty_position in self._neighbours(position)

    def _swap_with_empty(self, position: int) -> int:
        empty_pos = self._tile_positions[self._n]
        tile = self._position_contents[position]
        self._position_contents[empty_pos] = tile
        self._position_contents[position] = self._n
        self._tile_positions[self._n] = position
        self._tile_positions[tile] = empty_pos
        return tile

    def _shuffle(self, num_moves: int, choice: Callable[[list[int]], int]) -> None:
        for _ in range(num_moves):
            self._swap_with_empty(choice(self._neighbours(self.empty_position)))

    def _fire_tile_moved(self, tile: int, old_position: int, new_position: int) -> None:
        # Snapshot: listeners added while notifying wait for the next move.
        for listener in tuple(self._listeners):
            listener(tile, old_position, new_position)
