"""Shared fixtures and helpers for the puzzle test suite."""

from __future__ import annotations

import random

import pytest

from npuzzle.models.puzzle import Puzzle


class MoveRecorder:
    """Listener that stores every ``(tile, old_position, new_position)``."""

    def __init__(self) -> None:
        self.events: list[tuple[int, int, int]] = []

    def __call__(self, tile: int, old_position: int, new_position: int) -> None:
        self.events.append((tile, old_position, new_position))


def assert_bijection(puzzle: Puzzle) -> None:
    """Both arrays are permutations of ``0..n`` and inverse to each other."""
    positions = puzzle.tile_positions
    contents = puzzle.position_contents
    expected = list(range(puzzle.num_tiles))
    assert sorted(positions) == expected
    assert sorted(contents) == expected
    for tile, pos in enumerate(positions):
        assert contents[pos] == tile
    assert contents[puzzle.empty_position] == puzzle.empty_tile


def random_walk(puzzle: Puzzle, steps: int, rng: random.Random) -> list[int]:
    """Apply *steps* random legal moves and return the moved tile ids."""
    tiles: list[int] = []
    for _ in range(steps):
        position = rng.choice(puzzle.neighbours(puzzle.empty_position))
        tile = puzzle.position_tile(position)
        puzzle.move_tile(tile)
        tiles.append(tile)
    return tiles


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def solved_3x3() -> Puzzle:
    return Puzzle.solved(8)


@pytest.fixture
def solved_4x4() -> Puzzle:
    return Puzzle.solved_from_side(4)


@pytest.fixture
def recorder() -> MoveRecorder:
    return MoveRecorder()
