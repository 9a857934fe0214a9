"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import logging
import random

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gamestate import GameRecord, GameState
from npuzzle.models.errors import IllegalMoveError, PuzzleError
from npuzzle.models.puzzle import Direction, Puzzle
from npuzzle.models.sequence import parse_sequence

_LOGGER = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        self.size = size
        puzzle = GameGenerator.generate(size, rng)
        self.state = GameState(puzzle)

    @classmethod
    def from_puzzle(cls, puzzle: Puzzle) -> GamePlay:
        """Create a game session from an existing puzzle."""
        obj = object.__new__(cls)
        obj.size = puzzle.side
        obj.state = GameState(puzzle)
        return obj

    @classmethod
    def from_record(cls, record: GameRecord) -> GamePlay:
        """Rebuild a saved game by replaying its moves on its initial state.

        Raises a ``PuzzleError`` if either field is corrupt or a recorded
        move is illegal.
        """
        puzzle = Puzzle.from_string(record.initial_state)
        initial_state = puzzle.to_string()
        history = parse_sequence(record.moves)
        puzzle.move_tiles(history)
        _LOGGER.debug("Replayed %d moves on a %d-puzzle", len(history), puzzle.n)

        obj = object.__new__(cls)
        obj.size = puzzle.side
        obj.state = GameState(
            puzzle,
            initial_state=initial_state,
            history=history,
            elapsed_time=record.elapsed_time,
        )
        return obj

    @classmethod
    def restore(
        cls, record: GameRecord, size: int, rng: random.Random | None = None
    ) -> GamePlay:
        """Like :meth:`from_record`, but start a new game if *record* is unusable."""
        try:
            return cls.from_record(record)
        except PuzzleError as exc:
            _LOGGER.warning(
                "Saved game could not be restored (%s); starting a new %d×%d game",
                exc,
                size,
                size,
            )
            return cls(size, rng)

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the empty slot.

        E.g. ``Direction.UP`` moves the tile **below** the empty slot upward.
        Returns True if the move was valid.
        """
        puzzle = self.state.puzzle
        for position in puzzle.neighbours(puzzle.empty_position):
            if puzzle.move_direction_at(position) == direction:
                puzzle.move_at(position)
                return True
        return False

    def move_tile(self, tile: int) -> bool:
        """Move *tile* into the adjacent empty slot.

        Returns True if the tile was adjacent to the empty slot and the
        move was applied.
        """
        try:
            self.state.puzzle.move_tile(tile)
        except IllegalMoveError:
            return False
        return True

    # -- queries --------------------------------------------------------------

    @property
    def puzzle(self) -> Puzzle:
        return self.state.puzzle

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
