"""Generates solvable puzzles for new games."""

from __future__ import annotations

import logging
import random

from npuzzle.models.puzzle import Puzzle

_LOGGER = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved(side: int) -> Puzzle:
        """Return the goal-state puzzle (all tiles in order, empty bottom-right)."""
        return Puzzle.solved_from_side(side)

    @staticmethod
    def generate(side: int, rng: random.Random | None = None) -> Puzzle:
        """Return a random *solvable* puzzle that is not already solved."""
        puzzle = Puzzle.random_solvable_side(side, rng)
        while puzzle.is_solved():
            _LOGGER.debug(
                "Shuffle of %d×%d board came out solved, rolling again", side, side
            )
            puzzle = Puzzle.random_solvable_side(side, rng)
        return puzzle
