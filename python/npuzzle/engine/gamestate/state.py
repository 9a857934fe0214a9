"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time
from dataclasses import dataclass

from npuzzle.models.puzzle import Puzzle
from npuzzle.models.sequence import format_sequence


@dataclass
class GameRecord:
    """The persisted form of a game.

    ``initial_state`` is :meth:`Puzzle.to_string` at game start and
    ``moves`` the space-separated tile ids moved since then.
    """

    initial_state: str
    moves: str = ""
    elapsed_time: float = 0.0


class GameState:
    """Holds the puzzle, its move history, and elapsed time.

    The history is fed by the puzzle's move notifications, so every
    successful move is recorded whoever makes it.
    """

    def __init__(
        self,
        puzzle: Puzzle,
        initial_state: str | None = None,
        history: list[int] | None = None,
        elapsed_time: float = 0.0,
    ) -> None:
        self.puzzle = puzzle
        self.initial_state: str = (
            puzzle.to_string() if initial_state is None else initial_state
        )
        self.history: list[int] = [] if history is None else list(history)
        self._start_time: float = time.time()
        self._elapsed_banked: float = elapsed_time
        self._running: bool = True
        puzzle.add_listener(self._on_tile_moved)

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    @property
    def is_running(self) -> bool:
        return self._running

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.time()
            self._running = True

    # -- moves ----------------------------------------------------------------

    @property
    def moves(self) -> int:
        return len(self.history)

    @property
    def is_solved(self) -> bool:
        return self.puzzle.is_solved()

    def detach(self) -> None:
        """Stop recording moves made on the puzzle."""
        self.puzzle.remove_listener(self._on_tile_moved)

    def _on_tile_moved(self, tile: int, old_position: int, new_position: int) -> None:
        self.history.append(tile)

    # -- persistence ----------------------------------------------------------

    def to_record(self) -> GameRecord:
        return GameRecord(
            initial_state=self.initial_state,
            moves=format_sequence(self.history),
            elapsed_time=self.elapsed_time,
        )
