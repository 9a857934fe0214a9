"""Terminal tool for creating, inspecting and replaying puzzles.

Usage::

    npuzzle new -s 4 --seed 7          # random solvable 4×4 puzzle
    npuzzle show "0 1 2 3 4 5 7 6 8"   # render a saved state
    npuzzle check "0 1 2 3 4 5 7 6 8"  # exit code 0 if solvable, 1 if not
    npuzzle replay STATE "5 8 7"       # apply a saved move history
"""

from __future__ import annotations

import logging
import random
from typing import NoReturn, Optional

import typer
from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from npuzzle.cli.render import render_board, render_status
from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gameplay import GamePlay
from npuzzle.engine.gamestate import GameRecord
from npuzzle.models.errors import PuzzleError
from npuzzle.models.puzzle import MIN_SIDE, Puzzle

# Largest board the terminal tool will draw.
MAX_BOARD_SIDE = 16

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(add_completion=False, no_args_is_help=True)


# -- helpers ------------------------------------------------------------------


def _fail(exc: PuzzleError) -> NoReturn:
    err_console.print(Text.assemble(("Error: ", "bold red"), str(exc)))
    raise typer.Exit(code=2)


def _load(state: str) -> Puzzle:
    try:
        return Puzzle.from_string(state)
    except PuzzleError as exc:
        _fail(exc)


def _print_board(puzzle: Puzzle, title: str) -> None:
    panel = Panel(
        Align.center(render_board(puzzle)),
        title=f"[bold cyan]{title}  {puzzle.side}×{puzzle.side}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(panel)
    console.print(render_status(puzzle))


# -- commands -----------------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine activity to stderr.",
    ),
) -> None:
    """N-puzzle engine tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.command()
def new(
    side: int = typer.Option(
        4, "-s", "--side",
        min=MIN_SIDE, max=MAX_BOARD_SIDE,
        help=f"Board side ({MIN_SIDE}-{MAX_BOARD_SIDE}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible shuffle.",
    ),
    solved: bool = typer.Option(
        False, "--solved",
        help="Create the solved puzzle instead of a shuffled one.",
    ),
) -> None:
    """Create a puzzle and print its state string."""
    if solved:
        puzzle = GameGenerator.solved(side)
    else:
        rng = random.Random(seed) if seed is not None else None
        puzzle = GameGenerator.generate(side, rng)
    typer.echo(puzzle.to_string())
    _print_board(puzzle, "New puzzle")


@app.command()
def show(
    state: str = typer.Argument(..., help="Tile positions, tile 0 first."),
) -> None:
    """Render a saved puzzle state."""
    _print_board(_load(state), "Puzzle")


@app.command()
def check(
    state: str = typer.Argument(..., help="Tile positions, tile 0 first."),
) -> None:
    """Report whether a puzzle state can be solved."""
    puzzle = _load(state)
    solvable = puzzle.is_solvable()
    typer.echo("solvable" if solvable else "unsolvable")
    raise typer.Exit(code=0 if solvable else 1)


@app.command()
def replay(
    state: str = typer.Argument(..., help="Initial tile positions, tile 0 first."),
    moves: str = typer.Argument(..., help="Tile ids moved since the start."),
) -> None:
    """Apply a saved move history and print the resulting state."""
    try:
        game = GamePlay.from_record(GameRecord(initial_state=state, moves=moves))
    except PuzzleError as exc:
        _fail(exc)
    typer.echo(game.puzzle.to_string())
    _print_board(game.puzzle, f"After {game.state.moves} moves")
