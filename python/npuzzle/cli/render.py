"""Rich renderables for puzzles."""

from __future__ import annotations

import rich.box
from rich.table import Table
from rich.text import Text

from npuzzle.models.puzzle import Puzzle


def render_board(puzzle: Puzzle) -> Table:
    """Return a Rich Table representing the puzzle grid.

    Tiles already at their goal position are green; the empty tile is a dot.
    """
    width = len(str(puzzle.n))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(puzzle.side):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(puzzle.rows()):
        cells: list[str] = []
        for c, tile in enumerate(row):
            if tile == puzzle.empty_tile:
                cells.append("[dim]·[/dim]")
            elif tile == r * puzzle.side + c:
                cells.append(f"[bold green]{tile:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{tile:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def render_status(puzzle: Puzzle) -> Text:
    """One-line summary: solved / solvable, inversions, empty position."""
    status = Text()
    if puzzle.is_solved():
        status.append("Solved", style="bold green")
    elif puzzle.is_solvable():
        status.append("Solvable", style="bold cyan")
    else:
        status.append("Unsolvable", style="bold red")
    status.append("    Inversions: ", style="dim")
    status.append(str(puzzle.inversions()), style="bold yellow")
    status.append("    Empty at: ", style="dim")
    status.append(str(puzzle.empty_position), style="bold yellow")
    return status
