"""Rich terminal frontend: coloured boards, panels and tables.

Uses the ``rich`` library for styled output of the same solution walk
the vanilla frontend prints.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import SearchResult
from backend.models.board import EMPTY, EXIT, Board
from backend.models.move import Move
from backend.models.solution import algorithm_label, heuristic_label

console = Console()


# -- helpers ------------------------------------------------------------------


def _format_time(ms: float) -> str:
    if ms < 1:
        return f"{ms * 1000:.2f} µs"
    if ms < 1000:
        return f"{ms:.2f} ms"
    return f"{ms / 1000:.2f} s"


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, move: Move | None = None) -> Text:
    """Return the board as styled text: primary red, moved piece blue."""
    primary = board.primary.id
    moved = move.piece_id if move is not None else None
    text = Text()
    for i, line in enumerate(board.to_lines()):
        if i:
            text.append("\n")
        for j, ch in enumerate(line):
            if j:
                text.append(" ")
            if ch == primary:
                text.append(ch, style="bold red")
            elif ch == moved:
                text.append(ch, style="bold blue")
            elif ch == EXIT:
                text.append(ch, style="bold green")
            elif ch == EMPTY:
                text.append(ch, style="dim")
            else:
                text.append(ch, style="white")
    return text


def _board_panel(board: Board, title: str, move: Move | None = None, style: str = "bright_blue") -> Panel:
    return Panel(
        Align.center(_render_board(board, move)),
        title=title,
        border_style=style,
        padding=(0, 2),
        expand=False,
    )


def _summary(result: SearchResult) -> Text:
    stats = Text()
    if result.found:
        stats.append("  Moves: ", style="dim")
        stats.append(str(len(result.moves)), style="bold yellow")
    else:
        stats.append("  No solution found!", style="bold red")
    stats.append("    Nodes visited: ", style="dim")
    stats.append(str(result.nodes_visited), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(result.elapsed_ms), style="bold yellow")
    return stats


# -- entry points -------------------------------------------------------------


def run(board: Board, result: SearchResult, out: Console | None = None) -> None:
    """Print the initial board, every move with its board, and a summary."""
    out = out or console

    header = Text()
    header.append(algorithm_label(result.algorithm), style="bold cyan")
    if result.heuristic is not None:
        header.append("  with  ", style="dim")
        header.append(heuristic_label(result.heuristic), style="bold cyan")

    out.print()
    out.print(header)
    out.print(_board_panel(board, "[bold]Initial board[/bold]"))

    current = board
    for i, move in enumerate(result.moves, 1):
        current = current.apply_move(move)
        out.print(_board_panel(current, f"[cyan]Move {i}[/cyan]  [bold]{move}[/bold]", move, "cyan"))

    if result.found:
        out.print(Text(f"  Solved in {len(result.moves)} moves!", style="bold green"))
    out.print(_summary(result))


def print_comparison(results: list[SearchResult], out: Console | None = None) -> None:
    """Render a table with one row per algorithm."""
    out = out or console
    table = Table(
        box=rich.box.HEAVY,
        border_style="bright_blue",
        title="[bold]Algorithm comparison[/bold]",
    )
    table.add_column("Algorithm", style="bold cyan")
    table.add_column("Heuristic")
    table.add_column("Moves", justify="right")
    table.add_column("Nodes visited", justify="right")
    table.add_column("Time", justify="right")

    for r in results:
        table.add_row(
            algorithm_label(r.algorithm),
            heuristic_label(r.heuristic),
            str(len(r.moves)) if r.found else "[red]—[/red]",
            str(r.nodes_visited),
            _format_time(r.elapsed_ms),
        )

    out.print(Group(Text(""), Align.center(table)))
