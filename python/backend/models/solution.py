"""Solution persistence: boxed text reports and JSON records."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from backend.models.board import Board
from backend.models.move import Move

if TYPE_CHECKING:
    from backend.engine.gamesolver.solver import SearchResult

_ALGORITHM_LABELS = {
    "astar": "A* (A-Star)",
    "dijkstra": "Dijkstra's Algorithm",
    "gbfs": "Greedy Best-First Search",
    "ucs": "Uniform Cost Search",
}

_HEURISTIC_LABELS = {
    "manhattan": "Manhattan Distance",
    "blocking": "Blocking Heuristic",
    "combined": "Combined Heuristic",
}


def algorithm_label(name: str | None) -> str:
    if name is None:
        return "Unknown"
    return _ALGORITHM_LABELS.get(str(name), str(name))


def heuristic_label(name: str | None) -> str:
    if name is None:
        return "None"
    return _HEURISTIC_LABELS.get(str(name), str(name))


@dataclass
class SolutionRecord:
    algorithm: str
    heuristic: str | None
    moves: list[str]
    nodes_visited: int
    elapsed_ms: float
    initial: list[str]
    steps: list[list[str]] = field(default_factory=list)
    found: bool = True
    date: str = ""

    @classmethod
    def from_result(cls, board: Board, result: SearchResult) -> SolutionRecord:
        """Snapshot *result*, replaying its moves from *board* for the step boards."""
        steps: list[list[str]] = []
        current = board
        for move in result.moves:
            current = current.apply_move(move)
            steps.append(current.to_lines())
        return cls(
            algorithm=str(result.algorithm),
            heuristic=str(result.heuristic) if result.heuristic is not None else None,
            moves=[str(m) for m in result.moves],
            nodes_visited=result.nodes_visited,
            elapsed_ms=result.elapsed_ms,
            initial=board.to_lines(),
            steps=steps,
            found=result.found,
            date=datetime.now().isoformat(timespec="seconds"),
        )

    # -- persistence ----------------------------------------------------------

    def save(self, filepath: Path) -> None:
        """Write JSON for a ``.json`` path, the text report otherwise."""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        if filepath.suffix.lower() == ".json":
            filepath.write_text(json.dumps(asdict(self), indent=2) + "\n")
        else:
            filepath.write_text(self.to_text())

    @classmethod
    def load(cls, filepath: Path) -> SolutionRecord:
        data = json.loads(Path(filepath).read_text())
        return cls(**data)

    def parsed_moves(self) -> list[Move]:
        return [Move.parse(m) for m in self.moves]

    # -- text report ----------------------------------------------------------

    def to_text(self) -> str:
        out: list[str] = [
            "╔══════════════════════════════════════════╗",
            "║        Rush Hour Puzzle Solution         ║",
            "╚══════════════════════════════════════════╝",
            "",
            "Solution Details:",
            "----------------",
            f"Algorithm: {algorithm_label(self.algorithm)}",
            f"Heuristic: {heuristic_label(self.heuristic)}",
        ]
        if self.found:
            out.append(f"Total Moves: {len(self.moves)}")
        else:
            out.append("Total Moves: no solution found")
        out += [
            f"Nodes Visited: {self.nodes_visited}",
            f"Execution Time: {self.elapsed_ms:.2f} ms",
            "",
            "Initial State:",
            *_boxed(self.initial),
            "",
        ]
        for i, (move, lines) in enumerate(zip(self.moves, self.steps), 1):
            out.append(f"Move {i}: {move}")
            out += _boxed(lines)
            out.append("")
        out.append("End of solution")
        if self.date:
            out.append(f"Generated on: {self.date}")
        return "\n".join(out) + "\n"


def _boxed(lines: list[str]) -> list[str]:
    width = max((len(line) for line in lines), default=0)
    return [
        "┌" + "─" * width + "┐",
        *("│" + line.ljust(width) + "│" for line in lines),
        "└" + "─" * width + "┘",
    ]
