"""Rush Hour solver."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from backend.engine.gamesolver import algorithms
from backend.engine.gamesolver.algorithms import Algorithm
from backend.engine.gamesolver.heuristics import Heuristic
from backend.engine.gamestate import GameState
from backend.models.board import Board
from backend.models.move import Move

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Outcome of one search run.

    ``solution`` is ``None`` when the puzzle has no solution; check
    :attr:`found` before reading :attr:`moves`.
    """

    algorithm: Algorithm
    heuristic: Heuristic | None
    solution: GameState | None
    nodes_visited: int
    nodes_expanded: int
    elapsed_ms: float

    @property
    def found(self) -> bool:
        return self.solution is not None

    @property
    def moves(self) -> tuple[Move, ...]:
        if self.solution is None:
            return ()
        return self.solution.moves


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def solve(
        board: Board,
        algorithm: Algorithm | str = Algorithm.ASTAR,
        heuristic: Heuristic | str | None = Heuristic.MANHATTAN,
    ) -> SearchResult:
        """Search *board* and report the solution, node counts and timing.

        Names are resolved once here; unknown ones fall back to A* and
        Manhattan.  Cost-only algorithms report ``heuristic=None``.
        """
        algo = Algorithm.parse(algorithm)
        heur = Heuristic.parse(heuristic) if algo.uses_heuristic else None

        logger.debug("Solving %d×%d board with %s (heuristic=%s)", board.rows, board.cols, algo, heur)
        start = time.perf_counter()
        outcome = algorithms.run(board, algo, heur)
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        if outcome.solution is None:
            logger.info("%s: no solution after %d nodes", algo, outcome.nodes_visited)
        else:
            logger.info(
                "%s: %d moves, %d nodes visited, %.2f ms",
                algo, outcome.solution.g, outcome.nodes_visited, elapsed_ms,
            )
        return SearchResult(
            algorithm=algo,
            heuristic=heur,
            solution=outcome.solution,
            nodes_visited=outcome.nodes_visited,
            nodes_expanded=outcome.nodes_expanded,
            elapsed_ms=elapsed_ms,
        )

    @staticmethod
    def hint(
        board: Board,
        algorithm: Algorithm | str = Algorithm.ASTAR,
        heuristic: Heuristic | str | None = Heuristic.MANHATTAN,
    ) -> Move | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None
        moves = Solver.solve(board, algorithm, heuristic).moves
        return moves[0] if moves else None

    @staticmethod
    def compare(
        board: Board, heuristic: Heuristic | str | None = Heuristic.MANHATTAN
    ) -> list[SearchResult]:
        """Run every algorithm on *board* with the same heuristic."""
        return [Solver.solve(board, algo, heuristic) for algo in Algorithm]
