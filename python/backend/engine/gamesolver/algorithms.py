"""Best-first search over Rush Hour states.

All four algorithms share :func:`best_first_search` and differ only in
the priority key, whether a heuristic is evaluated, and whether the
best-known cost of each state is tracked:

=============  =========  =========  ==========
algorithm      priority   heuristic  relaxation
=============  =========  =========  ==========
A*             g + h      yes        yes
Dijkstra       g          no         yes
Greedy (GBFS)  h          yes        no
Uniform cost   g          no         no
=============  =========  =========  ==========
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from backend.engine.gamesolver.heuristics import Heuristic
from backend.engine.gamestate import GameState
from backend.models.board import Board

logger = logging.getLogger(__name__)

Priority = Callable[[GameState], int]


@dataclass
class SearchOutcome:
    """What a single search loop produced."""

    solution: GameState | None
    nodes_visited: int
    nodes_expanded: int


class Algorithm(StrEnum):
    ASTAR = "astar"
    DIJKSTRA = "dijkstra"
    GBFS = "gbfs"
    UCS = "ucs"

    @property
    def uses_heuristic(self) -> bool:
        return self in (Algorithm.ASTAR, Algorithm.GBFS)

    @property
    def relaxes(self) -> bool:
        """Whether the loop keeps a best-known g per state."""
        return self in (Algorithm.ASTAR, Algorithm.DIJKSTRA)

    @property
    def priority(self) -> Priority:
        return _PRIORITIES[self]

    @classmethod
    def parse(cls, name: str | None) -> Algorithm:
        """Resolve *name*, falling back to A* for anything unknown."""
        if isinstance(name, Algorithm):
            return name
        if name is None:
            return cls.ASTAR
        key = name.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            logger.warning("Unknown algorithm %r, using %s.", name, cls.ASTAR.value)
            return cls.ASTAR


_PRIORITIES: dict[Algorithm, Priority] = {
    Algorithm.ASTAR: lambda s: s.f,
    Algorithm.DIJKSTRA: lambda s: s.g,
    Algorithm.GBFS: lambda s: s.h,
    Algorithm.UCS: lambda s: s.g,
}

_ALIASES = {
    "a*": "astar",
    "a-star": "astar",
    "greedy": "gbfs",
    "uniform": "ucs",
}


def best_first_search(initial: GameState, priority: Priority, relax: bool) -> SearchOutcome:
    """Expand states in order of *priority* until a goal is popped.

    Every pop counts as a visit, stale duplicates included.  Ties are
    broken by insertion order, so a run is fully deterministic.
    """
    counter = itertools.count()
    frontier: list[tuple[int, int, GameState]] = [(priority(initial), next(counter), initial)]
    closed: set[tuple[str, ...]] = set()
    best_g: dict[tuple[str, ...], int] = {initial.key: initial.g}
    visited = 0
    expanded = 0

    while frontier:
        _, _, current = heapq.heappop(frontier)
        visited += 1

        if current.is_goal():
            return SearchOutcome(current, visited, expanded)

        key = current.key
        if key in closed:
            continue
        closed.add(key)
        expanded += 1

        for successor in current.successors():
            skey = successor.key
            if skey in closed:
                continue
            if relax:
                known = best_g.get(skey)
                if known is not None and successor.g >= known:
                    continue
                best_g[skey] = successor.g
            heapq.heappush(frontier, (priority(successor), next(counter), successor))

    return SearchOutcome(None, visited, expanded)


def run(board: Board, algorithm: Algorithm, heuristic: Heuristic | None = None) -> SearchOutcome:
    """Search *board* with *algorithm*; *heuristic* is ignored when unused."""
    active = (heuristic or Heuristic.MANHATTAN) if algorithm.uses_heuristic else None
    initial = GameState.initial(board, active)
    return best_first_search(initial, algorithm.priority, algorithm.relaxes)


# -- per-algorithm entry points ------------------------------------------------


def astar(board: Board, heuristic: Heuristic = Heuristic.MANHATTAN) -> SearchOutcome:
    return run(board, Algorithm.ASTAR, heuristic)


def dijkstra(board: Board) -> SearchOutcome:
    return run(board, Algorithm.DIJKSTRA)


def greedy_best_first(board: Board, heuristic: Heuristic = Heuristic.MANHATTAN) -> SearchOutcome:
    return run(board, Algorithm.GBFS, heuristic)


def uniform_cost(board: Board) -> SearchOutcome:
    return run(board, Algorithm.UCS)
