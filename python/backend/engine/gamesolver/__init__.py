from backend.engine.gamesolver.algorithms import Algorithm
from backend.engine.gamesolver.heuristics import Heuristic
from backend.engine.gamesolver.solver import SearchResult, Solver

__all__ = ["Algorithm", "Heuristic", "SearchResult", "Solver"]
