#!/usr/bin/env python3
"""Rush Hour Solver.

Usage::

    python main.py puzzle.txt                      # algorithm/heuristic from the file
    python main.py puzzle.txt -a gbfs -H combined  # pick explicitly
    python main.py puzzle.txt -f rich --save out.txt
    python main.py puzzle.txt --compare            # run all four algorithms
"""

import importlib
import logging
import os
import sys
from enum import StrEnum
from pathlib import Path
from typing import NoReturn, Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gameparser import load_puzzle  # noqa: E402
from backend.engine.gamesolver import Algorithm, Heuristic, Solver  # noqa: E402
from backend.models.errors import RushHourError  # noqa: E402
from backend.models.solution import SolutionRecord  # noqa: E402

DEFAULT_ALGORITHM = Algorithm.ASTAR
DEFAULT_HEURISTIC = Heuristic.MANHATTAN

logger = logging.getLogger("rushhour")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    """Configure the root logger from ``LOGLEVEL`` (or DEBUG with --verbose)."""
    loglevel = "DEBUG" if verbose else os.getenv("LOGLEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, loglevel, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _fail(message: str) -> NoReturn:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    puzzle: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True,
        help="Puzzle file to solve.",
    ),
    algorithm: Optional[Algorithm] = typer.Option(
        None, "-a", "--algorithm",
        help="Search algorithm. Defaults to the puzzle file's choice, then astar.",
    ),
    heuristic: Optional[Heuristic] = typer.Option(
        None, "-H", "--heuristic",
        help="Heuristic for astar/gbfs. Defaults to the file's choice, then manhattan.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to display the solution.",
    ),
    save: Optional[Path] = typer.Option(
        None, "--save",
        help="Write the solution to this file (.json for JSON, text otherwise). Not with --compare.",
    ),
    compare: bool = typer.Option(
        False, "--compare",
        help="Run every algorithm and print a comparison table.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Rush Hour Solver."""
    _setup_logging(verbose)
    if compare and save is not None:
        _fail("--save applies to a single run and cannot be combined with --compare.")

    try:
        parsed = load_puzzle(puzzle)
        board = parsed.to_board()
    except (RushHourError, OSError) as exc:
        _fail(str(exc))
    logger.debug("Loaded %d×%d puzzle with %d pieces from %s", board.rows, board.cols, len(board.pieces), puzzle)

    algo = algorithm or (Algorithm.parse(parsed.algorithm) if parsed.algorithm else DEFAULT_ALGORITHM)
    heur = heuristic or (Heuristic.parse(parsed.heuristic) if parsed.heuristic else DEFAULT_HEURISTIC)
    mod = importlib.import_module(_RUNNERS[frontend])

    if compare:
        mod.print_comparison(Solver.compare(board, heur))
        return

    result = Solver.solve(board, algo, heur)
    mod.run(board, result)

    if save is not None:
        try:
            SolutionRecord.from_result(board, result).save(save)
        except OSError as exc:
            _fail(f"could not save solution: {exc}")
        typer.echo(f"Solution saved to {save}")


if __name__ == "__main__":
    app()
