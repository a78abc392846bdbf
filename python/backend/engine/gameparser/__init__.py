from backend.engine.gameparser.parser import PuzzleFile, format_puzzle, load_puzzle, parse_puzzle

__all__ = ["PuzzleFile", "format_puzzle", "load_puzzle", "parse_puzzle"]
