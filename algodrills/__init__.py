"""Solutions to classic algorithm exercises on trees, linked lists, arrays, greedy and counting puzzles."""

__version__ = "0.1.0"
__all__ = ["arrays", "greedy", "linked", "puzzles", "trees"]