"""Solvers, enumerations and simulations for short recreational mathematics puzzles."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "board",
    "calendar_puzzles",
    "cards",
    "combinatorics",
    "dice",
    "digits",
    "integration",
    "precision",
    "sampling",
]