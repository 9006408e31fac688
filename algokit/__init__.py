"""Classic algorithms for numbers, strings, sorting, searching, matrices, graphs, optimisation and backtracking."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "graphs",
    "matrix",
    "numbers",
    "optimization",
    "searching",
    "sorting",
    "strings",
]