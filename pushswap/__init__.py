"""Two-stack sorting with a restricted set of moves, and a checker for move sequences."""

__version__ = "1.0.0"

__all__ = ["__version__"]