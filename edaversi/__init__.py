"""Reversi against a minimax AI: game model, alpha-beta search and a pygame front end."""

__version__ = "0.1.0"

__all__ = ["__version__"]