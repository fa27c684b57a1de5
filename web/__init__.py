"""Local browser UI for the chess-club desk."""

__version__ = "1.0.0"
