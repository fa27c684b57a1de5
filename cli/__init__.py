"""Command-line client for the chess-club desk."""
