"""
Entry point for running chess-club as a module.

Usage:
    python -m cli                       (interactive app)
    python -m cli register --username alice --email a@x.com --password pw --elo 1500
    python -m cli submit puzzles --field id=1 --field username=alice --field difficulty=Easy
    python -m cli records list lessons
"""

from .commands import main

if __name__ == "__main__":
    main()
