#!/usr/bin/env python3
"""
chess-club — Desk

Register and log in club members, then file lesson applications, puzzle
attempts, game results and coaching requests. Every submission is appended
to a plaintext record file in the data directory.

Usage:
    python chess-club.py                    (interactive app)
    python chess-club.py --data-dir ./data app --start login
    python chess-club.py records list accounts

This file is a thin wrapper around the chess-club package.
For the modular implementation, see the club_platform/, cli/, and web/ directories.
"""

from cli.commands import main

if __name__ == "__main__":
    main()
