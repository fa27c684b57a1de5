#!/usr/bin/env python3
"""
chess-club — Web UI

Starts a local web server for the browser-based desk.
This is an alternative to the CLI (chess-club.py). Both interfaces
share the same platform services and record files.

Usage:
    python chess-club-web.py [--port 8000] [--host 127.0.0.1] [--data-dir DIR]

Then open http://localhost:8000 in your browser.
"""

from web.__main__ import main


if __name__ == "__main__":
    main()
