"""
Entry point for running the chess-club desk in a local browser.

Usage:
    python -m web [--port 8000] [--host 127.0.0.1] [--reload] [--data-dir DIR]
"""

import argparse
import os
from pathlib import Path

import uvicorn

from club_platform.config import DATA_DIR_ENV_VAR


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="chess-club: register, log in and submit club forms from your browser"
    )
    parser.add_argument(
        "--port", type=int, default=8000,
        help="Port to serve on (default: 8000)"
    )
    parser.add_argument(
        "--host", type=str, default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--reload", action="store_true",
        help="Enable auto-reload for development"
    )
    parser.add_argument(
        "--data-dir",
        help=f"Directory holding the club record files (default: ${DATA_DIR_ENV_VAR}, "
             "then user config, then the current directory)"
    )

    args = parser.parse_args(argv)

    # Passed through the environment so reload workers see it too
    if args.data_dir:
        os.environ[DATA_DIR_ENV_VAR] = str(Path(args.data_dir).expanduser().resolve())

    print("\n  chess-club desk")
    if args.data_dir:
        print(f"  Records in {os.environ[DATA_DIR_ENV_VAR]}")
    print(f"  Open http://{args.host}:{args.port} in your browser\n")

    uvicorn.run(
        "web.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
