"""
Configuration constants for the chess-club system.
"""

import os
from pathlib import Path

from .user_config import get_data_dir

# Record store file names, one per record kind
USERS_FILE = "users.txt"
LESSONS_FILE = "lesson_credentials.txt"
PUZZLES_FILE = "puzzle_credentials.txt"
GAMES_FILE = "game_credentials.txt"
COACHING_FILE = "coaching_credentials.txt"

# Field delimiter for stored lines. There is no escaping: a field holding a
# comma shifts every column after it.
DELIMITER = ","

PUZZLE_DIFFICULTIES = ("Easy", "Hard", "Extremely Hard")
GAME_RESULTS = ("White", "Black", "Draw")

# User-facing messages shared by the CLI and the web UI
MSG_FILL_ALL_FIELDS = "Please fill in all fields."
MSG_INVALID_LOGIN = "Invalid username or password."
MSG_REGISTERED = "User registered successfully!"
MSG_REGISTER_FAILED = "Error occurred while registering user."

DASHBOARD_GREETING = "Hey, Welcome {username}!"

DATA_DIR_ENV_VAR = "CHESS_CLUB_DATA_DIR"


def resolve_data_dir(explicit: str | None = None) -> Path:
    """Resolve the directory holding the record store files.

    Resolution order: *explicit* argument, then the ``CHESS_CLUB_DATA_DIR``
    environment variable, then the user config file, then the current
    working directory.
    """
    candidate = (explicit or "").strip()
    if candidate:
        return Path(candidate).expanduser()

    env_value = os.environ.get(DATA_DIR_ENV_VAR, "").strip()
    if env_value:
        return Path(env_value).expanduser()

    config_value = (get_data_dir() or "").strip()
    if config_value:
        return Path(config_value).expanduser()

    return Path.cwd()
