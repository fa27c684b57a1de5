"""User-level configuration persistence for chess-club clients."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class UserConfig:
    data_dir: str | None = None


def get_user_config_path() -> Path:
    """Return the user-level config file path.

    Uses a platform-appropriate location and supports an override via
    ``CHESS_CLUB_USER_CONFIG_PATH`` for tests.
    """
    override = os.environ.get("CHESS_CLUB_USER_CONFIG_PATH", "").strip()
    if override:
        return Path(override)

    if os.name == "nt":
        base = Path(os.environ.get("APPDATA", str(Path.home() / "AppData" / "Roaming")))
        return base / "chess-club" / "config.json"

    return Path.home() / ".config" / "chess-club" / "config.json"


def load_user_config() -> UserConfig:
    path = get_user_config_path()
    if not path.exists():
        return UserConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable user config %s: %s", path, e)
        return UserConfig()

    data_dir = data.get("data_dir") if isinstance(data, dict) else None
    if isinstance(data_dir, str):
        data_dir = data_dir.strip() or None
    else:
        data_dir = None
    return UserConfig(data_dir=data_dir)


def save_user_config(config: UserConfig) -> None:
    path = get_user_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"data_dir": config.data_dir}
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def get_data_dir() -> str | None:
    return load_user_config().data_dir


def set_data_dir(data_dir: str) -> None:
    save_user_config(UserConfig(data_dir=data_dir.strip() or None))
