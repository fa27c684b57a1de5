"""
Shared fixtures for chess-club tests.
"""

import pytest
from pathlib import Path

from club_platform.config import DATA_DIR_ENV_VAR, USERS_FILE


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path, monkeypatch):
    """Point user config and the data-dir env var away from the real home."""
    monkeypatch.setenv("CHESS_CLUB_USER_CONFIG_PATH", str(tmp_path / "user-config" / "config.json"))
    monkeypatch.delenv(DATA_DIR_ENV_VAR, raising=False)


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """An empty data directory for record stores."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def unwritable_data_dir(tmp_path) -> Path:
    """A data directory path that can never be created or written.

    Its parent is a regular file, so every open/mkdir fails with an OSError
    regardless of the user running the tests.
    """
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    return blocker / "data"


@pytest.fixture
def alice_store(data_dir) -> Path:
    """A data directory whose account store holds only alice."""
    (data_dir / USERS_FILE).write_text("alice,a@x.com,pw123,1500\n", encoding="utf-8")
    return data_dir


@pytest.fixture
def sample_values():
    """Valid ordered field values for every record kind."""
    return {
        "accounts": ["alice", "a@x.com", "pw123", "1500"],
        "lessons": ["1", "alice", "4100018", "Magnus", "Endgame technique"],
        "puzzles": ["7", "alice", "Hard"],
        "games": ["3", "alice", "bob", "Draw"],
        "coaching": ["2", "Judit", "Former world top-10", "alice"],
    }
