"""Platform-owned account service: registration and credential checks."""

from __future__ import annotations

import logging
from pathlib import Path

from club_platform.config import MSG_INVALID_LOGIN, USERS_FILE
from club_platform.models import LoginResult, SubmissionResult
from club_platform.persistence import FlatRecordStore, RecordStoreError
from club_platform.schemas import ACCOUNT

from .submission_service import save_record

logger = logging.getLogger(__name__)

USERNAME_COLUMN = 0
PASSWORD_COLUMN = 2


def register_account(
    data_dir: Path,
    username: str,
    email: str,
    password: str,
    elo_rating: str | int,
) -> SubmissionResult:
    """Validate and append a new account. Duplicate usernames are allowed."""
    return save_record(data_dir, ACCOUNT, [username, email, password, str(elo_rating)])


def find_account(data_dir: Path, username: str, password: str) -> list[str] | None:
    """Return the first stored account matching *username* and *password*.

    Passwords are stored and compared as plaintext. Lines too short to hold
    a password column never match.
    """
    store = FlatRecordStore(data_dir)

    def _matches(fields: list[str]) -> bool:
        if len(fields) <= PASSWORD_COLUMN:
            logger.warning("Skipping malformed account line in %s: %r", USERS_FILE, fields)
            return False
        return fields[USERNAME_COLUMN] == username and fields[PASSWORD_COLUMN] == password

    return store.find_match(USERS_FILE, _matches)


def check_credentials(data_dir: Path, username: str, password: str) -> bool:
    """Return True when an exact (username, password) pair is on record.

    A store read failure is logged and treated as no match.
    """
    try:
        return find_account(data_dir, username, password) is not None
    except RecordStoreError as e:
        logger.error("Credential check failed: %s", e, exc_info=e.cause)
        return False


def login(data_dir: Path, username: str, password: str) -> LoginResult:
    """Check credentials and build the login outcome for a client."""
    if check_credentials(data_dir, username, password):
        return LoginResult(ok=True, message="", username=username)
    return LoginResult(ok=False, message=MSG_INVALID_LOGIN)
