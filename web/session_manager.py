"""
Server-side session manager for the Web UI.

Bridges the web layer to the platform services. Holds the one local user's
navigation stack and authenticated username; records themselves are
appended to their stores on every submit, so there is nothing to save here.
"""

import logging
from pathlib import Path
from typing import Optional

from club_platform.config import resolve_data_dir
from club_platform.models import LoginResult, SubmissionResult
from club_platform.navigation import (
    DASHBOARD,
    FORM_SCREENS,
    LOGIN,
    REGISTRATION,
    NavigationStack,
    allowed_actions,
    greeting,
)
from club_platform.schemas import FORM_KINDS, RECORD_KINDS, get_record_kind
from club_platform.services import list_records, login, register_account, submit_record

logger = logging.getLogger(__name__)

# Actions that only make sense after a successful service call
GUARDED_ACTIONS = {(REGISTRATION, "submit"), (LOGIN, "login")}


class NotLoggedInError(PermissionError):
    """Raised when a dashboard operation is attempted without a login."""


class WebSessionManager:
    """Manages the navigation state of the single local web user."""

    def __init__(self, data_dir: Optional[Path] = None):
        self._data_dir = data_dir
        self.nav = NavigationStack()
        self.username: Optional[str] = None

    @property
    def data_dir(self) -> Path:
        """Data directory, resolved lazily so env/config changes are seen."""
        if self._data_dir is not None:
            return self._data_dir
        return resolve_data_dir()

    @data_dir.setter
    def data_dir(self, value: Optional[Path]):
        self._data_dir = value

    @property
    def logged_in(self) -> bool:
        return self.username is not None

    def reset(self) -> None:
        self.nav.reset()
        self.username = None

    # --- Navigation ---

    def get_navigation(self) -> dict:
        screen = self.nav.current
        return {
            "screen": screen,
            "history": self.nav.history,
            "actions": allowed_actions(screen),
            "username": self.username,
            "greeting": greeting(self.username) if self.logged_in else None,
        }

    def navigate(self, action: str) -> dict:
        """Apply a plain navigation action (back, open a form, logout...).

        Raises ``NavigationError`` for actions not valid on the current
        screen and ``ValueError`` for guarded actions.
        """
        if (self.nav.current, action) in GUARDED_ACTIONS:
            raise ValueError(
                f"Action '{action}' requires a submission; use the register or login endpoint."
            )
        if action == "logout":
            self.username = None
        self.nav.apply(action)
        return self.get_navigation()

    def _move_to_login(self) -> None:
        if self.nav.current == LOGIN:
            return
        if self.nav.current != REGISTRATION:
            self.nav.reset()
        self.nav.apply("go_login")

    # --- Accounts ---

    def register(self, username: str, email: str, password: str, elo_rating: str | int) -> SubmissionResult:
        result = register_account(self.data_dir, username, email, password, elo_rating)
        if result.ok and self.nav.current == REGISTRATION:
            self.nav.apply("submit")
        return result

    def login(self, username: str, password: str) -> LoginResult:
        outcome = login(self.data_dir, username, password)
        if not outcome.ok:
            return outcome

        self._move_to_login()
        self.nav.apply("login")
        self.username = outcome.username
        logger.info("User %s logged in", outcome.username)
        return outcome

    def logout(self) -> dict:
        if self.nav.current == DASHBOARD:
            self.nav.apply("logout")
        elif self.logged_in:
            self.nav.reset()
            self.nav.apply("go_login")
        self.username = None
        return self.get_navigation()

    # --- Dashboard ---

    def require_login(self) -> str:
        if not self.logged_in:
            raise NotLoggedInError("Log in to use the dashboard.")
        return self.username

    def get_dashboard(self) -> dict:
        username = self.require_login()
        return {
            "username": username,
            "greeting": greeting(username),
            "forms": [RECORD_KINDS[key].to_dict() for key in FORM_KINDS],
            "screens": FORM_SCREENS,
        }

    def submit(self, kind_key: str, values: dict) -> SubmissionResult:
        """Submit a dashboard form. Raises ``UnknownRecordKindError``."""
        self.require_login()
        if kind_key not in FORM_KINDS:
            get_record_kind(kind_key)
            raise ValueError(f"'{kind_key}' records are created through registration.")
        return submit_record(self.data_dir, kind_key, values)

    def records(self, kind_key: str) -> list[dict]:
        """List saved records of a kind with secret fields masked."""
        self.require_login()
        kind = get_record_kind(kind_key)
        secret = [spec.name for spec in kind.fields if spec.secret]
        records = list_records(self.data_dir, kind_key)
        for record in records:
            for name in secret:
                if name in record:
                    record[name] = "*" * len(record[name])
        return records
