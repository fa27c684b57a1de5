"""
Interactive screen loop for the chess-club CLI.

Walks the registration → login → dashboard → form flow in the terminal.
Every submit is validated and appended to its record store immediately.
"""

import getpass
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from club_platform.navigation import (
    COACHING_FORM,
    DASHBOARD,
    GAME_FORM,
    LESSON_FORM,
    LOGIN,
    PUZZLE_FORM,
    REGISTRATION,
    SCREEN_KINDS,
    NavigationError,
    NavigationStack,
    dispatch,
    greeting,
)
from club_platform.persistence import RecordStoreError
from club_platform.schemas import ACCOUNT, get_record_kind
from club_platform.services import list_records, login, save_record, submit_record

from .interface import (
    print_header,
    print_records,
    print_result,
    prompt_fields,
    prompt_menu,
)

logger = logging.getLogger(__name__)


def _form_menu(submit_label: str) -> list[tuple[str, str]]:
    return [("submit", submit_label), ("view", "View saved records"), ("back", "Back")]


SCREEN_MENUS = {
    REGISTRATION: [("submit", "Register"), ("go_login", "Login")],
    LOGIN: [("login", "Login"), ("back", "Back to Register")],
    DASHBOARD: [
        ("open_lessons", "Apply for Lesson Training"),
        ("open_puzzles", "Try Puzzle"),
        ("open_games", "Play Game"),
        ("open_coaching", "Coaching"),
        ("logout", "Logout"),
    ],
    LESSON_FORM: _form_menu("Save"),
    PUZZLE_FORM: _form_menu("Submit"),
    GAME_FORM: _form_menu("Submit"),
    COACHING_FORM: _form_menu("Submit"),
}

SCREEN_TITLES = {
    REGISTRATION: "User Registration",
    LOGIN: "User Login",
    DASHBOARD: "Dashboard",
}


@dataclass
class ScreenContext:
    """State threaded through screen handlers."""
    data_dir: Path
    nav: NavigationStack = field(default_factory=NavigationStack)
    username: Optional[str] = None


# ---------------------------------------------------------------------------
# Handlers — each returns True when the navigation action should be applied
# ---------------------------------------------------------------------------

def _register(ctx: ScreenContext) -> bool:
    values = prompt_fields(ACCOUNT)
    if values is None:
        return False
    result = save_record(ctx.data_dir, ACCOUNT, values)
    print_result(result)
    return result.ok


def _login(ctx: ScreenContext) -> bool:
    try:
        username = input("  Username: ").strip()
        password = getpass.getpass("  Password: ")
    except (EOFError, KeyboardInterrupt):
        print("\n  Cancelled.")
        return False

    outcome = login(ctx.data_dir, username, password)
    if not outcome.ok:
        print(f"  ✗ {outcome.message}")
        return False
    ctx.username = outcome.username
    return True


def _logout(ctx: ScreenContext) -> bool:
    ctx.username = None
    return True


def _submit_form(ctx: ScreenContext) -> bool:
    kind = get_record_kind(SCREEN_KINDS[ctx.nav.current])
    values = prompt_fields(kind)
    if values is not None:
        print_result(submit_record(ctx.data_dir, kind.key, values))
    return True


def _view_form_records(ctx: ScreenContext) -> bool:
    kind = get_record_kind(SCREEN_KINDS[ctx.nav.current])
    try:
        records = list_records(ctx.data_dir, kind.key)
    except RecordStoreError as e:
        logger.error("Failed to read %s records: %s", kind.key, e, exc_info=e.cause)
        print(f"  ✗ Could not read saved records: {e}")
        return True
    print_records(kind, records)
    return True


def _navigate(ctx: ScreenContext) -> bool:
    return True


HANDLERS = {
    (REGISTRATION, "submit"): _register,
    (LOGIN, "login"): _login,
    "submit": _submit_form,
    "view": _view_form_records,
    "logout": _logout,
    "go_login": _navigate,
    "back": _navigate,
    "open_lessons": _navigate,
    "open_puzzles": _navigate,
    "open_games": _navigate,
    "open_coaching": _navigate,
}


def render_screen(ctx: ScreenContext):
    """Print the header for the current screen."""
    screen = ctx.nav.current
    if screen in SCREEN_KINDS:
        print_header(get_record_kind(SCREEN_KINDS[screen]).label)
    else:
        print_header(SCREEN_TITLES[screen])
    if screen == DASHBOARD and ctx.username:
        print(f"  {greeting(ctx.username)}")


def run_app(data_dir: Path, start: str = REGISTRATION) -> ScreenContext:
    """Run the interactive screen loop until the user quits.

    Returns the final context (useful to callers and tests).
    """
    ctx = ScreenContext(data_dir=data_dir, nav=NavigationStack(start))
    print(f"  [Records stored in {data_dir}]")

    while True:
        render_screen(ctx)
        screen = ctx.nav.current
        action = prompt_menu(SCREEN_MENUS[screen])
        if action is None:
            print("\nGoodbye.")
            return ctx

        if dispatch(HANDLERS, screen, action, ctx):
            try:
                ctx.nav.apply(action)
            except NavigationError as e:
                print(f"  ! {e}")
