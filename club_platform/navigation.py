"""Platform-owned screen navigation state machine.

Screens form a simple flow::

    registration -> login -> dashboard -> {lesson, puzzle, game, coaching} form

Clients hold a ``NavigationStack`` and feed it action identifiers; "back"
returns to whichever screen pushed the current one. Guarded actions
(``submit`` on registration, ``login``) must only be applied by the client
after the underlying service call succeeded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .config import DASHBOARD_GREETING

REGISTRATION = "registration"
LOGIN = "login"
DASHBOARD = "dashboard"
LESSON_FORM = "lesson_form"
PUZZLE_FORM = "puzzle_form"
GAME_FORM = "game_form"
COACHING_FORM = "coaching_form"

# Dashboard form screens keyed by record kind
FORM_SCREENS = {
    "lessons": LESSON_FORM,
    "puzzles": PUZZLE_FORM,
    "games": GAME_FORM,
    "coaching": COACHING_FORM,
}
SCREEN_KINDS = {screen: kind for kind, screen in FORM_SCREENS.items()}

PUSH = "push"
POP = "pop"
STAY = "stay"


@dataclass(frozen=True)
class Transition:
    mode: str
    target: Optional[str] = None


_FORM_TRANSITIONS = {
    "submit": Transition(STAY),
    "view": Transition(STAY),
    "back": Transition(POP),
}

TRANSITIONS: dict[str, dict[str, Transition]] = {
    REGISTRATION: {
        "submit": Transition(PUSH, LOGIN),
        "go_login": Transition(PUSH, LOGIN),
    },
    LOGIN: {
        "login": Transition(PUSH, DASHBOARD),
        "back": Transition(POP),
    },
    DASHBOARD: {
        "open_lessons": Transition(PUSH, LESSON_FORM),
        "open_puzzles": Transition(PUSH, PUZZLE_FORM),
        "open_games": Transition(PUSH, GAME_FORM),
        "open_coaching": Transition(PUSH, COACHING_FORM),
        "logout": Transition(POP),
    },
    LESSON_FORM: dict(_FORM_TRANSITIONS),
    PUZZLE_FORM: dict(_FORM_TRANSITIONS),
    GAME_FORM: dict(_FORM_TRANSITIONS),
    COACHING_FORM: dict(_FORM_TRANSITIONS),
}


class NavigationError(ValueError):
    """Raised for an action that is not valid on the current screen."""


def allowed_actions(screen: str) -> list[str]:
    """Return the action identifiers valid on *screen*."""
    return list(TRANSITIONS.get(screen, {}))


def greeting(username: str) -> str:
    """Return the dashboard greeting for *username*."""
    return DASHBOARD_GREETING.format(username=username)


class NavigationStack:
    """Explicit back-stack of screens, rooted at the registration screen."""

    def __init__(self, root: str = REGISTRATION):
        if root not in TRANSITIONS:
            raise NavigationError(f"Unknown screen: {root}")
        self._stack = [root]

    @property
    def current(self) -> str:
        return self._stack[-1]

    @property
    def history(self) -> list[str]:
        return list(self._stack)

    def reset(self, root: str = REGISTRATION) -> None:
        if root not in TRANSITIONS:
            raise NavigationError(f"Unknown screen: {root}")
        self._stack = [root]

    def apply(self, action: str) -> str:
        """Apply *action* on the current screen and return the new screen."""
        transition = TRANSITIONS[self.current].get(action)
        if transition is None:
            raise NavigationError(
                f"Action '{action}' is not available on screen '{self.current}'. "
                f"Expected one of: {', '.join(allowed_actions(self.current))}"
            )

        if transition.mode == PUSH:
            self._stack.append(transition.target)
        elif transition.mode == POP:
            if len(self._stack) == 1:
                raise NavigationError(f"Nothing to go back to from '{self.current}'.")
            self._stack.pop()
        return self.current


Handler = Callable[..., Any]


def dispatch(table: dict, screen: str, action: str, *args, **kwargs) -> Any:
    """Look up and call the handler for *action* on *screen*.

    *table* maps ``(screen, action)`` pairs, or bare action identifiers for
    handlers shared across screens, to callables.
    """
    handler: Optional[Handler] = table.get((screen, action)) or table.get(action)
    if handler is None:
        raise NavigationError(f"No handler for action '{action}' on screen '{screen}'.")
    return handler(*args, **kwargs)
