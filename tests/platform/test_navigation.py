"""Tests for the screen navigation state machine."""

import pytest

from club_platform.navigation import (
    COACHING_FORM,
    DASHBOARD,
    GAME_FORM,
    LESSON_FORM,
    LOGIN,
    PUZZLE_FORM,
    REGISTRATION,
    NavigationError,
    NavigationStack,
    allowed_actions,
    dispatch,
    greeting,
)


def _at_dashboard() -> NavigationStack:
    nav = NavigationStack()
    nav.apply("submit")
    nav.apply("login")
    return nav


def test_starts_on_registration():
    nav = NavigationStack()
    assert nav.current == REGISTRATION
    assert nav.history == [REGISTRATION]


def test_registration_submit_opens_login():
    nav = NavigationStack()
    assert nav.apply("submit") == LOGIN


def test_login_back_returns_to_registration():
    nav = NavigationStack()
    nav.apply("go_login")
    assert nav.apply("back") == REGISTRATION


def test_login_opens_dashboard():
    assert _at_dashboard().current == DASHBOARD


@pytest.mark.parametrize(
    "action, screen",
    [
        ("open_lessons", LESSON_FORM),
        ("open_puzzles", PUZZLE_FORM),
        ("open_games", GAME_FORM),
        ("open_coaching", COACHING_FORM),
    ],
)
def test_dashboard_opens_each_form_and_back_returns(action, screen):
    nav = _at_dashboard()
    assert nav.apply(action) == screen
    assert nav.apply("back") == DASHBOARD


def test_form_submit_and_view_stay_on_form():
    nav = _at_dashboard()
    nav.apply("open_games")
    assert nav.apply("submit") == GAME_FORM
    assert nav.apply("view") == GAME_FORM
    assert nav.history == [REGISTRATION, LOGIN, DASHBOARD, GAME_FORM]


def test_logout_returns_to_login():
    nav = _at_dashboard()
    assert nav.apply("logout") == LOGIN


def test_invalid_action_raises_and_keeps_screen():
    nav = NavigationStack()
    with pytest.raises(NavigationError):
        nav.apply("open_games")
    assert nav.current == REGISTRATION


def test_back_from_root_raises():
    nav = NavigationStack(LOGIN)
    with pytest.raises(NavigationError):
        nav.apply("back")


def test_unknown_root_raises():
    with pytest.raises(NavigationError):
        NavigationStack("settings")


def test_reset_clears_history():
    nav = _at_dashboard()
    nav.reset()
    assert nav.history == [REGISTRATION]


def test_allowed_actions():
    assert allowed_actions(LOGIN) == ["login", "back"]
    assert "logout" in allowed_actions(DASHBOARD)


def test_greeting():
    assert greeting("alice") == "Hey, Welcome alice!"


class TestDispatch:

    def test_screen_specific_handler_wins(self):
        table = {
            (REGISTRATION, "submit"): lambda: "register",
            "submit": lambda: "form",
        }
        assert dispatch(table, REGISTRATION, "submit") == "register"
        assert dispatch(table, LESSON_FORM, "submit") == "form"

    def test_arguments_are_passed_through(self):
        table = {"back": lambda ctx, flag=False: (ctx, flag)}
        assert dispatch(table, LOGIN, "back", "ctx", flag=True) == ("ctx", True)

    def test_missing_handler_raises(self):
        with pytest.raises(NavigationError):
            dispatch({}, LOGIN, "login")
