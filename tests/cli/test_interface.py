"""
Tests for cli.interface rendering and prompting helpers.
"""

import pytest

from club_platform.models import SubmissionResult
from club_platform.schemas import ACCOUNT, GAME_RESULT, PUZZLE_ATTEMPT
from cli.interface import (
    print_records,
    print_result,
    prompt_field,
    prompt_fields,
    prompt_menu,
)


def _answers(monkeypatch, *values):
    answers = iter(values)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))
    monkeypatch.setattr("getpass.getpass", lambda _prompt="": next(answers))


class TestPrintResult:

    def test_success_mark(self, capsys):
        print_result(SubmissionResult(ok=True, status="saved", message="Saved!", kind="games"))
        assert "✓ Saved!" in capsys.readouterr().out

    def test_failure_mark(self, capsys):
        print_result(SubmissionResult(ok=False, status="invalid", message="Nope", kind="games"))
        assert "✗ Nope" in capsys.readouterr().out


class TestPrintRecords:

    def test_secret_fields_are_masked(self, capsys):
        print_records(ACCOUNT, [{"username": "alice", "email": "a@x.com", "password": "pw123", "elo_rating": "1500"}])
        out = capsys.readouterr().out
        assert "Password: *****" in out
        assert "pw123" not in out

    def test_raw_records_are_flagged(self, capsys):
        print_records(GAME_RESULT, [{"raw": "garbage"}])
        assert "(unparsed) garbage" in capsys.readouterr().out


class TestPromptMenu:

    OPTIONS = [("submit", "Register"), ("go_login", "Login")]

    def test_number_choice(self, monkeypatch):
        _answers(monkeypatch, "2")
        assert prompt_menu(self.OPTIONS) == "go_login"

    def test_label_choice_is_case_insensitive(self, monkeypatch):
        _answers(monkeypatch, "REGISTER")
        assert prompt_menu(self.OPTIONS) == "submit"

    def test_invalid_then_valid(self, monkeypatch, capsys):
        _answers(monkeypatch, "9", "1")
        assert prompt_menu(self.OPTIONS) == "submit"
        assert "Unknown option '9'" in capsys.readouterr().out

    def test_quit(self, monkeypatch):
        _answers(monkeypatch, "q")
        assert prompt_menu(self.OPTIONS) is None

    def test_end_of_input_quits(self, monkeypatch):
        def _input(_prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", _input)
        assert prompt_menu(self.OPTIONS) is None


class TestPromptFields:

    def test_choice_by_number(self, monkeypatch):
        _answers(monkeypatch, "3")
        assert prompt_field(PUZZLE_ATTEMPT.fields[2]) == "Extremely Hard"

    def test_choice_by_text(self, monkeypatch):
        _answers(monkeypatch, "Hard")
        assert prompt_field(PUZZLE_ATTEMPT.fields[2]) == "Hard"

    def test_all_fields_in_order(self, monkeypatch):
        _answers(monkeypatch, "7", " alice ", "1")
        assert prompt_fields(PUZZLE_ATTEMPT) == ["7", "alice", "Easy"]

    def test_aborted_input_returns_none(self, monkeypatch, capsys):
        answers = iter(["7"])

        def _input(_prompt=""):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", _input)
        assert prompt_fields(PUZZLE_ATTEMPT) is None
        assert "Cancelled." in capsys.readouterr().out

    def test_secret_field_is_read_without_echo(self, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda _prompt="": pytest.fail("password echoed"))
        monkeypatch.setattr("getpass.getpass", lambda _prompt="": " pw123")
        assert prompt_field(ACCOUNT.fields[2]) == " pw123"
