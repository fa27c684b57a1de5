"""Tests for record kind declarations and line formats."""

import pytest

from club_platform.config import MSG_REGISTER_FAILED, MSG_REGISTERED
from club_platform.schemas import (
    ACCOUNT,
    COACHING_REQUEST,
    FORM_KINDS,
    GAME_RESULT,
    LESSON_APPLICATION,
    PUZZLE_ATTEMPT,
    RECORD_KINDS,
    UnknownRecordKindError,
    get_record_kind,
)


def test_registry_holds_all_five_kinds():
    assert set(RECORD_KINDS) == {"accounts", "lessons", "puzzles", "games", "coaching"}
    assert set(FORM_KINDS) == set(RECORD_KINDS) - {"accounts"}


def test_store_file_names():
    assert ACCOUNT.store_name == "users.txt"
    assert LESSON_APPLICATION.store_name == "lesson_credentials.txt"
    assert PUZZLE_ATTEMPT.store_name == "puzzle_credentials.txt"
    assert GAME_RESULT.store_name == "game_credentials.txt"
    assert COACHING_REQUEST.store_name == "coaching_credentials.txt"


def test_get_record_kind_unknown_raises():
    with pytest.raises(UnknownRecordKindError):
        get_record_kind("tournaments")


def test_unknown_kind_error_is_a_key_error():
    with pytest.raises(KeyError):
        get_record_kind("tournaments")


class TestFormatLine:

    def test_account_is_delimited(self):
        assert ACCOUNT.format_line(["alice", "a@x.com", "pw123", "1500"]) == "alice,a@x.com,pw123,1500"

    def test_lesson_is_delimited(self):
        line = LESSON_APPLICATION.format_line(["1", "alice", "4100018", "Magnus", "Endgames"])
        assert line == "1,alice,4100018,Magnus,Endgames"

    def test_puzzle_is_prose(self):
        assert PUZZLE_ATTEMPT.format_line(["7", "alice", "Extremely Hard"]) == (
            "ID: 7, Username: alice, Difficulty: Extremely Hard"
        )

    def test_game_is_prose(self):
        assert GAME_RESULT.format_line(["3", "alice", "bob", "White"]) == (
            "Your ID: 3, White Player: alice, Black Player: bob, Result: White"
        )

    def test_coaching_is_prose(self):
        assert COACHING_REQUEST.format_line(["2", "Judit", "GM", "alice"]) == (
            "ID: 2, Name: Judit, Coach Bio: GM, Student: alice"
        )


class TestParseLine:

    def test_delimited_line(self):
        assert ACCOUNT.parse_line("alice,a@x.com,pw123,1500") == {
            "username": "alice",
            "email": "a@x.com",
            "password": "pw123",
            "elo_rating": "1500",
        }

    def test_delimited_line_with_wrong_field_count(self):
        assert LESSON_APPLICATION.parse_line("1,alice,99,Coach,Openings, endgames") is None
        assert ACCOUNT.parse_line("alice,a@x.com") is None

    def test_prose_line(self):
        parsed = GAME_RESULT.parse_line(
            "Your ID: 3, White Player: alice, Black Player: bob, Result: Draw"
        )
        assert parsed == {
            "your_id": "3",
            "white_player": "alice",
            "black_player": "bob",
            "result": "Draw",
        }

    def test_prose_line_keeps_commas_in_last_field(self):
        parsed = COACHING_REQUEST.parse_line(
            "ID: 2, Name: Judit, Coach Bio: GM, author, trainer, Student: alice"
        )
        assert parsed["bio"] == "GM, author, trainer"
        assert parsed["student"] == "alice"

    def test_prose_line_of_other_kind_does_not_parse(self):
        assert PUZZLE_ATTEMPT.parse_line("ID: 2, Name: Judit, Coach Bio: GM, Student: alice") is None


def test_values_from_mapping_orders_and_fills_missing():
    assert PUZZLE_ATTEMPT.values_from_mapping({"difficulty": "Easy", "id": "1"}) == ["1", "", "Easy"]


def test_to_dict_lists_fields_and_choices():
    payload = PUZZLE_ATTEMPT.to_dict()
    assert payload["key"] == "puzzles"
    assert [f["name"] for f in payload["fields"]] == ["id", "username", "difficulty"]
    assert payload["fields"][2]["choices"] == ["Easy", "Hard", "Extremely Hard"]


def test_account_messages_come_from_config():
    assert ACCOUNT.saved_message == MSG_REGISTERED
    assert ACCOUNT.error_message == MSG_REGISTER_FAILED
