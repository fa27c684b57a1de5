"""Record kind declarations.

A record kind is an ordered list of named fields plus the store file and
line format it is written with. Accounts and lesson applications are strict
delimited lines; puzzle, game and coaching records are written as
human-readable prose lines (``"ID: 7, Username: ann, Difficulty: Easy"``).
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass, field
from typing import Optional

from .config import (
    COACHING_FILE,
    DELIMITER,
    GAME_RESULTS,
    GAMES_FILE,
    LESSONS_FILE,
    MSG_REGISTER_FAILED,
    MSG_REGISTERED,
    PUZZLE_DIFFICULTIES,
    PUZZLES_FILE,
    USERS_FILE,
)


class UnknownRecordKindError(KeyError):
    """Raised when a record kind key is not registered."""


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    choices: tuple[str, ...] = ()
    integer: bool = False
    secret: bool = False

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "label": self.label,
            "choices": list(self.choices),
            "integer": self.integer,
            "secret": self.secret,
        }


@dataclass(frozen=True)
class RecordKind:
    key: str
    label: str
    store_name: str
    fields: tuple[FieldSpec, ...]
    line_template: Optional[str] = None
    saved_message: str = "Credentials saved successfully!"
    error_message: str = "Error occurred while saving credentials."
    _pattern: Optional[re.Pattern] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.line_template is not None:
            object.__setattr__(self, "_pattern", _template_pattern(self.line_template))

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    @property
    def delimited(self) -> bool:
        """True when lines are plain delimiter-joined field values."""
        return self.line_template is None

    def values_from_mapping(self, data: dict) -> list[str]:
        """Order *data* by this kind's field names (missing → empty)."""
        return [str(data.get(name, "") or "") for name in self.field_names]

    def format_line(self, values: list[str]) -> str:
        """Render *values* as the stored line for this kind."""
        if self.delimited:
            return DELIMITER.join(values)
        return self.line_template.format(**dict(zip(self.field_names, values)))

    def parse_line(self, line: str) -> Optional[dict]:
        """Parse a stored line back into a field mapping.

        Returns None when the line does not have the shape of this kind,
        e.g. a delimited line whose field count is off because a value held
        a comma.
        """
        if self.delimited:
            parts = line.split(DELIMITER)
            if len(parts) != len(self.fields):
                return None
            return dict(zip(self.field_names, parts))

        match = self._pattern.fullmatch(line)
        if match is None:
            return None
        return match.groupdict()

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "label": self.label,
            "store_name": self.store_name,
            "fields": [f.to_dict() for f in self.fields],
        }


def _template_pattern(template: str) -> re.Pattern:
    """Compile a ``str.format`` template into an anchored regex."""
    parts = []
    for literal, name, _spec, _conv in string.Formatter().parse(template):
        parts.append(re.escape(literal))
        if name:
            parts.append(f"(?P<{name}>.*?)")
    return re.compile("".join(parts))


ACCOUNT = RecordKind(
    key="accounts",
    label="User Registration",
    store_name=USERS_FILE,
    fields=(
        FieldSpec("username", "Username"),
        FieldSpec("email", "Email"),
        FieldSpec("password", "Password", secret=True),
        FieldSpec("elo_rating", "Elo Rating", integer=True),
    ),
    saved_message=MSG_REGISTERED,
    error_message=MSG_REGISTER_FAILED,
)

LESSON_APPLICATION = RecordKind(
    key="lessons",
    label="Apply for Lesson Training",
    store_name=LESSONS_FILE,
    fields=(
        FieldSpec("id", "ID"),
        FieldSpec("username", "Username"),
        FieldSpec("fide_id", "FIDE ID"),
        FieldSpec("coach", "Coach Trainer"),
        FieldSpec("description", "Application Description"),
    ),
)

PUZZLE_ATTEMPT = RecordKind(
    key="puzzles",
    label="Try Puzzle",
    store_name=PUZZLES_FILE,
    fields=(
        FieldSpec("id", "ID"),
        FieldSpec("username", "Username"),
        FieldSpec("difficulty", "Puzzle Difficulty", choices=PUZZLE_DIFFICULTIES),
    ),
    line_template="ID: {id}, Username: {username}, Difficulty: {difficulty}",
    saved_message="Puzzle credentials saved successfully!",
    error_message="Error occurred while saving puzzle credentials.",
)

GAME_RESULT = RecordKind(
    key="games",
    label="Play Game",
    store_name=GAMES_FILE,
    fields=(
        FieldSpec("your_id", "Your ID"),
        FieldSpec("white_player", "White Player Username"),
        FieldSpec("black_player", "Black Player Username"),
        FieldSpec("result", "Result", choices=GAME_RESULTS),
    ),
    line_template=(
        "Your ID: {your_id}, White Player: {white_player}, "
        "Black Player: {black_player}, Result: {result}"
    ),
    saved_message="Game credentials saved successfully!",
    error_message="Error occurred while saving game credentials.",
)

COACHING_REQUEST = RecordKind(
    key="coaching",
    label="Coaching",
    store_name=COACHING_FILE,
    fields=(
        FieldSpec("id", "ID"),
        FieldSpec("name", "Name"),
        FieldSpec("bio", "Coach Bio"),
        FieldSpec("student", "Student to Coach"),
    ),
    line_template="ID: {id}, Name: {name}, Coach Bio: {bio}, Student: {student}",
    saved_message="Coaching credentials saved successfully!",
    error_message="Error occurred while saving coaching credentials.",
)

RECORD_KINDS: dict[str, RecordKind] = {
    kind.key: kind
    for kind in (ACCOUNT, LESSON_APPLICATION, PUZZLE_ATTEMPT, GAME_RESULT, COACHING_REQUEST)
}

# Kinds submitted from the dashboard (accounts come from registration)
FORM_KINDS = ("lessons", "puzzles", "games", "coaching")


def get_record_kind(key: str) -> RecordKind:
    """Return the registered kind for *key*."""
    try:
        return RECORD_KINDS[key]
    except KeyError:
        raise UnknownRecordKindError(key) from None
