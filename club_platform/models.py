"""Result models returned by platform services to client layers."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Optional

STATUS_SAVED = "saved"
STATUS_INVALID = "invalid"
STATUS_IO_ERROR = "io_error"


@dataclass
class SubmissionResult:
    """Outcome of validating and appending one record."""
    ok: bool
    status: str
    message: str
    kind: str
    line: Optional[str] = None
    field: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class LoginResult:
    ok: bool
    message: str
    username: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


__all__ = [
    "STATUS_SAVED",
    "STATUS_INVALID",
    "STATUS_IO_ERROR",
    "SubmissionResult",
    "LoginResult",
]
