"""Submission-time validation shared by every record kind."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .config import MSG_FILL_ALL_FIELDS
from .schemas import RecordKind


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    reason_code: str
    message: str
    field: Optional[str] = None


def all_fields_non_empty(fields: Iterable[str]) -> bool:
    """Return False iff at least one field is the empty string."""
    return all(f != "" for f in fields)


def validate_record(kind: RecordKind, values: list[str]) -> ValidationResult:
    """Validate *values* (ordered as ``kind.fields``) before they are stored."""
    if len(values) != len(kind.fields):
        return ValidationResult(
            ok=False,
            reason_code="missing_field",
            message=(
                f"{kind.label} expects {len(kind.fields)} fields "
                f"({', '.join(kind.field_names)}), got {len(values)}."
            ),
        )

    if not all_fields_non_empty(values):
        empty = next(spec.name for spec, v in zip(kind.fields, values) if v == "")
        return ValidationResult(
            ok=False,
            reason_code="empty_field",
            message=MSG_FILL_ALL_FIELDS,
            field=empty,
        )

    for spec, value in zip(kind.fields, values):
        if "\n" in value or "\r" in value:
            return ValidationResult(
                ok=False,
                reason_code="invalid_character",
                message=f"{spec.label} must fit on a single line.",
                field=spec.name,
            )
        if spec.choices and value not in spec.choices:
            return ValidationResult(
                ok=False,
                reason_code="invalid_choice",
                message=f"{spec.label} must be one of: {', '.join(spec.choices)}.",
                field=spec.name,
            )
        if spec.integer:
            try:
                int(value)
            except ValueError:
                return ValidationResult(
                    ok=False,
                    reason_code="invalid_integer",
                    message=f"{spec.label} must be a whole number.",
                    field=spec.name,
                )

    return ValidationResult(ok=True, reason_code="", message="")
