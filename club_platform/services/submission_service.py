"""Platform-owned submission service.

Validates form values for any record kind and appends them to the kind's
record store. Store failures are logged and reported in the result; they are
never re-raised or retried.
"""

from __future__ import annotations

import logging
from pathlib import Path

from club_platform.models import (
    STATUS_INVALID,
    STATUS_IO_ERROR,
    STATUS_SAVED,
    SubmissionResult,
)
from club_platform.persistence import FlatRecordStore, RecordStoreError
from club_platform.schemas import RecordKind, get_record_kind
from club_platform.validation import validate_record

logger = logging.getLogger(__name__)


def _normalize_values(kind: RecordKind, values: list[str]) -> list[str]:
    """Return *values* with integer fields in canonical integer form."""
    return [
        str(int(value)) if spec.integer else value
        for spec, value in zip(kind.fields, values)
    ]


def save_record(data_dir: Path, kind: RecordKind, values: list[str]) -> SubmissionResult:
    """Validate *values* and append them to the store for *kind*."""
    values = [str(v) for v in values]
    validation = validate_record(kind, values)
    if not validation.ok:
        return SubmissionResult(
            ok=False,
            status=STATUS_INVALID,
            message=validation.message,
            kind=kind.key,
            field=validation.field,
        )

    line = kind.format_line(_normalize_values(kind, values))
    store = FlatRecordStore(data_dir)
    try:
        store.append_line(kind.store_name, line)
    except RecordStoreError as e:
        logger.error("Failed to save %s record: %s", kind.key, e, exc_info=e.cause)
        return SubmissionResult(
            ok=False,
            status=STATUS_IO_ERROR,
            message=kind.error_message,
            kind=kind.key,
        )

    return SubmissionResult(
        ok=True,
        status=STATUS_SAVED,
        message=kind.saved_message,
        kind=kind.key,
        line=line,
    )


def submit_record(data_dir: Path, kind_key: str, values: list[str] | dict) -> SubmissionResult:
    """Submit a form for the kind registered as *kind_key*.

    *values* may be an ordered list or a mapping keyed by field name.
    Raises ``UnknownRecordKindError`` for unregistered kinds.
    """
    kind = get_record_kind(kind_key)
    if isinstance(values, dict):
        values = kind.values_from_mapping(values)
    return save_record(data_dir, kind, list(values))


def list_records(data_dir: Path, kind_key: str) -> list[dict]:
    """Return saved records of a kind, in append order.

    Lines that do not parse as the kind are returned as ``{"raw": line}``.
    Raises ``RecordStoreError`` if the store exists but cannot be read.
    """
    kind = get_record_kind(kind_key)
    store = FlatRecordStore(data_dir)
    records = []
    for line in store.iter_lines(kind.store_name):
        parsed = kind.parse_line(line)
        records.append(parsed if parsed is not None else {"raw": line})
    return records
