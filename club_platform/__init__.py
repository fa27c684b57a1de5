"""Platform layer for the chess-club desk: record stores, forms and navigation."""

__version__ = "1.0.0"

from .models import LoginResult, SubmissionResult
from .navigation import NavigationError, NavigationStack, greeting
from .persistence import FlatRecordStore, RecordStoreError
from .schemas import (
    FORM_KINDS,
    RECORD_KINDS,
    RecordKind,
    UnknownRecordKindError,
    get_record_kind,
)
from .validation import ValidationResult, all_fields_non_empty, validate_record

__all__ = [
    "__version__",
    "FlatRecordStore",
    "RecordStoreError",
    "RecordKind",
    "RECORD_KINDS",
    "FORM_KINDS",
    "UnknownRecordKindError",
    "get_record_kind",
    "ValidationResult",
    "all_fields_non_empty",
    "validate_record",
    "NavigationStack",
    "NavigationError",
    "greeting",
    "SubmissionResult",
    "LoginResult",
]
