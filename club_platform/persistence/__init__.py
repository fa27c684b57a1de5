"""Platform-owned persistence layer (flat-file record stores)."""

from .record_store import FlatRecordStore, RecordStoreError
