"""Platform-owned flat-file record store.

Each record kind lives in its own plaintext file under a data directory:
one record per line, fields joined by ``DELIMITER``, no header, no escaping.
Files are only ever appended to.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from club_platform.config import DELIMITER

logger = logging.getLogger(__name__)


class RecordStoreError(Exception):
    """A record store file could not be opened, read or written."""

    def __init__(self, store_name: str, action: str, cause: OSError):
        self.store_name = store_name
        self.action = action
        self.cause = cause
        super().__init__(f"Could not {action} record store '{store_name}': {cause}")


class FlatRecordStore:
    """Append and scan delimited text records in named files."""

    def __init__(self, data_dir: Path, delimiter: str = DELIMITER):
        self.data_dir = Path(data_dir)
        self.delimiter = delimiter

    def path_for(self, store_name: str) -> Path:
        """Return the file path backing *store_name*."""
        return self.data_dir / store_name

    def append(self, store_name: str, fields: Iterable[str]) -> str:
        """Join *fields* with the delimiter and append them as one line.

        Returns the written line (without the newline).
        """
        line = self.delimiter.join(str(f) for f in fields)
        self.append_line(store_name, line)
        return line

    def append_line(self, store_name: str, line: str) -> None:
        """Append *line* verbatim, creating the file if it does not exist.

        The file is opened before anything is written, so a failed open
        leaves the store untouched. The data directory is created on demand.
        """
        path = self.path_for(store_name)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            raise RecordStoreError(store_name, "append to", e) from e
        logger.debug("Appended record to %s", path)

    def iter_lines(self, store_name: str) -> Iterator[str]:
        """Yield each non-blank raw line, in file order.

        A missing file yields nothing.
        """
        path = self.path_for(store_name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                for raw in f:
                    line = raw.rstrip("\r\n")
                    if line:
                        yield line
        except FileNotFoundError:
            return
        except OSError as e:
            raise RecordStoreError(store_name, "read", e) from e

    def iter_records(self, store_name: str) -> Iterator[list[str]]:
        """Yield each line split on the delimiter, in file order."""
        for line in self.iter_lines(store_name):
            yield line.split(self.delimiter)

    def find_match(
        self,
        store_name: str,
        predicate: Callable[[list[str]], bool],
    ) -> Optional[list[str]]:
        """Return the first record for which *predicate* is true, or None."""
        for fields in self.iter_records(store_name):
            if predicate(fields):
                return fields
        return None

    def read_records(self, store_name: str) -> list[list[str]]:
        """Return every record in the store, in append order."""
        return list(self.iter_records(store_name))


__all__ = ["FlatRecordStore", "RecordStoreError"]
