"""Shared file handling for the JSON-backed repositories.

Each repository keeps one JSON array of snake_case rows in one file.
Every read and write goes to disk so separate CLI invocations always see
each other's changes.  I/O, decoding and malformed-row failures surface
as StorageError.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, TypeVar

from pos.domain.exceptions import StorageError, ValidationError

log = logging.getLogger(__name__)

T = TypeVar("T")


class JsonFile:

    def __init__(self, file_path: Path, label: str) -> None:
        self._file_path = file_path
        self._label = label
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.error("Failed to read %s from %s: %s", self._label, self._file_path, exc)
            raise StorageError(f"Error reading {self._label}: {exc}") from exc
        if not isinstance(records, list):
            raise StorageError(
                f"Error reading {self._label}: expected a JSON array in {self._file_path}"
            )
        if not all(isinstance(raw, dict) for raw in records):
            raise StorageError(
                f"Error reading {self._label}: expected JSON objects in {self._file_path}"
            )
        return records

    def decode(self, raw: dict, to_domain: Callable[[dict], T]) -> T:
        """Rebuild one domain object from a stored row.

        Missing keys and bad values surface as StorageError.
        """
        try:
            return to_domain(raw)
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            record_id = raw.get("id")
            log.error("Malformed %s record %r in %s: %r", self._label, record_id, self._file_path, exc)
            raise StorageError(
                f"Error reading {self._label}: malformed record {record_id!r} ({exc!r})"
            ) from exc

    def persist(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            log.error("Failed to write %s to %s: %s", self._label, self._file_path, exc)
            raise StorageError(f"Error saving {self._label}: {exc}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Error creating {self._label} store: {exc}") from exc
