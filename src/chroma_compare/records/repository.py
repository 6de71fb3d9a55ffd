"""
repository.py
=============

Does: Define the record store contract and two implementations: an
      in-memory store (tests, one-shot CLI runs) and a JSON-file store
      keyed by record id.
Used By: Workflows, JSON import, CLI.
Returns: ComparisonRecord lists, newest first.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Protocol

from chroma_compare.errors import RecordImportError
from chroma_compare.general.utils import debug
from chroma_compare.records.model import ComparisonRecord, record_from_dict, record_to_dict

__all__ = ["RecordRepository", "InMemoryRecordRepository", "JsonFileRecordRepository"]
__docformat__ = "google"

logger = logging.getLogger(__name__)


class RecordRepository(Protocol):
    """Minimal surface a record store must expose."""

    def save(self, record: ComparisonRecord) -> None: ...

    def get_all(self) -> list[ComparisonRecord]: ...

    def delete(self, record_id: str) -> None: ...

    def clear_all(self) -> None: ...


def _newest_first(records: list[ComparisonRecord]) -> list[ComparisonRecord]:
    return sorted(records, key=lambda r: r.timestamp, reverse=True)


class InMemoryRecordRepository:
    def __init__(self) -> None:
        self._records: dict[str, ComparisonRecord] = {}

    def save(self, record: ComparisonRecord) -> None:
        self._records[record.id] = record

    def get_all(self) -> list[ComparisonRecord]:
        return _newest_first(list(self._records.values()))

    def delete(self, record_id: str) -> None:
        self._records.pop(record_id, None)

    def clear_all(self) -> None:
        self._records.clear()


class JsonFileRecordRepository:
    """Store records as one JSON object ``{id: record}``, rewritten atomically on change."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._lock = threading.RLock()

    # ── file I/O ─────────────────────────────────────────────────────────────
    def _read(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise RecordImportError(f"{self.path}: invalid JSON store: {e}") from e
        if not isinstance(data, dict):
            raise RecordImportError(f"{self.path}: expected a JSON object keyed by record id")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    # ── RecordRepository ─────────────────────────────────────────────────────
    def save(self, record: ComparisonRecord) -> None:
        with self._lock:
            data = self._read()
            data[record.id] = record_to_dict(record)
            self._write(data)
        debug("saved", topic="records", id=record.id, path=str(self.path))

    def get_all(self) -> list[ComparisonRecord]:
        with self._lock:
            data = self._read()
        return _newest_first([record_from_dict(d) for d in data.values()])

    def delete(self, record_id: str) -> None:
        with self._lock:
            data = self._read()
            if data.pop(record_id, None) is None:
                logger.debug("delete: no record %s in %s", record_id, self.path)
                return
            self._write(data)
        debug("deleted", topic="records", id=record_id, path=str(self.path))

    def clear_all(self) -> None:
        with self._lock:
            self._write({})
        logger.info("Cleared all records in %s", self.path)
