"""
Record store backed by a single local JSON document.

The store is a plain key-value surface: each collection name maps to an
ordered list of JSON-ready record dicts. It knows nothing about the record
models; typed access lives in pocketbook.storage.record_io.

Design:
- get/set per collection, ordered, whole-collection writes
- the file is read on every get and rewritten on every set
- writes go to a temp file in the same directory, then replace the original
- a missing file behaves as an empty store

Privacy: local file only. Never transmit the store over networks as it
contains sensitive financial data.

Usage:
    store = RecordStore(Path("data/pocketbook.json"))
    store.set(TRANSACTIONS, [...])
    rows = store.get(TRANSACTIONS)
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

TRANSACTIONS = "transactions"
BUDGETS = "budgets"
GOALS = "goals"

COLLECTIONS: tuple[str, ...] = (TRANSACTIONS, BUDGETS, GOALS)


class StoreError(ValueError):
    """Raised when the store file exists but cannot be interpreted."""


class RecordStore:
    """Key-value store of record collections in one JSON file."""

    def __init__(self, path: Path):
        """Initialize the store.

        Args:
            path: Path to the JSON document. Created on first write.
        """
        self.path = Path(path)

    def get(self, collection: str) -> list[dict[str, Any]]:
        """Return the records of a collection, in stored order (empty if absent)."""
        _check_collection(collection)
        records = self._read().get(collection, [])
        if not isinstance(records, list):
            raise StoreError(f"Collection '{collection}' in {self.path} is not a list")
        logger.debug("Read %d %s from %s", len(records), collection, self.path)
        return records

    def set(self, collection: str, records: list[dict[str, Any]]) -> None:
        """Replace a collection with ``records``, keeping the given order."""
        _check_collection(collection)
        document = self._read()
        document[collection] = list(records)
        self._write(document)
        logger.debug("Wrote %d %s to %s", len(records), collection, self.path)

    def clear(self) -> None:
        """Empty every collection."""
        self._write({name: [] for name in COLLECTIONS})
        logger.debug("Cleared all collections in %s", self.path)

    def exists(self) -> bool:
        return self.path.exists()

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        text = self.path.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise StoreError(f"Store file {self.path} is not valid JSON: {e}") from e
        if not isinstance(document, dict):
            raise StoreError(f"Store file {self.path} must contain a JSON object")
        return document

    def _write(self, document: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".pocketbook-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


def _check_collection(collection: str) -> None:
    if collection not in COLLECTIONS:
        raise KeyError(f"Unknown collection: {collection}")


__all__ = [
    "BUDGETS",
    "COLLECTIONS",
    "GOALS",
    "TRANSACTIONS",
    "RecordStore",
    "StoreError",
]
