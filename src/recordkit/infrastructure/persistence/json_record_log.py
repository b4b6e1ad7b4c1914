"""JSON-file-backed implementation of RecordLog.

The log lives in memory; the file is only touched on an explicit save or
load. Subclasses supply the per-record serialization.
"""

from __future__ import annotations

import json
import logging
from abc import abstractmethod
from datetime import datetime
from pathlib import Path
from typing import TypeVar

from recordkit.domain.model.inventory import InventoryItem
from recordkit.domain.repository.record_log import RecordLog

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonRecordLog(RecordLog[T]):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._records: list[T] = []

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- RecordLog interface --------------------------------------------------

    def append(self, record: T) -> None:
        self._records.append(record)

    def get_all(self) -> list[T]:
        return list(self._records)

    def count(self) -> int:
        return len(self._records)

    def save_to_file(self, path: Path | None = None) -> bool:
        target = path or self._file_path
        try:
            payload = json.dumps([self._to_raw(r) for r in self._records], indent=2)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(payload + "\n", encoding="utf-8")
        except (OSError, AttributeError, TypeError, ValueError) as exc:
            logger.error("Error saving to file %s: %s", target, exc)
            return False
        logger.info("Saved %d records to %s", len(self._records), target)
        return True

    def load_from_file(self, path: Path | None = None) -> bool:
        source = path or self._file_path
        if not source.exists():
            logger.debug("No saved records at %s, keeping current log", source)
            return False
        try:
            raw = json.loads(source.read_text(encoding="utf-8"))
            if not isinstance(raw, list):
                raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
            records = [self._to_domain(item) for item in raw]
        except (OSError, KeyError, TypeError, ValueError, RecursionError) as exc:
            logger.error("Error loading from file %s: %s", source, exc)
            self._records = []
            return False
        self._records = records
        logger.info("Loaded %d records from %s", len(records), source)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    @abstractmethod
    def _to_raw(record: T) -> dict:
        """Convert a record into a JSON-compatible dict."""

    @staticmethod
    @abstractmethod
    def _to_domain(raw: dict) -> T:
        """Rebuild a record from its dict form."""


class JsonInventoryLog(JsonRecordLog[InventoryItem]):

    @staticmethod
    def _to_raw(record: InventoryItem) -> dict:
        return {
            "id": record.id,
            "name": record.name,
            "quantity": record.quantity,
            "date_added": record.date_added.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryItem:
        return InventoryItem(
            id=int(raw["id"]),
            name=raw["name"],
            quantity=int(raw["quantity"]),
            date_added=datetime.fromisoformat(raw["date_added"]),
        )
