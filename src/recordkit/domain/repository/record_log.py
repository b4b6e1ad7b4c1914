"""Abstract append-only record log with whole-collection persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

T = TypeVar("T")


class RecordLog(ABC, Generic[T]):

    @abstractmethod
    def append(self, record: T) -> None:
        """Add a record to the end of the log. Duplicates are allowed."""

    @abstractmethod
    def get_all(self) -> list[T]:
        """Return an independent copy of the log, in append order."""

    @abstractmethod
    def save_to_file(self, path: Path | None = None) -> bool:
        """Overwrite the file with the current log.

        Failures are reported and absorbed; returns False instead of
        raising.
        """

    @abstractmethod
    def load_from_file(self, path: Path | None = None) -> bool:
        """Replace the log with the file's contents.

        A missing file leaves the log untouched; an unreadable one empties
        it. Neither raises. Returns True only if records were loaded.
        """

    @abstractmethod
    def count(self) -> int:
        """Return the number of records in the log."""

    def __len__(self) -> int:
        return self.count()
