"""Abstract predicate-based repository.

Used where records are looked up by arbitrary fields (a name substring,
a patient id on a prescription) rather than strictly by their own id.
Defined in the domain layer so the domain never depends on
infrastructure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic

from recordkit.domain.model.entity import E


class Repository(ABC, Generic[E]):

    @abstractmethod
    def add(self, entity: E) -> None:
        """Store an entity. No uniqueness check is made."""

    @abstractmethod
    def get_all(self) -> list[E]:
        """Return a snapshot of every stored entity, in insertion order."""

    @abstractmethod
    def find(self, predicate: Callable[[E], bool]) -> E | None:
        """Return the first entity matching *predicate*, or None."""

    @abstractmethod
    def filter(self, predicate: Callable[[E], bool]) -> list[E]:
        """Return every entity matching *predicate*, in insertion order."""

    @abstractmethod
    def get_by_id(self, entity_id: int) -> E:
        """Return the first entity with *entity_id*.

        Raises EntityNotFoundError if there is none.
        """

    @abstractmethod
    def remove(self, predicate: Callable[[E], bool]) -> bool:
        """Remove the first entity matching *predicate*.

        Returns True if something was removed.
        """

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored entities."""

    def __len__(self) -> int:
        return self.count()
