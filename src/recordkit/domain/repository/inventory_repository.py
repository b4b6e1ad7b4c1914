"""Abstract id-keyed repository for stocked entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic

from recordkit.domain.model.entity import S


class InventoryRepository(ABC, Generic[S]):
    """Sole authority on existence, insertion, update and removal.

    Invariants:
    - no two stored entities share an id
    - a stored quantity is never negative
    """

    @abstractmethod
    def add(self, item: S) -> None:
        """Store a new item.

        Raises DuplicateEntityError if the id is already present.
        """

    @abstractmethod
    def get_by_id(self, item_id: int) -> S:
        """Raises EntityNotFoundError if the id is absent."""

    @abstractmethod
    def remove(self, item_id: int) -> None:
        """Raises EntityNotFoundError if the id is absent."""

    @abstractmethod
    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        """Set the stock quantity of an item.

        A negative quantity raises InvalidQuantityError before the id is
        even looked up; an unknown id then raises EntityNotFoundError.
        """

    @abstractmethod
    def get_all(self) -> list[S]:
        """Return a snapshot of every item, in insertion order."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored items."""

    @abstractmethod
    def contains(self, item_id: int) -> bool:
        """Existence check that never raises."""

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, item_id: object) -> bool:
        return isinstance(item_id, int) and self.contains(item_id)
