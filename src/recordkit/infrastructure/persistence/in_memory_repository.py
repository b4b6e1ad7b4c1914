"""List-backed implementation of the predicate-based Repository."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from recordkit.domain.exceptions import EntityNotFoundError, ValidationError
from recordkit.domain.model.entity import E
from recordkit.domain.repository.repository import Repository


class InMemoryRepository(Repository[E]):

    def __init__(self, entities: Iterable[E] | None = None) -> None:
        self._items: list[E] = []
        for entity in entities or []:
            self.add(entity)

    # --- Repository interface -------------------------------------------------

    def add(self, entity: E) -> None:
        if entity is None:
            raise ValidationError("Entity cannot be None")
        self._items.append(entity)

    def get_all(self) -> list[E]:
        return list(self._items)

    def find(self, predicate: Callable[[E], bool]) -> E | None:
        return next((item for item in self._items if predicate(item)), None)

    def filter(self, predicate: Callable[[E], bool]) -> list[E]:
        return [item for item in self._items if predicate(item)]

    def get_by_id(self, entity_id: int) -> E:
        entity = self.find(lambda item: item.id == entity_id)
        if entity is None:
            raise EntityNotFoundError(f"No record with ID {entity_id}")
        return entity

    def remove(self, predicate: Callable[[E], bool]) -> bool:
        for i, item in enumerate(self._items):
            if predicate(item):
                del self._items[i]
                return True
        return False

    def count(self) -> int:
        return len(self._items)
