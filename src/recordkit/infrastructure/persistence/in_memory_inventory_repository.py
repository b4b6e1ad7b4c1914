"""Dict-backed implementation of InventoryRepository.

Items are frozen dataclasses, so a quantity update swaps the stored
entry for a copy with the new quantity. The dict keeps the original
insertion position on reassignment.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable

from recordkit.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidQuantityError,
    ValidationError,
)
from recordkit.domain.model.entity import S
from recordkit.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class InMemoryInventoryRepository(InventoryRepository[S]):

    def __init__(self, items: Iterable[S] | None = None) -> None:
        self._items: dict[int, S] = {}
        for item in items or []:
            self.add(item)

    # --- InventoryRepository interface ----------------------------------------

    def add(self, item: S) -> None:
        if item is None:
            raise ValidationError("Item cannot be None")
        if item.id in self._items:
            raise DuplicateEntityError(
                f"Item with ID {item.id} already exists in the inventory"
            )
        if item.quantity < 0:
            raise InvalidQuantityError(
                f"Quantity cannot be negative. Item with ID {item.id} has quantity {item.quantity}"
            )
        self._items[item.id] = item

    def get_by_id(self, item_id: int) -> S:
        try:
            return self._items[item_id]
        except KeyError:
            raise EntityNotFoundError(
                f"Item with ID {item_id} not found in the inventory"
            ) from None

    def remove(self, item_id: int) -> None:
        if item_id not in self._items:
            raise EntityNotFoundError(
                f"Item with ID {item_id} not found in the inventory"
            )
        del self._items[item_id]

    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        # Order matters: a negative quantity is reported even for unknown ids.
        if new_quantity < 0:
            raise InvalidQuantityError(
                f"Quantity cannot be negative. Attempted to set quantity to {new_quantity}"
            )
        item = self.get_by_id(item_id)
        self._items[item_id] = dataclasses.replace(item, quantity=new_quantity)
        logger.debug(
            "Quantity of item %d changed %d -> %d", item_id, item.quantity, new_quantity
        )

    def get_all(self) -> list[S]:
        return list(self._items.values())

    def count(self) -> int:
        return len(self._items)

    def contains(self, item_id: int) -> bool:
        return item_id in self._items
