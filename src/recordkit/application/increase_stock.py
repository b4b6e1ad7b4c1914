"""Application service: Increase Stock use case."""

from __future__ import annotations

from recordkit.domain.exceptions import ValidationError
from recordkit.domain.repository.inventory_repository import InventoryRepository


class IncreaseStockHandler:

    def __init__(self, stock_repo: InventoryRepository) -> None:
        self._stock_repo = stock_repo

    def handle(self, item_id: int, quantity: int) -> int:
        """Add *quantity* units to an item and return the new stock level.

        Raises EntityNotFoundError if the item is not stocked.
        """
        if quantity <= 0:
            raise ValidationError("Stock increase must be positive")

        item = self._stock_repo.get_by_id(item_id)
        new_quantity = item.quantity + quantity
        self._stock_repo.update_quantity(item_id, new_quantity)
        return new_quantity
