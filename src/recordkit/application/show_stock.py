"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from recordkit.application.dto import StockLineDTO
from recordkit.domain.repository.inventory_repository import InventoryRepository


class ShowStockHandler:

    def __init__(self, stock_repo: InventoryRepository) -> None:
        self._stock_repo = stock_repo

    def handle(self) -> list[StockLineDTO]:
        return [
            StockLineDTO(
                id=item.id,
                name=item.name,
                quantity=item.quantity,
                description=str(item),
            )
            for item in self._stock_repo.get_all()
        ]
