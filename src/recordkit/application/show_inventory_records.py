"""Application service: Show Inventory Records use case (query)."""

from __future__ import annotations

from recordkit.application.dto import InventoryRecordDTO
from recordkit.domain.model.inventory import InventoryItem
from recordkit.domain.repository.record_log import RecordLog


class ShowInventoryRecordsHandler:

    def __init__(self, record_log: RecordLog[InventoryItem]) -> None:
        self._record_log = record_log

    def handle(self) -> list[InventoryRecordDTO]:
        return [
            InventoryRecordDTO(
                id=item.id,
                name=item.name,
                quantity=item.quantity,
                date_added=item.date_added.strftime("%Y-%m-%d %H:%M:%S"),
            )
            for item in self._record_log.get_all()
        ]
