"""Application service: Add Inventory Record use case.

Appends to the record log and persists the whole log straight away so
the file always reflects what the user has entered.
"""

from __future__ import annotations

from recordkit.domain.model.inventory import InventoryItem
from recordkit.domain.repository.record_log import RecordLog


class AddInventoryRecordHandler:

    def __init__(self, record_log: RecordLog[InventoryItem]) -> None:
        self._record_log = record_log

    def handle(self, item_id: int, name: str, quantity: int) -> tuple[InventoryItem, bool]:
        """Log a new record.

        Returns the record and whether the log was saved. A failed save
        is not an error: the record stays in the in-memory log.
        """
        item = InventoryItem.create(item_id=item_id, name=name, quantity=quantity)
        self._record_log.append(item)
        return item, self._record_log.save_to_file()
