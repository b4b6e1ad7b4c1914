"""InventoryItem — a single entry in the persisted inventory record log."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from recordkit.domain.exceptions import ValidationError


@dataclass(frozen=True)
class InventoryItem:
    """A record of stock received, stamped with the time it was logged."""

    id: int
    name: str
    quantity: int
    date_added: datetime = field(default_factory=datetime.now)

    @staticmethod
    def create(item_id: int, name: str, quantity: int) -> InventoryItem:
        """Create a new record, enforcing the input rules."""
        if not name or not name.strip():
            raise ValidationError("Item name cannot be empty")
        if quantity < 0:
            raise ValidationError(f"Quantity cannot be negative, got {quantity}")
        return InventoryItem(id=item_id, name=name.strip(), quantity=quantity)
