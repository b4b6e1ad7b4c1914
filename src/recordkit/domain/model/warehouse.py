"""Warehouse stock items.

Two unrelated item kinds kept in separate stores. Neither inherits from
a common base; both simply satisfy ``StockedEntity``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ElectronicItem:
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __str__(self) -> str:
        return (
            f"Electronic Item [ID: {self.id}, Name: {self.name}, "
            f"Quantity: {self.quantity}, Brand: {self.brand}, "
            f"Warranty: {self.warranty_months} months]"
        )


@dataclass(frozen=True)
class GroceryItem:
    id: int
    name: str
    quantity: int
    expiry_date: date

    def __str__(self) -> str:
        return (
            f"Grocery Item [ID: {self.id}, Name: {self.name}, "
            f"Quantity: {self.quantity}, Expiry: {self.expiry_date:%Y-%m-%d}]"
        )
