"""Finance transactions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from recordkit.domain.exceptions import ValidationError
from recordkit.domain.model.value_objects import Money


@dataclass(frozen=True)
class Transaction:
    """A single spend recorded against a category (e.g. "Groceries")."""

    id: int
    date: date
    amount: Money
    category: str

    def __post_init__(self) -> None:
        if not self.category or not self.category.strip():
            raise ValidationError("Transaction category is required")

    def __str__(self) -> str:
        return f"#{self.id} {self.date:%Y-%m-%d} {self.category}: {self.amount}"
