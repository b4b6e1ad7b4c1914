"""Entity contract shared by every stored record.

The stores only care about two capabilities: an integer identity and,
for stock-like records, a quantity. These are structural protocols, so
any dataclass exposing the right fields qualifies without inheriting
from anything.
"""

from __future__ import annotations

from typing import Protocol, TypeVar


class Entity(Protocol):
    """Anything with a unique, immutable integer id."""

    @property
    def id(self) -> int: ...


class StockedEntity(Entity, Protocol):
    """An entity that also tracks a non-negative stock quantity.

    Implementations are frozen dataclasses; the quantity only changes
    through ``InventoryRepository.update_quantity``.
    """

    @property
    def quantity(self) -> int: ...


E = TypeVar("E", bound=Entity)
S = TypeVar("S", bound=StockedEntity)
