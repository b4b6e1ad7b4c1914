"""Tests for the warehouse stock use cases."""

from datetime import date

import pytest

from recordkit.application.increase_stock import IncreaseStockHandler
from recordkit.application.sample_data import seed_warehouse
from recordkit.application.show_stock import ShowStockHandler
from recordkit.domain.exceptions import EntityNotFoundError, ValidationError
from recordkit.domain.model.warehouse import ElectronicItem, GroceryItem
from recordkit.infrastructure.persistence.in_memory_inventory_repository import (
    InMemoryInventoryRepository,
)


def _setup():
    electronics = InMemoryInventoryRepository[ElectronicItem]()
    groceries = InMemoryInventoryRepository[GroceryItem]()
    seed_warehouse(electronics, groceries, today=date(2024, 5, 1))
    return electronics, groceries


class TestIncreaseStock:

    def test_adds_to_current_level(self):
        electronics, _ = _setup()
        new_level = IncreaseStockHandler(electronics).handle(1, 25)
        assert new_level == 30
        assert electronics.get_by_id(1).quantity == 30

    def test_unknown_item(self):
        electronics, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            IncreaseStockHandler(electronics).handle(999, 5)

    def test_non_positive_increase_rejected(self):
        electronics, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            IncreaseStockHandler(electronics).handle(1, 0)


class TestShowStock:

    def test_lines_in_insertion_order(self):
        _, groceries = _setup()
        lines = ShowStockHandler(groceries).handle()
        assert [line.name for line in lines] == ["Milk", "Bread", "Apples"]
        assert lines[0].description == (
            "Grocery Item [ID: 1, Name: Milk, Quantity: 20, Expiry: 2024-05-08]"
        )

    def test_empty_store(self):
        assert ShowStockHandler(InMemoryInventoryRepository()).handle() == []
