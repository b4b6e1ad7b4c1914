"""CLI commands for warehouse stock."""

from __future__ import annotations

import click

from recordkit.application.increase_stock import IncreaseStockHandler
from recordkit.application.sample_data import seed_warehouse
from recordkit.application.show_stock import ShowStockHandler
from recordkit.domain.exceptions import DomainException
from recordkit.domain.model.warehouse import ElectronicItem
from recordkit.domain.repository.inventory_repository import InventoryRepository
from recordkit.infrastructure.bootstrap import (
    electronics_repository,
    grocery_repository,
)


def _display_stock(title: str, repo: InventoryRepository) -> None:
    click.echo(f"{title} ({repo.count()} items)")
    for line in ShowStockHandler(stock_repo=repo).handle():
        click.echo(f"  {line.description}")
    click.echo()


@click.command("demo")
def warehouse_demo() -> None:
    """Seed both stores, move some stock, and show how bad requests fail."""
    electronics = electronics_repository()
    groceries = grocery_repository()
    seed_warehouse(electronics, groceries)

    _display_stock("Grocery items", groceries)
    _display_stock("Electronic items", electronics)

    new_level = IncreaseStockHandler(stock_repo=electronics).handle(1, 25)
    click.echo(f"Stock of electronic item #1 increased to {new_level}")
    groceries.remove(2)
    click.echo("Grocery item #2 removed")
    click.echo()

    attempts = [
        (
            "Adding a duplicate electronic item",
            lambda: electronics.add(ElectronicItem(1, "Duplicate Item", 10, "TestBrand", 12)),
        ),
        ("Removing grocery item #999", lambda: groceries.remove(999)),
        ("Setting a negative quantity", lambda: electronics.update_quantity(1, -5)),
    ]
    for label, attempt in attempts:
        try:
            attempt()
        except DomainException as exc:
            click.echo(f"{label}: {type(exc).__name__}: {exc}")
        else:
            click.echo(f"{label}: unexpectedly succeeded")
    click.echo()

    _display_stock("Grocery items", groceries)
    _display_stock("Electronic items", electronics)
