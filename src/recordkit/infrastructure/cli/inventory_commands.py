"""CLI commands for the persisted inventory record log."""

from __future__ import annotations

import click

from recordkit.application.add_inventory_record import AddInventoryRecordHandler
from recordkit.application.sample_data import seed_inventory_log
from recordkit.application.show_inventory_records import ShowInventoryRecordsHandler
from recordkit.domain.exceptions import DomainException
from recordkit.infrastructure.bootstrap import inventory_log
from recordkit.infrastructure.persistence.json_record_log import JsonInventoryLog


def _open_log() -> JsonInventoryLog:
    ctx = click.get_current_context()
    root = ctx.find_root()
    return inventory_log((root.obj or {}).get("data_dir"))


@click.command("add")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="Quantity received.")
def inventory_add(item_id: int, name: str, quantity: int) -> None:
    """Log a new inventory record and save the log."""
    log = _open_log()
    handler = AddInventoryRecordHandler(record_log=log)

    try:
        item, saved = handler.handle(item_id=item_id, name=name, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item #{item.id} '{item.name}' added (quantity={item.quantity})")
    if not saved:
        raise click.ClickException(f"Could not save records to {log.file_path}")


@click.command("list")
def inventory_list() -> None:
    """Show every saved inventory record."""
    lines = ShowInventoryRecordsHandler(record_log=_open_log()).handle()

    if not lines:
        click.echo("No items in inventory.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Quantity':>8}  {'Date Added':<19}")
    click.echo("-" * 57)
    for line in lines:
        click.echo(
            f"{line.id:<6} {line.name:<20} {line.quantity:>8}  {line.date_added:<19}"
        )


@click.command("seed")
def inventory_seed() -> None:
    """Append the sample records and save the log."""
    log = _open_log()
    seed_inventory_log(log)

    if not log.save_to_file():
        raise click.ClickException(f"Could not save records to {log.file_path}")
    click.echo(f"Sample data added — {log.count()} records saved to {log.file_path}")
