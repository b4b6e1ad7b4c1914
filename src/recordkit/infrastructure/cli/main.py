from __future__ import annotations

import logging
from pathlib import Path

import click

from recordkit.infrastructure.cli.finance_commands import finance_demo
from recordkit.infrastructure.cli.grade_commands import grades_process, grades_sample
from recordkit.infrastructure.cli.health_commands import (
    health_demo,
    health_prescriptions,
    health_remove,
    health_search,
)
from recordkit.infrastructure.cli.inventory_commands import (
    inventory_add,
    inventory_list,
    inventory_seed,
)
from recordkit.infrastructure.cli.warehouse_commands import warehouse_demo
from recordkit.infrastructure.logging.log_config import setup_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for saved records (default: $RECORDKIT_DATA_DIR or ./data).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, data_dir: Path | None) -> None:
    """recordkit — small record-keeping systems over shared stores"""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


@cli.group()
def inventory() -> None:
    """Persisted inventory record log."""


@cli.group()
def warehouse() -> None:
    """Warehouse stock kept in id-keyed stores."""


@cli.group()
def health() -> None:
    """Patients and prescriptions."""


@cli.group()
def grades() -> None:
    """Student grade processing from flat files."""


@cli.group()
def finance() -> None:
    """Finance transactions."""


# Register subcommands
inventory.add_command(inventory_add)
inventory.add_command(inventory_list)
inventory.add_command(inventory_seed)
warehouse.add_command(warehouse_demo)
health.add_command(health_demo)
health.add_command(health_prescriptions)
health.add_command(health_remove)
health.add_command(health_search)
grades.add_command(grades_process)
grades.add_command(grades_sample)
finance.add_command(finance_demo)
