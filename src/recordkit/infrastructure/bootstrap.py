"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from recordkit.domain.model.finance import Transaction
from recordkit.domain.model.health import Patient, Prescription
from recordkit.domain.model.warehouse import ElectronicItem, GroceryItem
from recordkit.infrastructure.persistence.in_memory_inventory_repository import (
    InMemoryInventoryRepository,
)
from recordkit.infrastructure.persistence.in_memory_repository import (
    InMemoryRepository,
)
from recordkit.infrastructure.persistence.json_record_log import JsonInventoryLog

DATA_DIR_ENV = "RECORDKIT_DATA_DIR"
INVENTORY_LOG_FILE = "inventory_data.json"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir(override: Path | None = None) -> Path:
    """The directory holding persisted files.

    An explicit override wins, then the environment, then the default.
    """
    if override is not None:
        return override
    env = os.environ.get(DATA_DIR_ENV)
    return Path(env) if env else _DEFAULT_DATA_DIR


def inventory_log(directory: Path | None = None) -> JsonInventoryLog:
    """A record log loaded with whatever was saved last time."""
    log = JsonInventoryLog(data_dir(directory) / INVENTORY_LOG_FILE)
    log.load_from_file()
    return log


def electronics_repository() -> InMemoryInventoryRepository[ElectronicItem]:
    return InMemoryInventoryRepository()


def grocery_repository() -> InMemoryInventoryRepository[GroceryItem]:
    return InMemoryInventoryRepository()


def patient_repository() -> InMemoryRepository[Patient]:
    return InMemoryRepository()


def prescription_repository() -> InMemoryRepository[Prescription]:
    return InMemoryRepository()


def transaction_repository() -> InMemoryRepository[Transaction]:
    return InMemoryRepository()
