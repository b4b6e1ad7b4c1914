"""Sample records used to seed the demo subsystems."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from recordkit.application.add_patient import AddPatientHandler
from recordkit.application.add_prescription import AddPrescriptionHandler
from recordkit.domain.model.health import Patient, Prescription
from recordkit.domain.model.inventory import InventoryItem
from recordkit.domain.model.warehouse import ElectronicItem, GroceryItem
from recordkit.domain.repository.inventory_repository import InventoryRepository
from recordkit.domain.repository.record_log import RecordLog
from recordkit.domain.repository.repository import Repository

SAMPLE_STUDENT_LINES = (
    "1001, Alice Johnson, 85",
    "1002, Bob Smith, 92",
    "1003, Charlie Brown, 78",
    "1004, Diana Prince, 67",
    "1005, Edward Norton, 45",
    "1006, Fiona Green, 88",
    "1007, George Wilson, 73",
    "1008, Hannah Davis, 56",
)

SAMPLE_TRANSACTIONS = (
    (1, "150.00", "Groceries"),
    (2, "75.50", "Utilities"),
    (3, "200.00", "Entertainment"),
    (4, "42.25", "Groceries"),
)


def seed_warehouse(
    electronics: InventoryRepository[ElectronicItem],
    groceries: InventoryRepository[GroceryItem],
    today: date | None = None,
) -> None:
    today = today or date.today()
    electronics.add(ElectronicItem(1, "Laptop", 5, "Dell", 24))
    electronics.add(ElectronicItem(2, "Mouse", 15, "Logitech", 12))
    electronics.add(ElectronicItem(3, "Keyboard", 10, "Corsair", 18))
    groceries.add(GroceryItem(1, "Milk", 20, today + timedelta(days=7)))
    groceries.add(GroceryItem(2, "Bread", 25, today + timedelta(days=3)))
    groceries.add(GroceryItem(3, "Apples", 30, today + timedelta(days=10)))


def seed_health(
    patients: Repository[Patient],
    prescriptions: Repository[Prescription],
    now: datetime | None = None,
) -> None:
    now = now or datetime.now()
    add_patient = AddPatientHandler(patients)
    add_prescription = AddPrescriptionHandler(patients, prescriptions)

    add_patient.handle(1, "John Doe", 35, "Male")
    add_patient.handle(2, "Jane Smith", 28, "Female")
    add_patient.handle(3, "Robert Johnson", 45, "Male")

    for rx_id, patient_id, medication, days_ago in (
        (101, 1, "Amoxicillin 500mg", 5),
        (102, 1, "Ibuprofen 200mg", 3),
        (103, 2, "Metformin 1000mg", 7),
        (104, 2, "Lisinopril 10mg", 2),
        (105, 3, "Atorvastatin 20mg", 10),
    ):
        add_prescription.handle(
            rx_id, patient_id, medication, date_issued=now - timedelta(days=days_ago)
        )


def seed_inventory_log(log: RecordLog[InventoryItem], now: datetime | None = None) -> None:
    now = now or datetime.now()
    for item_id, name, quantity in (
        (1, "Laptop", 10),
        (2, "Mouse", 20),
        (3, "Keyboard", 15),
        (4, "Monitor", 8),
        (5, "Headphones", 25),
    ):
        log.append(InventoryItem(item_id, name, quantity, now))
