"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StockLineDTO:
    """Output: one warehouse item as displayed to the user."""

    id: int
    name: str
    quantity: int
    description: str


@dataclass(frozen=True)
class InventoryRecordDTO:
    id: int
    name: str
    quantity: int
    date_added: str  # formatted, e.g. "2024-05-01 09:30:00"


@dataclass(frozen=True)
class PatientPrescriptionsDTO:
    """Output: a patient together with every prescription issued to them."""

    patient: str
    prescriptions: list[str]


@dataclass(frozen=True)
class GradeBandDTO:
    grade: str
    count: int
    percentage: float


@dataclass(frozen=True)
class ClassStatisticsDTO:
    average: float
    highest: int
    top_student: str
    lowest: int
    pass_rate: float


@dataclass(frozen=True)
class GradeReportDTO:
    """Output: everything the grade report shows.

    ``statistics`` is None when there are no students to summarize.
    """

    generated_at: str
    total_students: int
    results: list[str]
    distribution: list[GradeBandDTO]
    statistics: ClassStatisticsDTO | None


@dataclass(frozen=True)
class CategoryTotalDTO:
    category: str
    count: int
    total: str  # formatted, e.g. "$15.00"


@dataclass(frozen=True)
class LedgerSummaryDTO:
    transaction_count: int
    categories: list[CategoryTotalDTO]
    total: str
