"""Patient and Prescription records for the health subsystem.

Both are identified by id alone: two records with the same id compare
equal even if other fields differ.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from recordkit.domain.exceptions import ValidationError

MAX_PATIENT_AGE = 150


@dataclass(frozen=True)
class Patient:
    id: int
    name: str = field(compare=False)
    age: int = field(compare=False)
    gender: str = field(compare=False)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Patient name is required")
        if not self.gender or not self.gender.strip():
            raise ValidationError("Patient gender is required")
        if not 0 <= self.age <= MAX_PATIENT_AGE:
            raise ValidationError(
                f"Patient age must be between 0 and {MAX_PATIENT_AGE}, got {self.age}"
            )

    def __str__(self) -> str:
        return (
            f"Patient ID: {self.id}, Name: {self.name}, "
            f"Age: {self.age}, Gender: {self.gender}"
        )


@dataclass(frozen=True)
class Prescription:
    id: int
    patient_id: int = field(compare=False)
    medication_name: str = field(compare=False)
    date_issued: datetime = field(compare=False)

    def __post_init__(self) -> None:
        if not self.medication_name or not self.medication_name.strip():
            raise ValidationError("Medication name is required")

    def __str__(self) -> str:
        return (
            f"Prescription ID: {self.id}, Patient ID: {self.patient_id}, "
            f"Medication: {self.medication_name}, "
            f"Date Issued: {self.date_issued:%Y-%m-%d}"
        )
