"""Application service: Add Patient use case."""

from __future__ import annotations

from recordkit.domain.exceptions import DuplicateEntityError
from recordkit.domain.model.health import Patient
from recordkit.domain.repository.repository import Repository


class AddPatientHandler:

    def __init__(self, patient_repo: Repository[Patient]) -> None:
        self._patient_repo = patient_repo

    def handle(self, patient_id: int, name: str, age: int, gender: str) -> Patient:
        """Register a new patient. Patient ids must be unique."""
        if self._patient_repo.find(lambda p: p.id == patient_id) is not None:
            raise DuplicateEntityError(f"Patient with ID {patient_id} already exists")

        patient = Patient(id=patient_id, name=name.strip(), age=age, gender=gender.strip())
        self._patient_repo.add(patient)
        return patient
