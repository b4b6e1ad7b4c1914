"""Application service: Add Prescription use case.

A prescription can only be issued to a patient that is already
registered.
"""

from __future__ import annotations

from datetime import datetime

from recordkit.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from recordkit.domain.model.health import Patient, Prescription
from recordkit.domain.repository.repository import Repository


class AddPrescriptionHandler:

    def __init__(
        self,
        patient_repo: Repository[Patient],
        prescription_repo: Repository[Prescription],
    ) -> None:
        self._patient_repo = patient_repo
        self._prescription_repo = prescription_repo

    def handle(
        self,
        prescription_id: int,
        patient_id: int,
        medication_name: str,
        date_issued: datetime | None = None,
    ) -> Prescription:
        if self._prescription_repo.find(lambda p: p.id == prescription_id) is not None:
            raise DuplicateEntityError(
                f"Prescription with ID {prescription_id} already exists"
            )
        if self._patient_repo.find(lambda p: p.id == patient_id) is None:
            raise EntityNotFoundError(
                f"Patient with ID {patient_id} not found. Please add the patient first."
            )

        prescription = Prescription(
            id=prescription_id,
            patient_id=patient_id,
            medication_name=medication_name.strip(),
            date_issued=date_issued or datetime.now(),
        )
        self._prescription_repo.add(prescription)
        return prescription
