"""Application service: Remove Patient use case.

Removing a patient also removes every prescription issued to them.
"""

from __future__ import annotations

from recordkit.domain.model.health import Patient, Prescription
from recordkit.domain.repository.repository import Repository


class RemovePatientHandler:

    def __init__(
        self,
        patient_repo: Repository[Patient],
        prescription_repo: Repository[Prescription],
    ) -> None:
        self._patient_repo = patient_repo
        self._prescription_repo = prescription_repo

    def handle(self, patient_id: int) -> int:
        """Remove a patient and return how many prescriptions went with it.

        Raises EntityNotFoundError if the patient is unknown.
        """
        self._patient_repo.get_by_id(patient_id)
        self._patient_repo.remove(lambda p: p.id == patient_id)

        removed = 0
        while self._prescription_repo.remove(lambda p: p.patient_id == patient_id):
            removed += 1
        return removed
