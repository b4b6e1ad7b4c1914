"""Application service: Show Prescriptions use case (query).

Groups prescriptions by patient id, mirroring how clinicians look them
up: per patient, oldest first.
"""

from __future__ import annotations

from collections import defaultdict

from recordkit.application.dto import PatientPrescriptionsDTO
from recordkit.domain.model.health import Patient, Prescription
from recordkit.domain.repository.repository import Repository


class ShowPrescriptionsHandler:

    def __init__(
        self,
        patient_repo: Repository[Patient],
        prescription_repo: Repository[Prescription],
    ) -> None:
        self._patient_repo = patient_repo
        self._prescription_repo = prescription_repo

    def build_prescription_map(self) -> dict[int, list[Prescription]]:
        """Map each patient id to its prescriptions, ordered by issue date."""
        mapping: dict[int, list[Prescription]] = defaultdict(list)
        for prescription in self._prescription_repo.get_all():
            mapping[prescription.patient_id].append(prescription)
        for prescriptions in mapping.values():
            prescriptions.sort(key=lambda p: p.date_issued)
        return dict(mapping)

    def handle(self) -> list[PatientPrescriptionsDTO]:
        """Every patient, sorted by id, with their prescriptions."""
        mapping = self.build_prescription_map()
        return [
            self._to_dto(patient, mapping.get(patient.id, []))
            for patient in sorted(self._patient_repo.get_all(), key=lambda p: p.id)
        ]

    def handle_for(self, patient_id: int) -> PatientPrescriptionsDTO:
        """A single patient. Raises EntityNotFoundError if unknown."""
        patient = self._patient_repo.get_by_id(patient_id)
        return self._to_dto(patient, self.build_prescription_map().get(patient_id, []))

    @staticmethod
    def _to_dto(patient: Patient, prescriptions: list[Prescription]) -> PatientPrescriptionsDTO:
        return PatientPrescriptionsDTO(
            patient=str(patient),
            prescriptions=[str(p) for p in prescriptions],
        )
