"""Tests for the patient and prescription use cases."""

from datetime import datetime

import pytest

from recordkit.application.add_patient import AddPatientHandler
from recordkit.application.add_prescription import AddPrescriptionHandler
from recordkit.application.remove_patient import RemovePatientHandler
from recordkit.application.sample_data import seed_health
from recordkit.application.search_patients import SearchPatientsHandler
from recordkit.application.show_prescriptions import ShowPrescriptionsHandler
from recordkit.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)
from recordkit.domain.model.health import Patient, Prescription
from recordkit.infrastructure.persistence.in_memory_repository import InMemoryRepository

NOW = datetime(2024, 5, 20, 10, 0)


def _setup():
    patients = InMemoryRepository[Patient]()
    prescriptions = InMemoryRepository[Prescription]()
    seed_health(patients, prescriptions, now=NOW)
    return patients, prescriptions


class TestAddPatient:

    def test_adds_patient(self):
        patients, _ = _setup()
        patient = AddPatientHandler(patients).handle(4, " Mary Major ", 52, "Female")
        assert patient.name == "Mary Major"
        assert patients.count() == 4

    def test_duplicate_id_rejected(self):
        patients, _ = _setup()
        with pytest.raises(DuplicateEntityError, match="ID 1 already exists"):
            AddPatientHandler(patients).handle(1, "Someone", 30, "Male")
        assert patients.count() == 3


class TestAddPrescription:

    def test_requires_known_patient(self):
        patients, prescriptions = _setup()
        with pytest.raises(EntityNotFoundError, match="Patient with ID 9 not found"):
            AddPrescriptionHandler(patients, prescriptions).handle(200, 9, "Aspirin")

    def test_duplicate_id_rejected(self):
        patients, prescriptions = _setup()
        with pytest.raises(DuplicateEntityError):
            AddPrescriptionHandler(patients, prescriptions).handle(101, 1, "Aspirin")

    def test_defaults_issue_date_to_now(self):
        patients, prescriptions = _setup()
        rx = AddPrescriptionHandler(patients, prescriptions).handle(200, 3, "Aspirin")
        assert rx.date_issued.date() == datetime.now().date()


class TestShowPrescriptions:

    def test_map_groups_by_patient_oldest_first(self):
        patients, prescriptions = _setup()
        mapping = ShowPrescriptionsHandler(patients, prescriptions).build_prescription_map()
        assert [p.id for p in mapping[1]] == [101, 102]
        assert [p.id for p in mapping[2]] == [103, 104]
        assert [p.id for p in mapping[3]] == [105]

    def test_every_patient_listed(self):
        patients, prescriptions = _setup()
        AddPatientHandler(patients).handle(4, "Mary Major", 52, "Female")
        dtos = ShowPrescriptionsHandler(patients, prescriptions).handle()
        assert len(dtos) == 4
        assert dtos[3].prescriptions == []
        assert dtos[0].patient.startswith("Patient ID: 1,")

    def test_unknown_patient(self):
        patients, prescriptions = _setup()
        with pytest.raises(EntityNotFoundError):
            ShowPrescriptionsHandler(patients, prescriptions).handle_for(42)


class TestSearchPatients:

    def test_by_name_is_case_insensitive_substring(self):
        patients, _ = _setup()
        results = SearchPatientsHandler(patients).by_name("JOHN")
        assert [p.id for p in results] == [1, 3]

    def test_empty_name_rejected(self):
        patients, _ = _setup()
        with pytest.raises(ValidationError):
            SearchPatientsHandler(patients).by_name("  ")

    def test_by_age_inclusive(self):
        patients, _ = _setup()
        assert [p.id for p in SearchPatientsHandler(patients).by_age(28, 35)] == [1, 2]

    def test_by_gender(self):
        patients, _ = _setup()
        assert [p.id for p in SearchPatientsHandler(patients).by_gender("female")] == [2]


class TestRemovePatient:

    def test_removes_patient_and_prescriptions(self):
        patients, prescriptions = _setup()
        removed = RemovePatientHandler(patients, prescriptions).handle(1)
        assert removed == 2
        assert patients.find(lambda p: p.id == 1) is None
        assert [p.id for p in prescriptions.get_all()] == [103, 104, 105]

    def test_unknown_patient(self):
        patients, prescriptions = _setup()
        with pytest.raises(EntityNotFoundError):
            RemovePatientHandler(patients, prescriptions).handle(42)
        assert prescriptions.count() == 5
