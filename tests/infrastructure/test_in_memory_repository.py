"""Unit tests for the predicate-based in-memory store."""

from datetime import datetime

import pytest

from recordkit.domain.exceptions import EntityNotFoundError, ValidationError
from recordkit.domain.model.health import Patient, Prescription
from recordkit.infrastructure.persistence.in_memory_repository import InMemoryRepository


def _patients() -> InMemoryRepository[Patient]:
    return InMemoryRepository([
        Patient(1, "John Doe", 35, "Male"),
        Patient(2, "Jane Smith", 28, "Female"),
        Patient(3, "Robert Johnson", 45, "Male"),
    ])


class TestFind:

    def test_first_match_wins(self):
        found = _patients().find(lambda p: p.gender == "Male")
        assert found.id == 1

    def test_no_match_is_none(self):
        assert _patients().find(lambda p: p.age > 100) is None

    def test_filter_keeps_order(self):
        assert [p.id for p in _patients().filter(lambda p: "o" in p.name)] == [1, 3]

    def test_get_by_id(self):
        assert _patients().get_by_id(2).name == "Jane Smith"

    def test_get_by_unknown_id(self):
        with pytest.raises(EntityNotFoundError, match="No record with ID 42"):
            _patients().get_by_id(42)


class TestAddAndRemove:

    def test_none_rejected(self):
        with pytest.raises(ValidationError):
            _patients().add(None)

    def test_add_does_not_check_uniqueness(self):
        repo = _patients()
        repo.add(Patient(1, "Another John", 40, "Male"))
        assert repo.count() == 4

    def test_remove_first_match_only(self):
        repo = _patients()
        assert repo.remove(lambda p: p.gender == "Male") is True
        assert [p.id for p in repo.get_all()] == [2, 3]

    def test_remove_without_match(self):
        repo = _patients()
        assert repo.remove(lambda p: p.id == 99) is False
        assert len(repo) == 3

    def test_get_all_is_a_snapshot(self):
        repo = InMemoryRepository[Prescription]()
        repo.add(Prescription(101, 1, "Amoxicillin 500mg", datetime(2024, 5, 1)))
        snapshot = repo.get_all()
        snapshot.append(Prescription(102, 1, "Ibuprofen 200mg", datetime(2024, 5, 2)))
        assert repo.count() == 1
