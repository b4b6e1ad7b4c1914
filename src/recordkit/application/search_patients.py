"""Application service: Search Patients use case (query)."""

from __future__ import annotations

from collections.abc import Callable

from recordkit.domain.exceptions import ValidationError
from recordkit.domain.model.health import Patient
from recordkit.domain.repository.repository import Repository


class SearchPatientsHandler:

    def __init__(self, patient_repo: Repository[Patient]) -> None:
        self._patient_repo = patient_repo

    def by_name(self, text: str) -> list[Patient]:
        """Case-insensitive substring match on the patient name."""
        needle = text.strip().lower()
        if not needle:
            raise ValidationError("Search text cannot be empty")
        return self._sorted(lambda p: needle in p.name.lower())

    def by_age(self, min_age: int, max_age: int) -> list[Patient]:
        if min_age > max_age:
            raise ValidationError(
                f"Minimum age {min_age} is greater than maximum age {max_age}"
            )
        return self._sorted(lambda p: min_age <= p.age <= max_age)

    def by_gender(self, gender: str) -> list[Patient]:
        wanted = gender.strip().lower()
        return self._sorted(lambda p: p.gender.lower() == wanted)

    def _sorted(self, predicate: Callable[[Patient], bool]) -> list[Patient]:
        return sorted(self._patient_repo.filter(predicate), key=lambda p: p.id)
