"""Student record and letter-grade bands."""

from __future__ import annotations

from dataclasses import dataclass

GRADE_BANDS = ("A", "B", "C", "D", "F")
PASS_MARK = 50


@dataclass(frozen=True)
class Student:
    id: int
    full_name: str
    score: int

    @property
    def grade(self) -> str:
        """Letter grade for the score.

        Scores above 100 fall outside every band and grade as "Invalid";
        negative scores are simply an F.
        """
        if self.score > 100:
            return "Invalid"
        if self.score >= 80:
            return "A"
        if self.score >= 70:
            return "B"
        if self.score >= 60:
            return "C"
        if self.score >= PASS_MARK:
            return "D"
        return "F"

    @property
    def passed(self) -> bool:
        return self.score >= PASS_MARK

    def __str__(self) -> str:
        return (
            f"{self.full_name} (ID: {self.id}): "
            f"Score = {self.score}, Grade = {self.grade}"
        )
