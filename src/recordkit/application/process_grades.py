"""Application service: Process Grades use case.

Reads a student results file, summarizes it and hands the summary to a
report writer. The reader and writer are injected so the use case never
touches the filesystem itself.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from recordkit.application.dto import ClassStatisticsDTO, GradeBandDTO, GradeReportDTO
from recordkit.domain.exceptions import ValidationError
from recordkit.domain.model.student import GRADE_BANDS, Student

StudentReader = Callable[[Path], list[Student]]
ReportWriter = Callable[[GradeReportDTO, Path], None]


def build_report(students: list[Student], generated_at: datetime | None = None) -> GradeReportDTO:
    """Summarize a class: per-student results, grade distribution, statistics."""
    total = len(students)
    grades = Counter(s.grade for s in students)

    distribution = [
        GradeBandDTO(
            grade=grade,
            count=grades[grade],
            percentage=(grades[grade] * 100.0 / total) if total else 0.0,
        )
        for grade in GRADE_BANDS
    ]

    statistics = None
    if students:
        highest = max(s.score for s in students)
        top_student = next(s for s in students if s.score == highest)
        statistics = ClassStatisticsDTO(
            average=sum(s.score for s in students) / total,
            highest=highest,
            top_student=top_student.full_name,
            lowest=min(s.score for s in students),
            pass_rate=sum(1 for s in students if s.passed) * 100.0 / total,
        )

    return GradeReportDTO(
        generated_at=(generated_at or datetime.now()).strftime("%Y-%m-%d %H:%M:%S"),
        total_students=total,
        results=[str(s) for s in sorted(students, key=lambda s: s.id)],
        distribution=distribution,
        statistics=statistics,
    )


class ProcessGradesHandler:

    def __init__(self, read_students: StudentReader, write_report: ReportWriter) -> None:
        self._read_students = read_students
        self._write_report = write_report

    def handle(self, input_path: Path, output_path: Path) -> GradeReportDTO:
        """Read, summarize and write.

        Raises ValidationError when the file holds no student records;
        format and storage errors from the reader propagate unchanged.
        """
        students = self._read_students(input_path)
        if not students:
            raise ValidationError(f"No valid student records found in '{input_path}'")

        report = build_report(students)
        self._write_report(report, output_path)
        return report
