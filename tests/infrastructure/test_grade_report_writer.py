"""Tests for the plain-text grade report."""

from datetime import datetime

import pytest

from recordkit.application.process_grades import build_report
from recordkit.domain.exceptions import StorageError
from recordkit.domain.model.student import Student
from recordkit.infrastructure.persistence.grade_report_writer import (
    render_report,
    write_report,
)


def _report():
    return build_report(
        [Student(2, "Bob", 92), Student(1, "Alice", 45)],
        generated_at=datetime(2024, 5, 1, 12, 0, 0),
    )


class TestRenderReport:

    def test_sections(self):
        text = render_report(_report())
        assert "Generated on: 2024-05-01 12:00:00" in text
        assert "Total Students: 2" in text
        assert "Grade A:   1 students ( 50.0%)" in text
        assert "Grade C:   0 students (  0.0%)" in text
        assert "Class Average: 68.50" in text
        assert "Highest Score: 92 (Bob)" in text
        assert "Lowest Score: 45" in text
        assert "Pass Rate (>=50): 50.0%" in text
        assert text.rstrip().endswith("=" * 80)

    def test_results_sorted_by_id(self):
        text = render_report(_report())
        assert text.index("Alice (ID: 1)") < text.index("Bob (ID: 2)")

    def test_no_statistics_for_empty_class(self):
        text = render_report(build_report([]))
        assert "Class Average" not in text
        assert "CLASS STATISTICS:" in text


class TestWriteReport:

    def test_writes_file(self, tmp_path):
        path = tmp_path / "reports" / "grades.txt"
        write_report(_report(), path)
        assert "STUDENT GRADE REPORT" in path.read_text(encoding="utf-8")

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(StorageError, match="Unable to write report"):
            write_report(_report(), tmp_path)
