"""Plain-text rendering of the student grade report."""

from __future__ import annotations

import logging
from pathlib import Path

from recordkit.application.dto import GradeReportDTO
from recordkit.domain.exceptions import StorageError

logger = logging.getLogger(__name__)

_WIDTH = 80


def render_report(report: GradeReportDTO) -> str:
    lines = [
        "=" * _WIDTH,
        "STUDENT GRADE REPORT".center(_WIDTH).rstrip(),
        "=" * _WIDTH,
        f"Generated on: {report.generated_at}",
        f"Total Students: {report.total_students}",
        "",
        "INDIVIDUAL RESULTS:",
        "-" * _WIDTH,
        *report.results,
        "",
        "GRADE DISTRIBUTION:",
        "-" * _WIDTH,
    ]
    for band in report.distribution:
        lines.append(
            f"Grade {band.grade}: {band.count:>3} students ({band.percentage:>5.1f}%)"
        )

    lines += ["", "CLASS STATISTICS:", "-" * _WIDTH]
    stats = report.statistics
    if stats is not None:
        lines += [
            f"Class Average: {stats.average:.2f}",
            f"Highest Score: {stats.highest} ({stats.top_student})",
            f"Lowest Score: {stats.lowest}",
            f"Pass Rate (>=50): {stats.pass_rate:.1f}%",
        ]

    lines += [
        "",
        "=" * _WIDTH,
        "END OF REPORT".center(_WIDTH).rstrip(),
        "=" * _WIDTH,
    ]
    return "\n".join(lines) + "\n"


def write_report(report: GradeReportDTO, path: Path) -> None:
    """Write the rendered report, replacing any existing file.

    Raises StorageError if the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_report(report), encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Unable to write report to '{path}': {exc}") from exc
    logger.info("Report written to %s", path)
