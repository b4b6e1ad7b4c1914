"""Reader for the flat student results format.

One student per line, ``id, full name, score``. Blank lines are skipped.
The first bad line aborts the whole read; there is no partial result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from recordkit.domain.exceptions import (
    InvalidFormatError,
    MissingFieldError,
    StorageError,
)
from recordkit.domain.model.student import Student

logger = logging.getLogger(__name__)

FIELD_NAMES = ("Student ID", "Full Name", "Score")


def parse_students(lines: Iterable[str]) -> list[Student]:
    """Parse student lines into validated records.

    Scores outside 0-100 are logged as warnings but still accepted.
    """
    students: list[Student] = []

    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue

        fields = [f.strip() for f in line.split(",")]
        if len(fields) != len(FIELD_NAMES):
            raise MissingFieldError(
                f"Line {line_number}: Expected {len(FIELD_NAMES)} fields "
                f"(ID, FullName, Score), but found {len(fields)}. "
                f"Line content: '{line}'",
                line_number=line_number,
                line=line,
            )

        for name, value in zip(FIELD_NAMES, fields):
            if not value:
                raise MissingFieldError(
                    f"Line {line_number}: {name} is empty or missing. "
                    f"Line content: '{line}'",
                    line_number=line_number,
                    line=line,
                    field=name,
                )

        student_id = _parse_int(fields[0], FIELD_NAMES[0], line_number, line)
        score = _parse_int(fields[2], FIELD_NAMES[2], line_number, line)

        if not 0 <= score <= 100:
            logger.warning(
                "Line %d: Score %d is outside typical range (0-100). Student: %s",
                line_number, score, fields[1],
            )

        student = Student(id=student_id, full_name=fields[1], score=score)
        students.append(student)
        logger.debug("Processed %s (ID: %d)", student.full_name, student.id)

    return students


def read_students(path: Path) -> list[Student]:
    """Read and parse a student file.

    I/O failures are raised as StorageError; format errors propagate
    unchanged.
    """
    try:
        with path.open("r", encoding="utf-8") as fh:
            students = parse_students(fh)
    except FileNotFoundError as exc:
        raise StorageError(f"Input file '{path}' was not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageError(f"Unable to read '{path}': {exc}") from exc

    logger.info("Read %d students from %s", len(students), path)
    return students


def _parse_int(value: str, field: str, line_number: int, line: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise InvalidFormatError(
            f"Line {line_number}: {field} '{value}' is not a valid integer. "
            f"Line content: '{line}'",
            line_number=line_number,
            line=line,
            field=field,
        ) from None
