"""CLI commands for student grade processing."""

from __future__ import annotations

from pathlib import Path

import click

from recordkit.application.process_grades import ProcessGradesHandler
from recordkit.application.sample_data import SAMPLE_STUDENT_LINES
from recordkit.domain.exceptions import DomainException
from recordkit.infrastructure.persistence.grade_report_writer import write_report
from recordkit.infrastructure.persistence.student_file_reader import read_students


@click.command("process")
@click.argument("input_file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("output_file", type=click.Path(dir_okay=False, path_type=Path))
def grades_process(input_file: Path, output_file: Path) -> None:
    """Read INPUT_FILE (id, name, score per line) and write a report to OUTPUT_FILE."""
    handler = ProcessGradesHandler(read_students=read_students, write_report=write_report)

    try:
        report = handler.handle(input_file, output_file)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Processed {report.total_students} students")
    click.echo(f"Report written to: {output_file}")


@click.command("sample")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
def grades_sample(path: Path) -> None:
    """Write a sample student file to PATH."""
    try:
        path.write_text("\n".join(SAMPLE_STUDENT_LINES) + "\n", encoding="utf-8")
    except OSError as exc:
        raise click.ClickException(f"Unable to write '{path}': {exc}")
    click.echo(f"Sample input written to: {path}")
