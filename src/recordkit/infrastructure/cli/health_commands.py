"""CLI commands for patients and prescriptions."""

from __future__ import annotations

import click

from recordkit.application.dto import PatientPrescriptionsDTO
from recordkit.application.remove_patient import RemovePatientHandler
from recordkit.application.sample_data import seed_health
from recordkit.application.search_patients import SearchPatientsHandler
from recordkit.application.show_prescriptions import ShowPrescriptionsHandler
from recordkit.domain.exceptions import DomainException
from recordkit.infrastructure.bootstrap import (
    patient_repository,
    prescription_repository,
)


def _seeded():
    patients = patient_repository()
    prescriptions = prescription_repository()
    seed_health(patients, prescriptions)
    return patients, prescriptions


def _display(dto: PatientPrescriptionsDTO) -> None:
    click.echo(dto.patient)
    if not dto.prescriptions:
        click.echo("  (no prescriptions)")
    for line in dto.prescriptions:
        click.echo(f"  {line}")


@click.command("demo")
def health_demo() -> None:
    """Show the sample patients with their prescriptions."""
    patients, prescriptions = _seeded()
    click.echo(
        f"System initialized with {patients.count()} patients "
        f"and {prescriptions.count()} prescriptions."
    )
    click.echo()
    for dto in ShowPrescriptionsHandler(patients, prescriptions).handle():
        _display(dto)


@click.command("prescriptions")
@click.option("--patient", "patient_id", required=True, type=int, help="Patient ID.")
def health_prescriptions(patient_id: int) -> None:
    """Show the prescriptions issued to one patient."""
    patients, prescriptions = _seeded()
    try:
        dto = ShowPrescriptionsHandler(patients, prescriptions).handle_for(patient_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display(dto)


@click.command("search")
@click.option("--name", default=None, help="Part of the patient name.")
@click.option("--min-age", type=int, default=None, help="Minimum age (with --max-age).")
@click.option("--max-age", type=int, default=None, help="Maximum age (with --min-age).")
@click.option("--gender", default=None, help="Exact gender, case-insensitive.")
def health_search(
    name: str | None,
    min_age: int | None,
    max_age: int | None,
    gender: str | None,
) -> None:
    """Search the sample patients."""
    patients, _ = _seeded()
    handler = SearchPatientsHandler(patient_repo=patients)

    try:
        if name is not None:
            results = handler.by_name(name)
        elif min_age is not None and max_age is not None:
            results = handler.by_age(min_age, max_age)
        elif gender is not None:
            results = handler.by_gender(gender)
        else:
            raise click.UsageError("Give --name, --gender, or both --min-age and --max-age")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not results:
        click.echo("No patients found matching the search criteria.")
        return

    click.echo(f"Search Results ({len(results)} patient(s) found):")
    for patient in results:
        click.echo(f"  {patient}")


@click.command("remove")
@click.option("--patient", "patient_id", required=True, type=int, help="Patient ID.")
def health_remove(patient_id: int) -> None:
    """Remove a sample patient along with their prescriptions."""
    patients, prescriptions = _seeded()
    try:
        removed = RemovePatientHandler(patients, prescriptions).handle(patient_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Patient #{patient_id} removed with {removed} prescription(s).")
    click.echo(
        f"Remaining: {patients.count()} patients and {prescriptions.count()} prescriptions."
    )
