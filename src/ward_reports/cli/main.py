"""CLI for ward-reports: render / validate commands."""

from __future__ import annotations

import asyncio
import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ward_reports.assembly import AssemblyResult, DocumentAssembler, ReportOptions
from ward_reports.core.config import AppSettings
from ward_reports.exceptions import FatalAssemblyError
from ward_reports.layout.styles import DEFAULT_REPORT_TITLE
from ward_reports.logging_config import setup_logging
from ward_reports.models import ReportRecord
from ward_reports.repositories import FileNotesRepository, create_notes_repository
from ward_reports.validation import validate_records

app = typer.Typer(name="ward-reports", help="Paginated clinical PDF reports")
console = Console()


def _load_records(records_path: Path) -> list[ReportRecord]:
    """Load records from a JSON file."""
    raw = json.loads(records_path.read_text(encoding="utf-8"))
    if isinstance(raw, list):
        return [ReportRecord.model_validate(item) for item in raw]
    raise typer.BadParameter(f"Expected JSON array in {records_path}")


def _configure_logging(settings: AppSettings, verbose: bool) -> None:
    observability = settings.observability
    if verbose:
        observability = observability.model_copy(update={"log_level": "DEBUG"})
    setup_logging(observability)


def _print_failures(result: AssemblyResult) -> None:
    table = Table(title="Report Failures")
    table.add_column("Record", style="cyan")
    table.add_column("Kind", style="yellow")
    table.add_column("Message", max_width=80)
    for failure in result.failures:
        table.add_row(failure.label, failure.kind.value, failure.message)
    console.print(table)


@app.command()
def render(
    records_file: Path = typer.Argument(..., help="JSON file with report records"),
    notes_dir: Optional[Path] = typer.Option(None, "--notes-dir", help="Directory of <record_id>.json notes files"),
    output_dir: Path = typer.Option(Path("."), "--output-dir", help="Where to write the PDF"),
    specialty: Optional[str] = typer.Option(None, "--specialty", help="Specialty shown as report scope"),
    start_date: Optional[datetime] = typer.Option(None, "--start-date", formats=["%Y-%m-%d"]),
    end_date: Optional[datetime] = typer.Option(None, "--end-date", formats=["%Y-%m-%d"]),
    title: str = typer.Option(DEFAULT_REPORT_TITLE, "--title"),
    overview: bool = typer.Option(False, "--overview", help="Add the long-stay overview table"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render a long-stay report PDF."""
    settings = AppSettings()
    _configure_logging(settings, verbose)

    if (start_date is None) != (end_date is None):
        raise typer.BadParameter("--start-date and --end-date must be given together")
    date_range = (start_date, end_date) if start_date and end_date else None

    pdf_config = settings.pdf
    if overview:
        pdf_config = pdf_config.model_copy(update={"include_overview": True})

    repository = FileNotesRepository(notes_dir) if notes_dir else create_notes_repository(settings.notes)

    console.print(f"[bold]Loading records from {records_file}[/bold]")
    records = _load_records(records_file)
    console.print(f"Loaded {len(records)} records")

    options = ReportOptions(title=title, specialty=specialty, date_range=date_range)
    assembler = DocumentAssembler(pdf_config)

    async def _run() -> AssemblyResult:
        return await assembler.assemble(records, repository, options)

    try:
        result = asyncio.run(_run())
    except FatalAssemblyError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    output_dir.mkdir(parents=True, exist_ok=True)
    output = output_dir / result.filename
    output.write_bytes(result.content)
    console.print(f"[green]Report saved to {output}[/green]")
    console.print(
        f"\n[bold]Rendered {len(result.rendered_record_ids)}/{len(records)} records "
        f"on {result.page_count} pages[/bold]"
    )

    if result.has_failures:
        _print_failures(result)


@app.command()
def validate(
    records_file: Path = typer.Argument(..., help="JSON file with report records"),
) -> None:
    """Check which records are complete enough to appear in a report."""
    records = _load_records(records_file)
    batch = validate_records(records)

    table = Table(title="Record Validation")
    table.add_column("Record", style="cyan")
    table.add_column("Status")
    table.add_column("Missing fields")
    for record in batch.valid:
        table.add_row(record.label, "[green]valid[/green]", "")
    for rejected in batch.rejected:
        table.add_row(rejected.record.label, "[red]invalid[/red]", ", ".join(rejected.missing_fields))
    console.print(table)

    console.print(f"\n[bold]{len(batch.valid)}/{len(records)} records valid[/bold]")
    if not batch.valid:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
