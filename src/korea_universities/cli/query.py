"""Query commands over a merged snapshot."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from korea_universities.catalog import UniversityCatalog, load_catalog
from korea_universities.entities import SearchOptions

from .common import CLIError, CLIState, abort, console, get_state, render_panel, resolve_path


def _open_catalog(state: CLIState, records: Optional[Path], metadata: Optional[Path]) -> UniversityCatalog:
    try:
        records_path = resolve_path(records or state.settings.records_file)
        metadata_path = resolve_path(metadata or state.settings.metadata_file)
    except CLIError as exc:
        abort(CLIError(str(exc), exit_code=1))
    return load_catalog(records_path, metadata_path)


def _flags(degree: bool, excellent: bool, language: bool) -> str:
    labels = []
    if degree:
        labels.append("degree")
    if language:
        labels.append("language")
    if excellent:
        labels.append("excellent")
    return ", ".join(labels) or "-"


def search_command(
    ctx: typer.Context,
    query: str = typer.Argument("", help="Name fragment; spaces and case are ignored."),
    region: Optional[str] = typer.Option(None, "--region", "-r", help="Exact region, e.g. 서울특별시."),
    level: Optional[str] = typer.Option(None, "--level", "-l", help="School level, e.g. 전문대학."),
    establishment: Optional[str] = typer.Option(None, "--establishment", help="국립, 공립, 사립 or 기타."),
    accredited: bool = typer.Option(False, "--accredited", help="Only institutions with any certification."),
    excellent: bool = typer.Option(False, "--excellent", help="Only excellent-certified institutions."),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Maximum rows to show."),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table."),
    records: Optional[Path] = typer.Option(None, "--records", help="Snapshot to query.", show_default=False),
    metadata: Optional[Path] = typer.Option(None, "--metadata", help="Summary next to the snapshot.", show_default=False),
) -> None:
    """Search universities by name with optional filters."""

    state = get_state(ctx)
    catalog = _open_catalog(state, records, metadata)
    options = SearchOptions(
        region=region,
        level=level,
        establishment=establishment,
        is_accredited=accredited,
        only_excellent=excellent,
    )
    results = catalog.search(query, options)
    shown = results[:limit] if limit else results

    if as_json:
        typer.echo(json.dumps([record.to_json_dict() for record in shown], ensure_ascii=False, indent=2))
        return

    table = Table(title=f"{len(results)} universities", box=None)
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Campus")
    table.add_column("Level")
    table.add_column("Region")
    table.add_column("Accreditation")
    for record in shown:
        status = record.accreditation
        table.add_row(
            str(record.id),
            record.name_kr,
            record.campus or "-",
            record.level,
            record.region,
            _flags(status.degree, status.excellent, status.language),
        )
    console.print(table)


def metadata_command(
    ctx: typer.Context,
    records: Optional[Path] = typer.Option(None, "--records", help="Snapshot to inspect.", show_default=False),
    metadata: Optional[Path] = typer.Option(None, "--metadata", help="Summary to print.", show_default=False),
) -> None:
    """Print the summary of the most recent build."""

    state = get_state(ctx)
    catalog = _open_catalog(state, records, metadata)
    render_panel("Library Metadata", catalog.metadata.to_json_dict())


__all__ = ["search_command", "metadata_command"]
