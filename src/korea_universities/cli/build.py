"""Build command merging the scraped sources into the published snapshot."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from korea_universities.pipeline.merge import MissingSourceError, build_dataset
from korea_universities.utils.logging import logging_context

from .common import CLIError, abort, console, get_state


def build_command(
    ctx: typer.Context,
    universities: Optional[Path] = typer.Option(
        None,
        "--universities",
        "-u",
        help="Scraped institution directory (defaults to <data_dir>/universities.json).",
        show_default=False,
    ),
    accreditation: Optional[Path] = typer.Option(
        None,
        "--accreditation",
        "-a",
        help="Scraped accreditation listing (defaults to <data_dir>/accredited.json).",
        show_default=False,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        help="Destination for the merged snapshot.",
        show_default=False,
    ),
    metadata: Optional[Path] = typer.Option(
        None,
        "--metadata",
        help="Destination for the build summary.",
        show_default=False,
    ),
) -> None:
    """Merge the directory with accreditation listings and write the snapshot."""

    state = get_state(ctx)
    try:
        with logging_context(run_id=state.run_id):
            outcome = build_dataset(
                universities_path=universities,
                accreditation_path=accreditation,
                output_path=output,
                metadata_path=metadata,
                settings=state.settings,
            )
    except MissingSourceError as exc:
        abort(CLIError(str(exc), exit_code=1))

    stats = outcome.metadata.stats
    table = Table(title="Build Summary", box=None)
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Total", str(stats.total))
    table.add_row("4-year", str(stats.university))
    table.add_row("College", str(stats.college))
    table.add_row("Graduate", str(stats.graduate))
    table.add_row("Accredited", str(stats.accredited))
    table.add_row("Synthesized", str(outcome.result.run_stats.get("synthesized", 0)))
    console.print(table)
    console.print(f"[green]Snapshot written:[/green] {outcome.records_path}")
    console.print(f"[green]Metadata written:[/green] {outcome.metadata_path}")


__all__ = ["build_command"]
