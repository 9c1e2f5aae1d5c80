"""Primary Typer application wiring the catalog CLI."""

from __future__ import annotations

from typing import List, Optional

import typer
from rich.table import Table

from . import build, query
from .common import configure_state, console, parse_override

app = typer.Typer(
    add_completion=False,
    help="""
    Build the merged Korean university snapshot and query it from the
    command line.
    """.strip(),
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    environment: Optional[str] = typer.Option(
        None,
        "--environment",
        "-e",
        help="Active configuration environment (development, testing, production).",
        show_default=False,
    ),
    override: List[str] = typer.Option(  # noqa: B008 - Typer callback signature
        [],
        "--override",
        "-o",
        metavar="KEY=VALUE",
        help="Configuration override in dotted.key=value notation (repeatable).",
    ),
    run_id: Optional[str] = typer.Option(
        None,
        "--run-id",
        help="Explicit run identifier; defaults to a generated value.",
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Emit debug logging and print the resolved CLI context.",
    ),
) -> None:
    """Configure shared CLI state prior to executing subcommands."""

    overrides = [parse_override(item) for item in override]
    configure_state(
        ctx,
        environment=environment,
        overrides=overrides,
        run_id=run_id,
        verbose=verbose,
    )

    if verbose:
        state = ctx.obj
        table = Table(title="CLI Context", show_header=False, box=None)
        table.add_row("Environment", state.environment)
        table.add_row("Run ID", state.run_id)
        table.add_row("Policy version", state.settings.policy_version)
        table.add_row("Data dir", str(state.settings.paths.data_dir))
        table.add_row("Output dir", str(state.settings.paths.output_dir))
        console.print(table)


app.command("build")(build.build_command)
app.command("search")(query.search_command)
app.command("metadata")(query.metadata_command)
