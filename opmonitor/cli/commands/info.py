"""``opmonitor info`` — show database status."""

from __future__ import annotations

import typer
from rich.console import Console

from opmonitor.cli.context import build_provider, cli_state
from opmonitor.core.watchers import describe_database

console = Console()


def info_cmd(ctx: typer.Context) -> None:
    """Show state, data size, version and creation time of the database."""
    database = build_provider(ctx).get_database()

    console.out(f"=== {cli_state(ctx).app_name} database", highlight=False)
    for label, value in describe_database(database):
        console.out(f"{label + ':':<12} {value}", highlight=False)
