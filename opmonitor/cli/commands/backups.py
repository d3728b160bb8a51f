"""``opmonitor backups`` — list legacy backups, newest first."""

from __future__ import annotations

import typer
from rich.console import Console

from opmonitor.cli.context import build_provider, cli_state
from opmonitor.core.formatting import backup_state_label

console = Console()


def backups_cmd(ctx: typer.Context) -> None:
    """List legacy backups with their size or current stage."""
    backups = build_provider(ctx).get_backups()
    if not backups:
        console.out(f"App {cli_state(ctx).app_name} has no database backups", highlight=False)
        return

    name_width = max(len(b.name) for b in backups)
    for backup in sorted(backups, key=lambda b: b.started_at, reverse=True):
        console.out(f"{backup.name:<{name_width}}  {backup_state_label(backup)}", highlight=False)
