"""``opmonitor backup-url`` — print the download URL of a legacy backup."""

from __future__ import annotations

import typer
from rich.console import Console

from opmonitor.cli.context import build_provider
from opmonitor.core.formatting import backup_url_lines

console = Console()


def backup_url_cmd(
    ctx: typer.Context,
    name: str = typer.Argument(
        None, help="Backup name. Defaults to the most recent backup.", show_default=False
    ),
) -> None:
    """Print the dump URL of backup NAME, or of the most recent backup.

    Exits with code 1 when the backup has no URL (still running or failed).
    """
    backup = build_provider(ctx).get_backup(name)
    for line in backup_url_lines(backup):
        console.out(line, highlight=False)
    if backup.finished_at is None:
        raise typer.Exit(code=1)
