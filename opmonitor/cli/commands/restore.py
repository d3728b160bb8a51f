"""``opmonitor restore [BACKUP_REF]`` — restore a backup and follow its progress."""

from __future__ import annotations

import typer
from rich.console import Console

from opmonitor.cli.context import build_poller, build_provider
from opmonitor.core.watchers import RestoreWatcher
from opmonitor.display.console import ConsoleSink

console = Console()


def restore_cmd(
    ctx: typer.Context,
    backup_ref: str = typer.Argument(
        None,
        help="Backup name or dump URL to restore from.",
        show_default=False,
    ),
    restore_id: str = typer.Option(
        None,
        "--attach",
        help="Follow an existing restore instead of creating one.",
    ),
) -> None:
    """Restore the database and render per-stage progress until it ends.

    Exits with code 1 if the provider reports an error.
    """
    if not backup_ref and not restore_id:
        raise typer.BadParameter("Give a BACKUP_REF to restore from, or --attach RESTORE_ID.")

    watcher = RestoreWatcher(build_provider(ctx), ConsoleSink(console), build_poller(ctx))
    if restore_id:
        restore = watcher.watch(restore_id)
    else:
        restore = watcher.restore(backup_ref)
    if restore.failed:
        raise typer.Exit(code=1)
