"""Main Typer application — registers all CLI commands.

Entry point: ``opmonitor`` (configured via pyproject.toml console_scripts).

Commands: wait, restore, info, backups, backup-url, demo.
"""

from __future__ import annotations

from pathlib import Path

import typer

from opmonitor.cli.commands.backup_url import backup_url_cmd
from opmonitor.cli.commands.backups import backups_cmd
from opmonitor.cli.commands.demo import demo_cmd
from opmonitor.cli.commands.info import info_cmd
from opmonitor.cli.commands.restore import restore_cmd
from opmonitor.cli.commands.wait import wait_cmd
from opmonitor.cli.context import CliState
from opmonitor.config import settings
from opmonitor.log import configure_logging

app = typer.Typer(
    name="opmonitor",
    help="opmonitor: follow long-running database operations from the terminal.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def root(
    ctx: typer.Context,
    status_dir: Path = typer.Option(
        None,
        "--status-dir",
        "-s",
        help="Spool directory holding operation snapshots.",
    ),
    app_name: str = typer.Option(
        None,
        "--app",
        "-a",
        help="App name shown in headings.",
    ),
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Logging level for diagnostics on stderr.",
    ),
) -> None:
    """Resolve global options against OPMONITOR_* settings."""
    configure_logging(log_level or settings.log_level)
    ctx.obj = CliState(
        status_dir=status_dir or settings.status_dir,
        app_name=app_name or settings.app_name,
        poll_interval=settings.poll_interval_seconds,
    )


# Register subcommands
app.command(name="wait", help="Wait for the database to come online.")(wait_cmd)
app.command(name="restore", help="Restore a backup and show its progress.")(restore_cmd)
app.command(name="info", help="Show database status.")(info_cmd)
app.command(name="backups", help="List legacy backups.")(backups_cmd)
app.command(name="backup-url", help="Print the download URL of a backup.")(backup_url_cmd)
app.command(name="demo", help="Replay a scripted provisioning and restore.")(demo_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
