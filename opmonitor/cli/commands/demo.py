"""``opmonitor demo`` — replay a scripted provisioning and restore.

Drives the real poller, watchers and progress renderer against an
in-memory scripted provider, so the status line can be seen without a
live service.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import typer
from rich.console import Console
from rich.panel import Panel

from opmonitor.core.poller import OperationPoller
from opmonitor.core.watchers import DatabaseWaiter, RestoreWatcher
from opmonitor.display.console import ConsoleSink
from opmonitor.models.operations import DatabaseStatus, RestoreStatus
from opmonitor.models.progress import ProgressEntry
from opmonitor.providers.scripted import ScriptedStatusProvider

console = Console()


def build_demo_provider(now: datetime | None = None) -> ScriptedStatusProvider:
    """A provider that provisions a database, then restores a 3-stage dump."""
    now = now or datetime.now(timezone.utc)
    born = now - timedelta(days=3)

    databases = [
        DatabaseStatus(state=state, state_updated_at=now, created_at=born)
        for state in ("pending", "provisioning", "provisioning", "provisioning", "available")
    ]

    trail: list[ProgressEntry] = []
    snapshots: list[RestoreStatus] = [RestoreStatus(id="demo-restore")]
    for stage, sizes in (
        ("download", [512 * 1024, 3 * 1024 * 1024, 7 * 1024 * 1024]),
        ("restore", [2 * 1024 * 1024, 9 * 1024 * 1024]),
        ("analyze", []),
    ):
        trail.append(ProgressEntry.start(stage))
        snapshots.append(RestoreStatus(id="demo-restore", progress=list(trail)))
        for size in sizes:
            trail.append(ProgressEntry.transferred(stage, size))
            snapshots.append(RestoreStatus(id="demo-restore", progress=list(trail)))
        trail.append(ProgressEntry.finish(stage))
        snapshots.append(RestoreStatus(id="demo-restore", progress=list(trail)))
    snapshots.append(
        RestoreStatus(id="demo-restore", progress=list(trail), finished_at=now)
    )

    return ScriptedStatusProvider(
        databases=databases,
        restores={"demo-restore": snapshots},
        next_restore_id="demo-restore",
    )


def demo_cmd(
    interval: float = typer.Option(
        0.3,
        "--interval",
        "-i",
        help="Seconds between polls (the real commands poll once a second).",
    ),
) -> None:
    """Replay a scripted database provisioning followed by a restore."""
    provider = build_demo_provider()
    sink = ConsoleSink(console)
    poller = OperationPoller(interval=interval)

    console.print()
    console.print(
        Panel(
            "[bold]opmonitor demo[/bold]\n\n"
            "Waiting for a scripted database, then restoring a scripted backup.",
            border_style="cyan",
            padding=(1, 2),
        )
    )
    console.print()

    DatabaseWaiter(provider, sink, poller).wait()
    RestoreWatcher(provider, sink, poller).restore("demo-backup")
    console.print()
