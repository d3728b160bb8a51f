"""``opmonitor wait`` — wait for the database to come online."""

from __future__ import annotations

import typer
from rich.console import Console

from opmonitor.cli.context import build_poller, build_provider
from opmonitor.core.watchers import DatabaseWaiter
from opmonitor.display.console import ConsoleSink
from opmonitor.models.operations import OperationState

console = Console()


def wait_cmd(ctx: typer.Context) -> None:
    """Poll the database once per interval until it is ready, destroyed or failed.

    Exits with code 1 unless the database ends up available.
    """
    waiter = DatabaseWaiter(build_provider(ctx), ConsoleSink(console), build_poller(ctx))
    database = waiter.wait()
    if database.state != OperationState.AVAILABLE.value:
        raise typer.Exit(code=1)
