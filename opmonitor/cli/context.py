"""Per-invocation CLI state shared by all subcommands."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import BaseModel, ConfigDict

from opmonitor.config import settings
from opmonitor.core.poller import OperationPoller
from opmonitor.providers.spool import SpoolDirectoryProvider


class CliState(BaseModel):
    """Options resolved from the command line and ``MonitorSettings``."""

    model_config = ConfigDict(frozen=True)

    status_dir: Path = settings.status_dir
    app_name: str = settings.app_name
    poll_interval: float = settings.poll_interval_seconds


def cli_state(ctx: typer.Context) -> CliState:
    """Return the state stored by the root callback (or defaults)."""
    state = ctx.find_object(CliState)
    return state if state is not None else CliState()


def build_provider(ctx: typer.Context) -> SpoolDirectoryProvider:
    return SpoolDirectoryProvider(cli_state(ctx).status_dir)


def build_poller(ctx: typer.Context) -> OperationPoller:
    return OperationPoller(interval=cli_state(ctx).poll_interval)
