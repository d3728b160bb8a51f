"""Poll-loop state machines for database provisioning and restores.

``DatabaseWaiter`` polls the database until it reaches a terminal state.
``RestoreWatcher`` creates (or attaches to) a restore and renders its
progress trail until the provider marks it finished or failed.

Domain failures — a ``failed`` database, a restore with ``error_at`` —
are normal outcomes: one final line is written and the loop stops.
Provider errors are not handled here and abort the loop.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from opmonitor.core.formatting import (
    human_duration,
    human_size,
    human_timestamp,
    spinner_glyph,
)
from opmonitor.core.poller import OperationPoller, PollAction
from opmonitor.core.progress import ProgressRenderer
from opmonitor.models.operations import DatabaseStatus, OperationState, RestoreStatus
from opmonitor.models.progress import RenderState

if TYPE_CHECKING:
    from opmonitor.display import DisplaySink
    from opmonitor.providers import StatusProvider

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Database wait
# ---------------------------------------------------------------------------

_TERMINAL_MESSAGES: dict[str, str] = {
    OperationState.AVAILABLE.value: "The database is now ready",
    OperationState.DEPROVISIONED.value: "The database has been destroyed",
    OperationState.FAILED.value: "The database encountered an error",
}


class DatabaseWaiter:
    """Waits for the database to come online (or die trying).

    Parameters
    ----------
    provider:
        Source of database snapshots.
    sink:
        Where status lines are written.
    poller:
        The poll loop to drive.  Defaults to a one-second poller.
    """

    def __init__(
        self,
        provider: StatusProvider,
        sink: DisplaySink,
        poller: OperationPoller | None = None,
    ) -> None:
        self._provider = provider
        self._sink = sink
        self._poller = poller or OperationPoller()

    def step(self, database: DatabaseStatus, ticks: int) -> PollAction:
        """Map one database snapshot to a status line and a loop action."""
        if database.is_terminal:
            self._sink.write_line(_TERMINAL_MESSAGES[database.state], overwrite_previous=False)
            logger.info("Database reached terminal state %s", database.state)
            return PollAction.STOP

        self._sink.write_line(
            f"{database.state.capitalize()} database {spinner_glyph(ticks)}",
            overwrite_previous=True,
        )
        return PollAction.CONTINUE

    def wait(self) -> DatabaseStatus:
        """Poll until a terminal state; return the final snapshot."""
        return self._poller.run(self._provider.get_database, self.step)


# ---------------------------------------------------------------------------
# Restore
# ---------------------------------------------------------------------------


class RestoreWatcher:
    """Creates a restore and renders its progress until it ends.

    Parameters
    ----------
    provider:
        Source of restore snapshots; also creates restores.
    sink:
        Where status lines are written.
    poller:
        The poll loop to drive.  Defaults to a one-second poller.
    renderer:
        Progress renderer.  One writing to *sink* is created if omitted.
    """

    def __init__(
        self,
        provider: StatusProvider,
        sink: DisplaySink,
        poller: OperationPoller | None = None,
        renderer: ProgressRenderer | None = None,
    ) -> None:
        self._provider = provider
        self._sink = sink
        self._poller = poller or OperationPoller()
        self._renderer = renderer or ProgressRenderer(sink)

    def step(self, restore: RestoreStatus, ticks: int, state: RenderState) -> PollAction:
        """Render one restore snapshot and decide whether to keep polling."""
        self._renderer.render(restore.progress, ticks, state)

        if restore.failed:
            self._renderer.commit(restore.progress, ticks, state)
            self._sink.write_line("An error occurred while restoring the backup")
            self._sink.write_line(restore.log or "")
            logger.info("Restore %s failed at %s", restore.id, restore.error_at)
            return PollAction.STOP
        if restore.finished:
            self._sink.write_line("Restore complete")
            logger.info("Restore %s finished at %s", restore.id, restore.finished_at)
            return PollAction.STOP
        return PollAction.CONTINUE

    def watch(self, restore_id: str) -> RestoreStatus:
        """Poll an existing restore until it finishes or fails."""
        state = RenderState()
        return self._poller.run(
            lambda: self._provider.get_restore(restore_id),
            lambda restore, ticks: self.step(restore, ticks, state),
        )

    def restore(self, restore_param: str) -> RestoreStatus:
        """Create a restore from *restore_param* and watch it to the end."""
        handle = self._provider.create_restore(restore_param)
        logger.info("Created restore %s from %s", handle.id, restore_param)
        return self.watch(handle.id)


# ---------------------------------------------------------------------------
# Database summary
# ---------------------------------------------------------------------------


def describe_database(
    database: DatabaseStatus, now: datetime | None = None
) -> list[tuple[str, str]]:
    """Return ``(label, value)`` rows summarising *database*.

    Data size is only shown when both byte and table counts are known.
    """
    rows: list[tuple[str, str]] = [
        ("State", f"{database.state} for {human_duration(database.state_updated_at, now)}"),
    ]

    if database.num_bytes is not None and database.num_tables is not None:
        plural = "" if database.num_tables == 1 else "s"
        rows.append(
            (
                "Data size",
                f"{human_size(database.num_bytes)} in {database.num_tables} table{plural}",
            )
        )

    if database.postgresql_version:
        rows.append(("PG version", database.postgresql_version))

    rows.append(("Born", human_timestamp(database.created_at)))
    return rows
