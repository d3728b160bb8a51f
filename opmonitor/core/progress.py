"""Incremental rendering of cumulative progress trails.

A provider returns the whole trail on every poll.  ``ProgressRenderer``
works out which entries are new since the previous poll, writes one line
per new entry, and when nothing changed it refreshes the last line so the
spinner keeps moving.

Line formats (stage names capitalized and padded to 10 columns)::

    Backup     ... /             start, transient
    Backup     ... 2KB  -        bytes, transient
    Backup     ... 2KB, done     finish, committed
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from opmonitor.core.formatting import human_size, spinner_glyph, stage_label
from opmonitor.models.progress import AmountKind, ProgressEntry, RenderState

if TYPE_CHECKING:
    from opmonitor.display import DisplaySink

logger = logging.getLogger(__name__)


class ProgressRenderer:
    """Writes progress-trail deltas to a display sink.

    Parameters
    ----------
    sink:
        Where status lines are written.
    """

    def __init__(self, sink: DisplaySink) -> None:
        self._sink = sink

    def new_entries(
        self, trail: Sequence[ProgressEntry], state: RenderState
    ) -> list[ProgressEntry]:
        """Entries of *trail* not present anywhere in ``state.seen_trail``.

        Membership is by value, not by position: a pair already seen
        earlier counts as seen even if it reappears for another stage.
        """
        seen = state.seen_trail
        return [entry for entry in trail if entry not in seen]

    def render(
        self, trail: Sequence[ProgressEntry] | None, ticks: int, state: RenderState
    ) -> None:
        """Render what changed in *trail* since the last call.

        Updates ``state.seen_trail`` to *trail* afterwards.
        """
        trail = list(trail or [])
        fresh = self.new_entries(trail, state)

        if fresh:
            for entry in fresh:
                self.render_entry(entry, ticks, state)
        elif trail and trail[-1].kind is not AmountKind.FINISH:
            self.render_entry(trail[-1], ticks, state)

        state.seen_trail = trail

    def commit(self, trail: Sequence[ProgressEntry] | None, ticks: int, state: RenderState) -> None:
        """Re-write the last in-flight line of *trail* as a committed line.

        Keeps the stage an operation stopped at on screen when the next
        write would otherwise replace it.  Does nothing for an empty or
        finished trail.
        """
        trail = list(trail or [])
        if trail and trail[-1].kind is not AmountKind.FINISH:
            self.render_entry(trail[-1], ticks, state, transient=False)

    def render_entry(
        self, entry: ProgressEntry, ticks: int, state: RenderState, *, transient: bool = True
    ) -> None:
        """Write the line for a single entry.

        Start and bytes lines are transient unless *transient* is False;
        finish lines are always committed.
        """
        label = stage_label(entry.stage_name)
        kind = entry.kind

        if kind is AmountKind.START:
            self._sink.write_line(f"{label} ... {spinner_glyph(ticks)}", overwrite_previous=transient)
            state.last_amount_displayed = 0
        elif kind is AmountKind.BYTES:
            self._sink.write_line(
                f"{label} ... {human_size(entry.amount)}  {spinner_glyph(ticks)}",
                overwrite_previous=transient,
            )
            state.last_amount_displayed = entry.amount
        elif kind is AmountKind.FINISH:
            self._sink.write_line(
                f"{label} ... {human_size(state.last_amount_displayed)}, done",
                overwrite_previous=False,
            )
        else:
            logger.debug(
                "Ignoring progress entry %r with unrecognised amount %r",
                entry.stage_name,
                entry.amount,
            )
