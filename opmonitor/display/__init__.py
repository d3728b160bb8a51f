"""Display sink protocol for status lines.

All sinks implement the ``DisplaySink`` protocol: a ``sink_name``
property and a ``write_line(text, overwrite_previous)`` method.

A line written with ``overwrite_previous=True`` is transient — the next
write, of either kind, takes its place.  A line written with
``overwrite_previous=False`` is committed and never replaced.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DisplaySink(Protocol):
    """Protocol that every status-line sink must implement.

    Sinks are called synchronously from the poll loop and must not block
    indefinitely.
    """

    @property
    def sink_name(self) -> str:
        """Return the unique name of this sink."""
        ...

    def write_line(self, text: str, overwrite_previous: bool = False) -> None:
        """Write one status line.

        Parameters
        ----------
        text:
            The line, without a trailing newline.
        overwrite_previous:
            True for an animated line the next write replaces; False to
            commit the line permanently.
        """
        ...
