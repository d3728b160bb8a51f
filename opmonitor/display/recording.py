"""In-memory sink — records status lines for tests and replay.

Transient lines replace each other exactly as they would on a terminal,
so ``lines`` is what a user would be left looking at, while ``history``
keeps every write.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class DisplayLine(BaseModel):
    """A single write to a sink."""

    model_config = ConfigDict(frozen=True)

    text: str
    transient: bool = False


class RecordingSink:
    """Buffers every write in memory.  Nothing is printed."""

    def __init__(self) -> None:
        self._history: list[DisplayLine] = []
        self._screen: list[DisplayLine] = []

    @property
    def sink_name(self) -> str:
        return "recording"

    def write_line(self, text: str, overwrite_previous: bool = False) -> None:
        line = DisplayLine(text=text, transient=overwrite_previous)
        self._history.append(line)
        if self._screen and self._screen[-1].transient:
            self._screen[-1] = line
        else:
            self._screen.append(line)
        logger.debug("RecordingSink: %r (transient=%s)", text, overwrite_previous)

    @property
    def history(self) -> list[DisplayLine]:
        """Every write, in order."""
        return list(self._history)

    @property
    def texts(self) -> list[str]:
        """Text of every write, in order."""
        return [line.text for line in self._history]

    @property
    def lines(self) -> list[str]:
        """Lines left on screen once transient lines have been replaced."""
        return [line.text for line in self._screen]

    @property
    def committed(self) -> list[str]:
        """Text of every committed write."""
        return [line.text for line in self._history if not line.transient]

    def flush(self) -> list[DisplayLine]:
        """Return and clear all recorded writes."""
        history = list(self._history)
        self._history.clear()
        self._screen.clear()
        return history
