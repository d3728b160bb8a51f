"""Terminal sink — writes status lines through a Rich Console.

Transient lines are left open (no newline) and replaced in place with a
carriage return and an erase-line control sequence.  On output that is
not a terminal, transient lines are dropped and only committed lines are
printed, so logs and pipes stay readable.
"""

from __future__ import annotations

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType


class ConsoleSink:
    """Writes status lines to a Rich Console.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self._line_open = False

    @property
    def sink_name(self) -> str:
        return "console"

    def write_line(self, text: str, overwrite_previous: bool = False) -> None:
        if not self.console.is_terminal:
            if not overwrite_previous:
                self.console.out(text, highlight=False)
            return

        if self._line_open:
            self.console.control(
                Control(ControlType.CARRIAGE_RETURN, (ControlType.ERASE_IN_LINE, 2))
            )
        self.console.out(text, end="" if overwrite_previous else "\n", highlight=False)
        self._line_open = overwrite_previous
