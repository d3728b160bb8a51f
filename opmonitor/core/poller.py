"""Fixed-interval poll loop.

The loop fetches a snapshot, hands it to a step function together with
the tick index, and either sleeps one interval and repeats or returns.
There is no upper bound on ticks and no retry: a failing fetch raises
straight out of ``run``.  Callers that need a timeout wrap the poller.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from enum import Enum
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PollAction(str, Enum):
    """What a step function wants the loop to do next."""

    CONTINUE = "continue"
    STOP = "stop"


StepFunction = Callable[[T, int], PollAction]


class OperationPoller:
    """Runs a poll loop at a fixed cadence.

    Parameters
    ----------
    interval:
        Seconds to sleep between ticks.  Default is one second.
    sleep:
        Sleep primitive; injectable so tests can run without waiting.
    """

    def __init__(
        self,
        interval: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.interval = interval
        self._sleep = sleep

    def run(self, fetch: Callable[[], T], step: StepFunction[T]) -> T:
        """Poll until *step* returns ``PollAction.STOP``.

        Tick 0 is fetched immediately.  Returns the snapshot that stopped
        the loop.  Exceptions from *fetch* or *step* propagate unchanged.
        """
        ticks = 0
        while True:
            snapshot = fetch()
            action = PollAction(step(snapshot, ticks))
            logger.debug("tick %d -> %s", ticks, action.value)
            if action is PollAction.STOP:
                return snapshot
            self._sleep(self.interval)
            ticks += 1
