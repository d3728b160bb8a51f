"""Progress trail models — cumulative (stage, amount) entries."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AmountKind(str, Enum):
    """Tag of a progress entry's amount."""

    START = "start"
    BYTES = "bytes"
    FINISH = "finish"
    UNKNOWN = "unknown"


class ProgressEntry(BaseModel):
    """One ``(stage_name, amount)`` pair of a progress trail.

    Providers send entries as two-item arrays, e.g. ``["backup", "start"]``
    or ``["backup", 2048]``.  The amount is kept exactly as received so
    that entries compare by value against previously seen ones; values
    that are none of start / bytes / finish are tolerated and classified
    as ``AmountKind.UNKNOWN``.
    """

    model_config = ConfigDict(frozen=True)

    stage_name: str
    amount: Any = None

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        if isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
            if len(data) != 2:
                raise ValueError(f"progress entry must be a pair, got {len(data)} items")
            stage_name, amount = data
            return {"stage_name": stage_name, "amount": amount}
        return data

    @classmethod
    def start(cls, stage_name: str) -> ProgressEntry:
        return cls(stage_name=stage_name, amount=AmountKind.START.value)

    @classmethod
    def transferred(cls, stage_name: str, num_bytes: int) -> ProgressEntry:
        return cls(stage_name=stage_name, amount=num_bytes)

    @classmethod
    def finish(cls, stage_name: str) -> ProgressEntry:
        return cls(stage_name=stage_name, amount=AmountKind.FINISH.value)

    @property
    def kind(self) -> AmountKind:
        """Classify the raw amount."""
        amount = self.amount
        if amount == AmountKind.START.value:
            return AmountKind.START
        if amount == AmountKind.FINISH.value:
            return AmountKind.FINISH
        if isinstance(amount, int) and not isinstance(amount, bool) and amount >= 0:
            return AmountKind.BYTES
        return AmountKind.UNKNOWN


class RenderState(BaseModel):
    """Mutable state owned by a single progress rendering session.

    Created once per monitored operation and discarded when its poll loop
    exits.  Only ``ProgressRenderer`` mutates it.
    """

    seen_trail: list[ProgressEntry] = Field(default_factory=list)
    last_amount_displayed: int = 0
