"""Human-readable formatting helpers.

All functions are pure.  Sizes use binary units (1KB = 1024 bytes).
"""

from __future__ import annotations

import math
from datetime import datetime, timezone

from opmonitor.models.operations import BackupStatus

KB = 1024
MB = 1024 * KB
GB = 1024 * MB

SPINNER_GLYPHS: tuple[str, ...] = ("/", "-", "\\", "|")

# Stage names are left-justified to this width in progress lines
STAGE_LABEL_WIDTH = 10


def human_size(num_bytes: int) -> str:
    """Format a byte count.

    Examples
    --------
    >>> human_size(1023)
    '1023B'
    >>> human_size(2048)
    '2KB'
    >>> human_size(1048576)
    '1.0MB'
    """
    if num_bytes < KB:
        return f"{num_bytes}B"
    if num_bytes < MB:
        return f"{num_bytes // KB}KB"
    if num_bytes < GB:
        return f"{num_bytes / MB:.1f}MB"
    return f"{num_bytes / GB:.2f}GB"


def _round(value: float) -> int:
    return int(math.floor(value + 0.5))


def human_duration(start: datetime, finish: datetime | None = None) -> str:
    """Format the distance between *start* and *finish* (default: now).

    Only the largest non-zero unit is reported; each unit is derived from
    the previous one by rounding to the nearest integer.
    """
    if finish is None:
        finish = datetime.now(timezone.utc)
    secs = abs(int(finish.timestamp()) - int(start.timestamp()))
    mins = _round(secs / 60)
    hours = _round(mins / 60)
    days = _round(hours / 24)
    weeks = _round(days / 7)
    months = _round(weeks / 4.3)
    years = _round(months / 12)

    if years > 0:
        return f"{years} yr"
    if months > 0:
        return f"{months} mo"
    if weeks > 0:
        return f"{weeks} wk"
    if days > 0:
        return f"{days}d"
    if hours > 0:
        return f"{hours}h"
    if mins > 0:
        return f"{mins}m"
    return f"{secs}s"


def human_timestamp(instant: datetime | str) -> str:
    """Format an instant as ``YYYY-MM-DD HH:MM TZ``.

    ISO-8601 strings are parsed first.  Naive datetimes are taken to be
    local time.
    """
    if isinstance(instant, str):
        instant = datetime.fromisoformat(instant.replace("Z", "+00:00"))
    if instant.tzinfo is None:
        instant = instant.astimezone()
    return instant.strftime("%Y-%m-%d %H:%M %Z")


def spinner_glyph(ticks: int) -> str:
    """Return the spinner frame for *ticks*."""
    return SPINNER_GLYPHS[ticks % len(SPINNER_GLYPHS)]


def stage_label(stage_name: str) -> str:
    """``"backup"`` -> ``"Backup    "`` (capitalized, padded to 10 columns)."""
    return f"{stage_name.capitalize():<{STAGE_LABEL_WIDTH}}"


def backup_state_label(backup: BackupStatus) -> str:
    """Short state column for a backup listing."""
    if backup.finished_at is not None:
        return human_size(backup.size_compressed or 0)
    if backup.progress:
        return f"{backup.progress[-1].stage_name.capitalize()}ing"
    return "Pending"


def backup_url_lines(backup: BackupStatus) -> list[str]:
    """Lines reporting where a backup can be downloaded from.

    A backup that has not finished has no URL yet; one that errored
    never will.
    """
    if backup.finished_at is not None:
        return [f"URL for backup {backup.name}:", backup.dump_url or ""]
    if backup.error_at is not None:
        return [f"Backup {backup.name} did not complete successfully"]
    return [f"Backup {backup.name} has not yet completed"]
