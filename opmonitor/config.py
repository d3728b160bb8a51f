"""Runtime configuration — env-driven via pydantic-settings.

Reads from a .env file and OPMONITOR_* environment variables.  CLI
options override individual fields per invocation.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class MonitorSettings(BaseSettings):
    """Settings for the operation monitor.

    Examples
    --------
    Override via environment::

        export OPMONITOR_LOG_LEVEL=DEBUG
        export OPMONITOR_STATUS_DIR=/var/spool/opmonitor
        export OPMONITOR_APP_NAME=billing

    Or via .env file::

        OPMONITOR_POLL_INTERVAL_SECONDS=0.5
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="OPMONITOR_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # One tick per second is the reference cadence
    poll_interval_seconds: float = 1.0

    # Spool directory read by SpoolDirectoryProvider
    status_dir: Path = Path(".opmonitor")

    # Label used in headings ("=== {app_name} database")
    app_name: str = "default"


# Module-level singleton — import as `from opmonitor.config import settings`
settings = MonitorSettings()
