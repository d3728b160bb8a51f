"""opmonitor: watch long-running database operations from the terminal.

Provisioning, backup and restore operations only expose a polling
interface.  opmonitor polls them at a fixed cadence and renders their
progress as a single continuously-updating status line:

  - Fixed-interval poll loop with caller-supplied step functions
  - Incremental progress-trail rendering with an animated spinner
  - Human-readable sizes, durations and timestamps
  - Typer/Rich command-line interface (wait, restore, info, backups, demo)
"""

__version__ = "0.1.0"
__description__ = "Poll long-running database operations and render their progress."

from opmonitor.core.poller import OperationPoller, PollAction
from opmonitor.core.progress import ProgressRenderer
from opmonitor.cli.app import app as cli

__all__ = ["OperationPoller", "PollAction", "ProgressRenderer", "cli", "__version__"]
