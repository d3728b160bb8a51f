"""opmonitor CLI — Typer-based command-line interface.

Provides the ``opmonitor`` command with subcommands for waiting on a
database, restoring a backup, showing database info, listing legacy
backups, and running a scripted demo.

All output uses Rich for formatted terminal display.
"""
