"""Core polling and rendering logic.

Modules
-------
formatting
    Pure helpers for sizes, durations, timestamps and the spinner.
poller
    ``OperationPoller`` drives the fixed-interval poll loop.
progress
    ``ProgressRenderer`` turns cumulative progress trails into status lines.
watchers
    ``DatabaseWaiter`` and ``RestoreWatcher`` — the two poll-loop state
    machines built on top of the poller and renderer.
"""
