"""Minimal bot framework -- per-update context, middleware chain, polling loop.

This package may import from ``core/``, ``sdk/`` and ``config`` only.
"""

from bot.context import Context
from bot.dispatcher import process_update, run, run_middlewares

__all__ = [
    "Context",
    "process_update",
    "run",
    "run_middlewares",
]
