"""Shared infrastructure: the project-wide JSON logger.

This package is framework-agnostic. It must NEVER import from ``bot/``,
``sdk/`` or ``hydrate/``.
"""

from core.logger import HydrateLogger

__all__ = [
    "HydrateLogger",
]
