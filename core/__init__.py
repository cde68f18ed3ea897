"""Shared infrastructure: structured logging.

This package is framework-agnostic. It must NEVER import from ``botapi/``.
"""

from core.logger import BotApiLogger

__all__ = [
    "BotApiLogger",
]
