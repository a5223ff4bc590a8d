"""Structured logging for localekit.

Public API:
    - configure_logging(): Configure structlog (called once on import)
    - get_module_logger(): Logger bound to the calling module
"""

from localekit.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
