"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - bind_locale_context(): Context manager binding language/market to logs
    - get_transition_id(): Current transition id from context
"""

from localization.logging.context import bind_locale_context, get_transition_id
from localization.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_module_logger",
    "bind_locale_context",
    "get_transition_id",
]
