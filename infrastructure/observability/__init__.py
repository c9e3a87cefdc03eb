"""
Observability: structured logging and context management.

Provides:
- Contextual logging with run tag and input source
- Log rotation and file management
- Third-party library log level control
"""

from infrastructure.observability.logging import (
    ContextInjectFilter,
    clear_source_context,
    configure_logging,
    get_log_context,
    log_source,
    make_run_tag,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "get_log_context",
    "clear_source_context",
    "make_run_tag",
    "log_source",
    "ContextInjectFilter",
]
