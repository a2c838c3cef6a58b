"""
Observability: contextual logging.

Provides:
- Contextual logging with input source/digest
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    clear_log_context,
    configure_logging,
    make_input_tag,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "clear_log_context",
    "make_input_tag",
]
