"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- Line-oriented input files
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    OutputFormat,
    RunConfig,
    load_run_config,
)
from infrastructure.observability import configure_logging

__all__ = [
    # Configuration (most commonly used)
    "load_run_config",
    "RunConfig",
    "OutputFormat",
    # Logging
    "configure_logging",
]
