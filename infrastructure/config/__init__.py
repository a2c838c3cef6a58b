"""
Configuration management: models, loading, and validation.

Handles:
- RunConfig: command line configuration wrapping a TagConfig
- Tagging config loading from YAML
- Environment variable overrides (TAGLIST_*)

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import (
    load_run_config,
    load_tag_config,
    tag_env_overrides,
)
from infrastructure.config.models import (
    LOG_LEVELS,
    OutputFormat,
    RunConfig,
)

__all__ = [
    # Main config (most commonly used)
    "RunConfig",
    "load_run_config",
    # Enums
    "OutputFormat",
    "LOG_LEVELS",
    # Loaders
    "load_tag_config",
    "tag_env_overrides",
]
