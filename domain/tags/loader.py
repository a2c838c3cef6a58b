"""Parse tag configuration from a pre-loaded mapping."""

from typing import Any

from domain.tags.config import TagConfig

CONFIG_KEYS = ("delimiter", "glue", "force_lowercase", "force_parameterize", "delimiter_is_pattern")


def parse_tag_config(data: dict[str, Any]) -> TagConfig:
    """
    Parse a pre-loaded YAML dict into a TagConfig.

    This is a pure function - it does NOT perform file I/O.
    The YAML loading happens in infrastructure.config.loader.

    Args:
        data: Dictionary from yaml.safe_load()

    Returns:
        Validated TagConfig

    Raises:
        ValueError: If keys are unknown or values have the wrong shape
    """
    if not isinstance(data, dict):
        raise ValueError(f"tagging config must be a mapping, got {type(data).__name__}")

    unknown = sorted(set(data) - set(CONFIG_KEYS))
    if unknown:
        raise ValueError(f"Unknown tagging config keys: {unknown}. Allowed: {list(CONFIG_KEYS)}")

    delimiter = data.get("delimiter")
    if delimiter is not None and not isinstance(delimiter, (str, list)):
        raise ValueError("delimiter must be a string or a list of strings")
    if isinstance(delimiter, list) and not all(isinstance(d, str) for d in delimiter):
        raise ValueError("delimiter list entries must be strings")

    glue = data.get("glue")
    if glue is not None and not isinstance(glue, str):
        raise ValueError("glue must be a string")

    kwargs: dict[str, Any] = {k: data[k] for k in CONFIG_KEYS if data.get(k) is not None}
    return TagConfig(**kwargs)
