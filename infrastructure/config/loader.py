"""Configuration loading from YAML files and environment variables."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from domain.tags.config import TagConfig
from domain.tags.loader import CONFIG_KEYS, parse_tag_config
from infrastructure.config.models import OutputFormat, RunConfig
from infrastructure.constants import (
    ENV_DELIMITER,
    ENV_FORCE_LOWERCASE,
    ENV_FORCE_PARAMETERIZE,
    ENV_GLUE,
)

logger = logging.getLogger(__name__)

RUN_KEYS = ("output_format", "console_level", "file_level", "log_file")
TAGGING_SECTION = "tagging"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    # an empty file is an empty config
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {raw!r}")


def _parse_delimiter(raw: str) -> str | list[str]:
    """
    Read TAGLIST_DELIMITER as a YAML scalar or flow list.

    ``;`` -> ";", ``[",", ";"]`` -> [",", ";"]. Only a value starting with ``[`` is read
    as a list; anything YAML would strip or reinterpret (a lone space, ``-``) is taken
    verbatim.
    """
    try:
        value = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
    if isinstance(value, list):
        if raw.lstrip().startswith("[") and all(isinstance(v, str) for v in value):
            return value
        return raw
    if isinstance(value, str) and value:
        return value
    return raw


def tag_env_overrides(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Collect TAGLIST_* environment overrides as TagConfig field values."""
    env = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}

    if env.get(ENV_DELIMITER):
        overrides["delimiter"] = _parse_delimiter(env[ENV_DELIMITER])
    if env.get(ENV_GLUE):
        overrides["glue"] = env[ENV_GLUE]
    if ENV_FORCE_LOWERCASE in env:
        overrides["force_lowercase"] = _parse_bool(ENV_FORCE_LOWERCASE, env[ENV_FORCE_LOWERCASE])
    if ENV_FORCE_PARAMETERIZE in env:
        overrides["force_parameterize"] = _parse_bool(ENV_FORCE_PARAMETERIZE, env[ENV_FORCE_PARAMETERIZE])

    return overrides


def _split_sections(data: dict[str, Any], path: Path) -> tuple[dict[str, Any], dict[str, Any]]:
    """
    Split a config file into (tagging keys, run keys).

    Tagging keys live either under a ``tagging`` mapping or at top level, not both.
    Any other top-level key is rejected.
    """
    allowed = {TAGGING_SECTION, *CONFIG_KEYS, *RUN_KEYS}
    unknown = sorted(str(k) for k in data if k not in allowed)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {unknown}. Allowed: {sorted(allowed)}")

    top_level_tagging = {k: data[k] for k in CONFIG_KEYS if k in data}
    section = data.get(TAGGING_SECTION)
    if section is not None and top_level_tagging:
        raise ValueError(
            f"Tagging keys {sorted(top_level_tagging)} in {path} must go under '{TAGGING_SECTION}' "
            "or at top level, not both"
        )
    if section is not None and not isinstance(section, dict):
        raise ValueError(f"'{TAGGING_SECTION}' in {path} must be a mapping")

    run_data = {k: data[k] for k in RUN_KEYS if k in data}
    return (section if section is not None else top_level_tagging), run_data


def load_tag_config(path: Path) -> TagConfig:
    """
    Load the tagging section from a YAML file.

    The file may either hold the keys at top level or under a ``tagging`` key.
    This function handles file I/O, then delegates parsing to the domain layer.
    """
    data = _load_yaml(path)
    tagging_data, _ = _split_sections(data, path)
    return parse_tag_config(tagging_data)


def load_run_config(
    config_path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> RunConfig:
    """
    Construct a fully-resolved RunConfig.

    Precedence: overrides (CLI flags) > environment > YAML file > defaults.

    Args:
        config_path: Optional YAML file; a missing file raises FileNotFoundError
        environ: Environment mapping (defaults to os.environ)
        overrides: Already-parsed CLI values; None values are ignored

    Returns:
        RunConfig with a validated TagConfig
    """
    tagging_data: dict[str, Any] = {}
    run_fields: dict[str, Any] = {}
    if config_path is not None:
        tagging_data, run_fields = _split_sections(_load_yaml(config_path), config_path)
        logger.info("Loaded tagging config from %s", config_path)

    base = parse_tag_config(tagging_data)

    tag_fields = {key: getattr(base, key) for key in TagConfig.model_fields}
    tag_fields.update(tag_env_overrides(environ))

    for key, value in (overrides or {}).items():
        if value is None:
            continue
        if key in TagConfig.model_fields:
            tag_fields[key] = value
        elif key in RunConfig.model_fields:
            run_fields[key] = value
        else:
            raise ValueError(f"Unknown configuration override: {key!r}")

    if "output_format" in run_fields:
        run_fields["output_format"] = OutputFormat(str(run_fields["output_format"]).strip().lower())
    if run_fields.get("log_file") is not None:
        run_fields["log_file"] = Path(run_fields["log_file"])

    cfg = RunConfig(tagging=TagConfig(**tag_fields), **run_fields)
    logger.debug("Resolved run config: %s", cfg.model_dump(mode="json"))
    return cfg
