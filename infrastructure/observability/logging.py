"""
Logging setup with contextvars-based metadata injection.

- Adds the input source and a short input digest into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
"""

import contextvars
import hashlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_source = contextvars.ContextVar("source", default="-")
cv_input_tag = contextvars.ContextVar("input_tag", default="-")


def make_input_tag(raw: str, length: int = 8) -> str:
    """
    Stable short tag derived from the raw input text.
    Lets log lines about the same input be correlated without printing it.
    Uses BLAKE2s for collision resistance.
    """
    h = hashlib.blake2s(raw.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.source = cv_source.get() or "-"
        record.input = cv_input_tag.get() or "-"
        return True


def set_log_context(*, source: str | None = None, raw_input: str | None = None) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if source is not None:
        cv_source.set(str(source))
    if raw_input is not None:
        cv_input_tag.set(make_input_tag(str(raw_input)))


def clear_log_context() -> None:
    """Reset source and input context to defaults."""
    cv_source.set("-")
    cv_input_tag.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file
        console_level: Minimum level for console output (default: WARNING)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] src=%(source)s in=%(input)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | src=%(source)s in=%(input)s | %(message)s"

    console_formatter = logging.Formatter(console_fmt, datefmt="%H:%M:%S")
    file_formatter = logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S")

    ctx_filter = ContextInjectFilter()

    # Console handler goes to stderr so stdout stays clean for results
    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(console_formatter)
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(file_formatter)
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    # YAML parsing chatter is never useful here
    logging.getLogger("yaml").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
