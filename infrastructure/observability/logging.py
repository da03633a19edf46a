"""
Logging setup with contextvars-based metadata injection.

- Adds the CLI command and the asset source being loaded into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
"""

import contextvars
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_command = contextvars.ContextVar("command", default="-")
cv_source = contextvars.ContextVar("source", default="-")


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.command = cv_command.get() or "-"
        record.source = cv_source.get() or "-"
        return True


def set_log_context(*, command: str | None = None, source: str | None = None) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if command is not None:
        cv_command.set(str(command))
    if source is not None:
        cv_source.set(str(source))


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form."""
    return {
        "command": str(cv_command.get() or "-"),
        "source": str(cv_source.get() or "-"),
    }


def clear_source_context() -> None:
    """Reset source context to default (keep command)."""
    cv_source.set("-")


# Rotation policy for the optional log file
LOG_MAX_BYTES = 5_000_000
LOG_BACKUP_COUNT = 3

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] cmd=%(command)s src=%(source)s | %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | cmd=%(command)s src=%(source)s | %(message)s"


def _attach(root: logging.Logger, handler: logging.Handler, level: int, fmt: str, datefmt: str) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    handler.addFilter(ContextInjectFilter())
    root.addHandler(handler)


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Rotating log file (console only if None)
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
    """
    # Calling twice must not duplicate lines
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # handlers enforce levels

    _attach(root, logging.StreamHandler(), console_level, CONSOLE_FORMAT, "%H:%M:%S")

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8")
        _attach(root, fh, file_level, FILE_FORMAT, "%Y-%m-%d %H:%M:%S")

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        log_file if log_file is not None else "None",
    )
