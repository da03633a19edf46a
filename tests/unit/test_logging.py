import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from infrastructure.observability import clear_source_context, configure_logging, get_log_context, set_log_context
from infrastructure.observability.logging import LOG_BACKUP_COUNT, LOG_MAX_BYTES


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    set_log_context(command="-", source="-")


def test_configure_logging_writes_context_to_rotating_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "tags.log"
    configure_logging(log_file=log_file, console_level=logging.ERROR)

    root = logging.getLogger()
    file_handlers = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
    assert len(root.handlers) == 2
    assert file_handlers[0].maxBytes == LOG_MAX_BYTES
    assert file_handlers[0].backupCount == LOG_BACKUP_COUNT

    set_log_context(command="tree", source="core.yaml")
    logging.getLogger("domain.tags.registry").debug("hello")

    assert "cmd=tree src=core.yaml | hello" in log_file.read_text(encoding="utf-8")


def test_configure_logging_twice_does_not_duplicate_handlers() -> None:
    configure_logging(console_level=logging.ERROR)
    configure_logging(console_level=logging.ERROR)

    assert len(logging.getLogger().handlers) == 1


def test_clear_source_context_keeps_command() -> None:
    set_log_context(command="check", source="a.yaml")
    clear_source_context()

    assert get_log_context() == {"command": "check", "source": "-"}
