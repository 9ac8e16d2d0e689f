import logging
import sys

from codex_mcp.core.logging_config import build_handlers


def test_console_handler_writes_to_stderr_only():
    handlers = build_handlers("INFO")

    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert handlers[0].stream is sys.stderr
    assert handlers[0].level == logging.INFO


def test_log_file_adds_file_handler(tmp_path):
    log_path = tmp_path / "logs" / "bridge.log"

    handlers = build_handlers("DEBUG", str(log_path))
    try:
        assert [type(handler) for handler in handlers] == [
            logging.StreamHandler,
            logging.FileHandler,
        ]
        assert log_path.parent.is_dir()
        assert all(handler.level == logging.DEBUG for handler in handlers)
    finally:
        for handler in handlers:
            handler.close()
