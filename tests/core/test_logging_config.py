"""setup_logging and its LOG_FILE wiring through create_app."""

import logging

import pytest

from message_board_api.app.core.config import Settings
from message_board_api.app.core.logging_config import LOG_FORMAT, setup_logging
import message_board_api.app.main as main_module


@pytest.fixture
def bare_root_logger(monkeypatch):
    """Strips the root logger's handlers for the rest of the test.

    Called from the test body, since pytest attaches its capture handlers
    to the root logger at the start of each phase.
    """
    root = logging.getLogger()
    original_level = root.level

    def strip():
        monkeypatch.setattr(root, "handlers", [])
        return root

    yield strip
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()
    root.setLevel(original_level)


def test_logfile_attaches_file_handler(bare_root_logger, tmp_path):
    root = bare_root_logger()
    logfile = tmp_path / "logs" / "api.log"

    assert setup_logging("debug", str(logfile)) is True

    file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(logfile.resolve())
    assert file_handlers[0].formatter._fmt == LOG_FORMAT
    assert root.level == logging.DEBUG

    logging.getLogger("message_board_api.test").warning("written to file")
    file_handlers[0].flush()
    assert "written to file" in logfile.read_text(encoding="utf-8")


def test_without_logfile_only_console_handler(bare_root_logger):
    root = bare_root_logger()
    setup_logging("INFO")

    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0], logging.FileHandler)


def test_existing_configuration_is_left_alone(bare_root_logger, tmp_path):
    root = bare_root_logger()
    existing = logging.NullHandler()
    root.addHandler(existing)

    assert setup_logging("DEBUG", str(tmp_path / "api.log")) is False
    assert root.handlers == [existing]


def test_create_app_passes_log_file_setting(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(main_module, "setup_logging", lambda *args: calls.append(args))
    logfile = str(tmp_path / "api.log")

    main_module.create_app(
        Settings(database_url=str(tmp_path / "db.sqlite"), log_level="WARNING", log_file=logfile)
    )
    main_module.create_app(Settings(database_url=str(tmp_path / "db.sqlite"), log_file=""))

    assert calls[0] == ("WARNING", logfile)
    assert calls[1][1] is None
