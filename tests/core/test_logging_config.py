"""
Tests for logging configuration and formatters
"""

import json
import logging

import pytest

from versioninfo.core import logging_config
from versioninfo.core.logging_config import (
    ContextFormatter,
    JSONFormatter,
    get_logger,
    log_with_context,
    setup_logging,
    setup_logging_from_config,
)


def _record(message: str = "Build Info", **extra_fields) -> logging.LogRecord:
    record = logging.LogRecord(
        name="versioninfo.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    if extra_fields:
        record.extra_fields = extra_fields
    return record


@pytest.fixture
def restore_root_logger():
    """Put root handlers and level back after setup_logging() calls"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJSONFormatter:
    """Tests for JSONFormatter"""

    def test_base_fields(self):
        data = json.loads(JSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "versioninfo.test"
        assert data["message"] == "Build Info"
        assert data["timestamp"].endswith("Z")

    def test_merges_extra_fields_in_order(self):
        data = json.loads(JSONFormatter().format(_record(version="4.2.1", modules=["enterprise"])))

        assert data["version"] == "4.2.1"
        assert data["modules"] == ["enterprise"]
        keys = list(data)
        assert keys.index("version") < keys.index("modules")

    def test_serializes_unknown_types_as_strings(self, tmp_path):
        data = json.loads(JSONFormatter().format(_record(path=tmp_path)))

        assert data["path"] == str(tmp_path)


class TestContextFormatter:
    """Tests for ContextFormatter"""

    def test_appends_structured_attributes(self):
        formatter = ContextFormatter(fmt="%(levelname)s %(message)s")

        output = formatter.format(_record(version="4.2.1", environment=[{"cc": "gcc"}]))

        assert output.startswith("INFO Build Info | ")
        assert 'version="4.2.1"' in output
        assert 'environment=[{"cc": "gcc"}]' in output

    def test_plain_record(self):
        formatter = ContextFormatter(fmt="%(message)s")

        assert formatter.format(_record("hello")) == "hello"

    def test_restores_levelname(self):
        record = _record()
        ContextFormatter(fmt="%(levelname)s").format(record)

        assert record.levelname == "INFO"


class TestSetupLogging:
    """Tests for setup_logging()"""

    def test_sets_level_and_console_handler(self, restore_root_logger):
        setup_logging(level="DEBUG")

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, ContextFormatter)

    def test_json_output(self, restore_root_logger):
        setup_logging(json_output=True)

        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "versioninfo.log"

        setup_logging(log_file=log_file)
        get_logger("versioninfo.test").info("written")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])["message"] == "written"

    def test_from_config(self, restore_root_logger, fresh_config, monkeypatch):
        monkeypatch.setenv("VERSIONINFO_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("VERSIONINFO_LOG_JSON", "1")

        setup_logging_from_config()

        assert restore_root_logger.level == logging.ERROR
        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)


class TestLogWithContext:
    """Tests for log_with_context()"""

    def test_attaches_extra_fields(self, caplog):
        caplog.set_level(logging.INFO)
        logger = get_logger("versioninfo.test")

        log_with_context(logger, "info", "Target operating system minimum version", targetMinOS="Windows 7")

        record = caplog.records[-1]
        assert record.getMessage() == "Target operating system minimum version"
        assert record.extra_fields == {"targetMinOS": "Windows 7"}

    def test_level_name(self, caplog):
        caplog.set_level(logging.DEBUG)

        log_with_context(get_logger("versioninfo.test"), "WARNING", "careful")

        assert caplog.records[-1].levelno == logging.WARNING

    def test_flush_handlers(self, restore_root_logger):
        handler = logging.StreamHandler()
        flushed = []
        handler.flush = lambda: flushed.append(True)  # type: ignore[method-assign]
        restore_root_logger.addHandler(handler)

        logging_config.flush_handlers()

        assert flushed
