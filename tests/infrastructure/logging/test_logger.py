"""Tests for the fin account application logger."""

import logging

from src.infrastructure.logging import logger as logger_module


def test_app_logger_writes_to_finaccount_log(monkeypatch, tmp_path):
    """AppLogger should log into logs/finaccount/<date>_finaccount_logs.log."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240101"),
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logging.getLogger("finaccount"), "handlers", [])

    app_logger = logger_module.AppLogger("finaccount")
    app_logger.info("balance computed")

    log_path = tmp_path / "logs" / "finaccount" / "20240101_finaccount_logs.log"
    handlers = app_logger.logger.handlers
    file_handlers = [h for h in handlers if isinstance(h, logging.FileHandler)]
    assert [h.baseFilename for h in file_handlers] == [str(log_path)]
    for handler in handlers:
        handler.flush()
        handler.close()
    assert "balance computed" in log_path.read_text(encoding="utf-8")


def test_get_app_logger_returns_singleton(monkeypatch):
    """Repeated calls should build the underlying logger only once."""
    built = []

    def fake_build(self):
        built.append(self)
        return logging.getLogger("finaccount-test")

    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.LoggerBuilder, "build", fake_build)

    first = logger_module.get_app_logger()
    second = logger_module.get_app_logger()

    assert first is second
    assert len(built) == 1
