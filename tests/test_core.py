"""Tests for configuration and logging setup."""

import logging
from contextlib import contextmanager

from product_store_api.app.core import logging_config
from product_store_api.app.core.config import Settings


@contextmanager
def bare_root_logger():
    """Temporarily strip root handlers so setup_logging configures it."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.project_name == "Product Store API"
        assert settings.api_prefix == ""
        assert isinstance(settings.port, int)

    def test_overrides(self):
        settings = Settings(api_prefix="/api", log_level="DEBUG")
        assert settings.api_prefix == "/api"
        assert settings.log_level == "DEBUG"


class TestSetupLogging:
    def test_console_and_file_handlers(self, tmp_path):
        logfile = tmp_path / "store.log"
        with bare_root_logger() as root:
            logging_config.setup_logging("debug", str(logfile))

            assert root.level == logging.DEBUG
            kinds = {type(h) for h in root.handlers}
            assert logging.FileHandler in kinds
            assert logging.StreamHandler in kinds

    def test_configures_only_once(self):
        with bare_root_logger() as root:
            logging_config.setup_logging("INFO")
            logging_config.setup_logging("DEBUG")

            assert len(root.handlers) == 1
            assert root.level == logging.INFO

    def test_unknown_level_falls_back_to_info(self):
        with bare_root_logger() as root:
            logging_config.setup_logging("chatty")
            assert root.level == logging.INFO

    def test_records_reach_the_log_file(self, tmp_path):
        logfile = tmp_path / "store.log"
        with bare_root_logger() as root:
            logging_config.setup_logging("WARNING", str(logfile))
            logging.getLogger("product_store_api.test").info("dropped")
            logging.getLogger("product_store_api.test").warning("Rejected POST /products")
            for handler in root.handlers:
                handler.flush()

        content = logfile.read_text(encoding="utf-8")
        assert "[WARNING] product_store_api.test: Rejected POST /products" in content
        assert "dropped" not in content
