"""
Tests for logging configuration.
"""

import os
import logging
import logging.handlers
import tempfile

from texsync.core.logging_config import configure_logging, get_logger

class TestLoggingConfig:
    """
    Tests for the logging configuration module.
    """

    def setup_method(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root_logger = logging.getLogger()
        self.saved_handlers = self.root_logger.handlers[:]
        self.saved_level = self.root_logger.level

    def teardown_method(self):
        for handler in self.root_logger.handlers[:]:
            self.root_logger.removeHandler(handler)
            handler.close()
        for handler in self.saved_handlers:
            self.root_logger.addHandler(handler)
        self.root_logger.setLevel(self.saved_level)
        self.temp_dir.cleanup()

    def test_console_only(self):
        """
        Test that only a console handler is installed without a log file.
        """
        configure_logging(level="WARNING", log_file=None)

        assert self.root_logger.level == logging.WARNING
        assert len(self.root_logger.handlers) == 1
        assert isinstance(self.root_logger.handlers[0], logging.StreamHandler)

    def test_log_file(self):
        """
        Test logging to a rotating file in a new directory.
        """
        log_file = os.path.join(self.temp_dir.name, "logs", "texsync.log")

        configure_logging(level="debug", log_file=log_file, log_to_console=False)
        get_logger("texsync.test").debug("converted a.svg")
        for handler in self.root_logger.handlers:
            handler.flush()

        assert isinstance(self.root_logger.handlers[0], logging.handlers.RotatingFileHandler)
        with open(log_file, "r") as f:
            assert "converted a.svg" in f.read()

    def test_unknown_level_falls_back_to_info(self):
        configure_logging(level="verbose", log_file=None)

        assert self.root_logger.level == logging.INFO

