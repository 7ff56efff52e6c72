"""Unit tests for logging setup."""

import logging

from vtranslate.utils.logger import setup_logger, InterceptHandler


def test_standard_logging_is_routed_to_loguru(tmp_path):
    log_file = tmp_path / "logs" / "vtranslate.log"
    logger = setup_logger("DEBUG", str(log_file))
    try:
        logging.getLogger("vtranslate.test").warning("payment bridge disabled")
        logger.complete()

        assert any(isinstance(h, InterceptHandler) for h in logging.getLogger().handlers)
        assert "payment bridge disabled" in log_file.read_text()
    finally:
        logger.remove()


def test_level_is_applied(tmp_path):
    log_file = tmp_path / "vtranslate.log"
    logger = setup_logger("warning", str(log_file))
    try:
        logging.getLogger("vtranslate.test").info("hidden")
        logging.getLogger("vtranslate.test").error("shown")
        logger.complete()

        text = log_file.read_text()
        assert "shown" in text
        assert "hidden" not in text
    finally:
        logger.remove()
