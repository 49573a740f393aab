"""
Tests for logging setup and secret redaction.
"""

import logging

from textassist.core.logging import (
    LOGGER_NAME,
    QUIET_LOGGERS,
    RedactingFilter,
    get_logger,
    redact,
    setup_logging,
)

GEMINI_URL = (
    "https://generativelanguage.googleapis.com/v1/models/gemini-1.5-flash:generateContent?key=gm-secret"
)


def _record(msg, *args):
    return logging.LogRecord(LOGGER_NAME, logging.INFO, __file__, 1, msg, args, None)


class TestSetupLogging:
    """Tests for the service logger."""

    def test_single_configured_logger(self):
        logger = setup_logging()
        assert logger.name == LOGGER_NAME
        assert get_logger() is logger
        assert setup_logging() is logger
        assert len(logger.handlers) == 2

    def test_handlers_redact(self):
        for handler in setup_logging().handlers:
            assert any(isinstance(f, RedactingFilter) for f in handler.filters)

    def test_http_client_loggers_are_quiet(self):
        setup_logging()
        for name in QUIET_LOGGERS:
            assert not logging.getLogger(name).isEnabledFor(logging.INFO)


class TestRedaction:
    """Tests for credential masking."""

    def test_query_key(self):
        assert redact(GEMINI_URL).endswith("?key=***")

    def test_bearer_token(self):
        assert redact("Authorization: Bearer sk-secret") == "Authorization: Bearer ***"

    def test_plain_message_untouched(self):
        assert redact("POST /ai/complete - 200 (0.01s)") == "POST /ai/complete - 200 (0.01s)"

    def test_filter_rewrites_formatted_message(self):
        record = _record('HTTP Request: %s %s "%s"', "POST", GEMINI_URL, "HTTP/1.1 200 OK")
        assert RedactingFilter().filter(record) is True
        message = record.getMessage()
        assert "gm-secret" not in message
        assert message.startswith("HTTP Request: POST https://generativelanguage")

    def test_filter_keeps_args_when_nothing_to_mask(self):
        record = _record("Suggestions via %s", "openai")
        RedactingFilter().filter(record)
        assert record.args == ("openai",)
        assert record.getMessage() == "Suggestions via openai"
