"""
Tests for logging setup and the workflow command handler.
"""

import io
import logging

import pytest

from glitch_sync.utils.logging import (
    SecretMaskingFilter,
    WorkflowCommandHandler,
    _parse_level,
    get_logger,
    masked_secret,
    setup_logging,
)


class TestWorkflowCommandHandler:
    """Records are rendered as workflow commands."""

    @pytest.fixture
    def logger(self, output):
        return get_logger("glitch_sync.tests")

    def test_debug(self, logger, output):
        logger.debug("full URL: https://example.com")
        assert output.getvalue() == "::debug::full URL: https://example.com\n"

    def test_info_is_plain_and_unescaped(self, logger, output):
        logger.info("100% done\nnext")
        assert output.getvalue() == "100% done\nnext\n"

    def test_warning(self, logger, output):
        logger.warning("heads up")
        assert output.getvalue() == "::warning::heads up\n"

    def test_error_is_escaped(self, logger, output):
        logger.error("Error syncing to Glitch: 50%\r\n")
        assert output.getvalue() == "::error::Error syncing to Glitch: 50%25%0D%0A\n"

    def test_critical_maps_to_error(self, logger, output):
        logger.critical("boom")
        assert output.getvalue() == "::error::boom\n"

    def test_format_args(self, logger, output):
        logger.info("status %s", 403)
        assert output.getvalue() == "status 403\n"

    def test_defaults_to_stdout(self, capsys):
        handler = WorkflowCommandHandler()
        record = logging.LogRecord("glitch_sync", logging.ERROR, __file__, 1, "oops", None, None)
        handler.emit(record)
        assert capsys.readouterr().out == "::error::oops\n"


class TestSetupLogging:
    def test_replaces_handlers(self):
        first = io.StringIO()
        second = io.StringIO()
        setup_logging(stream=first)
        logger = setup_logging(stream=second)

        assert len(logger.handlers) == 1
        logger.info("hello")
        assert first.getvalue() == ""
        assert second.getvalue() == "hello\n"

    def test_actions_defaults_to_debug(self):
        logger = setup_logging(stream=io.StringIO())
        assert logger.level == logging.DEBUG

    def test_explicit_level(self):
        stream = io.StringIO()
        logger = setup_logging(level="info", stream=stream)
        logger.debug("hidden")
        logger.info("shown")
        assert stream.getvalue() == "shown\n"

    def test_rich_console(self):
        from rich.logging import RichHandler

        logger = setup_logging(console_type="rich")
        assert logger.level == logging.INFO
        assert isinstance(logger.handlers[0], RichHandler)

    def test_unknown_console_type(self):
        with pytest.raises(ValueError, match="Unknown console type"):
            setup_logging(console_type="json")

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "glitch-sync.log"
        logger = setup_logging(stream=io.StringIO(), log_file=log_file)
        logger.error("Error running workflow: nope")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "[ERROR   ] glitch_sync: Error running workflow: nope" in content


class TestParseLevel:
    @pytest.mark.parametrize(
        "level, expected",
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), (logging.ERROR, logging.ERROR), ("nope", logging.INFO), (None, logging.INFO)],
    )
    def test_parse_level(self, level, expected):
        assert _parse_level(level, logging.INFO) == expected


class TestSecretMasking:
    def test_filter_replaces_secret(self):
        record = logging.LogRecord("glitch_sync", logging.INFO, __file__, 1, "token is %s", ("s3cret",), None)
        assert SecretMaskingFilter("s3cret").filter(record) is True
        assert record.getMessage() == "token is ***"

    def test_empty_secret_is_ignored(self):
        record = logging.LogRecord("glitch_sync", logging.INFO, __file__, 1, "nothing to hide", None, None)
        SecretMaskingFilter("").filter(record)
        assert record.getMessage() == "nothing to hide"

    @pytest.mark.parametrize("secret", ["t", "abc"])
    def test_short_secret_is_ignored(self, secret):
        record = logging.LogRecord("glitch_sync", logging.INFO, __file__, 1, "Glitch project abc updated", None, None)
        SecretMaskingFilter(secret).filter(record)
        assert record.getMessage() == "Glitch project abc updated"

    def test_masked_secret_is_scoped(self, output):
        logger = get_logger("glitch_sync.tests")
        with masked_secret("s3cret"):
            logger.info("inside s3cret")
        logger.info("outside s3cret")

        assert output.getvalue() == "inside ***\noutside s3cret\n"
