"""Tests for configuration and tracing."""

import logging

import pytest

from input_forms import ValueSlot, disable_tracing, enable_tracing, setup_tracing
from input_forms.config import InputFormsConfig, get_config, update_config
from input_forms.tracing import LOGGER_NAME


@pytest.fixture
def restore_logging():
    """Undo tracing setup done by a test."""
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    trace_values = get_config().trace_values
    yield logger
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logger.disabled = False
    update_config(trace_values=trace_values)


class TestConfig:
    """Tests for InputFormsConfig."""

    def test_defaults(self):
        config = InputFormsConfig()
        assert config.log_level == "WARNING"
        assert config.log_file is None
        assert config.trace_values is False
        assert config.file_encoding == "utf-8"
        assert config.saved_value_label == "[saved]"
        assert config.max_input_attempts == 3

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("INPUT_FORMS_LOG_LEVEL", "debug")
        monkeypatch.setenv("INPUT_FORMS_TRACE_VALUES", "True")
        monkeypatch.setenv("INPUT_FORMS_SAVED_LABEL", "<keep>")
        monkeypatch.setenv("INPUT_FORMS_MAX_ATTEMPTS", "5")

        config = InputFormsConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.trace_values is True
        assert config.saved_value_label == "<keep>"
        assert config.max_input_attempts == 5
        assert config.file_encoding == "utf-8"

    def test_update_config(self):
        config = get_config()
        original = config.max_input_attempts
        try:
            update_config(max_input_attempts=7, unknown_setting=1)
            assert get_config().max_input_attempts == 7
            assert not hasattr(get_config(), "unknown_setting")
        finally:
            update_config(max_input_attempts=original)


class TestTracing:
    """Tests for setup_tracing and value traces."""

    def test_file_logging(self, form, tmp_path, restore_logging):
        log_file = tmp_path / "input_forms.log"
        setup_tracing(console=False, verbose=True, file_path=str(log_file))

        form.get_input_field("attrib14").bind(ValueSlot())
        for handler in restore_logging.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "Input field 'attrib14' initialized with its default value." in text
        assert "Binding input field 'attrib14'" in text

    def test_value_traces_need_verbose(self, form, caplog, restore_logging):
        setup_tracing(console=False, verbose=False)

        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            form.get_input_field("attrib14").bind(ValueSlot())

        assert "Binding input field" not in caplog.text

    def test_disable_and_enable(self, caplog, restore_logging):
        logger = logging.getLogger("input_forms.forms.group")

        disable_tracing()
        logger.warning("hidden")
        assert "hidden" not in caplog.text

        enable_tracing()
        logger.warning("shown")
        assert "shown" in caplog.text
