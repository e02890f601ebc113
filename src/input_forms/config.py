"""
Configuration module for input-forms.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class InputFormsConfig:
    """Configuration settings for input-forms."""

    # Logging settings
    log_level: str = "WARNING"
    log_file: str | None = None
    trace_values: bool = False  # Debug traces of value binding and sourcing

    # Value sourcing
    file_encoding: str = "utf-8"
    saved_value_label: str = "[saved]"

    # Collection settings
    max_input_attempts: int = 3

    @classmethod
    def from_env(cls) -> "InputFormsConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            log_level=os.getenv("INPUT_FORMS_LOG_LEVEL", _defaults.log_level).upper(),
            log_file=os.getenv("INPUT_FORMS_LOG_FILE", _defaults.log_file),
            trace_values=os.getenv("INPUT_FORMS_TRACE_VALUES", str(_defaults.trace_values).lower()).lower() == "true",
            file_encoding=os.getenv("INPUT_FORMS_FILE_ENCODING", _defaults.file_encoding),
            saved_value_label=os.getenv("INPUT_FORMS_SAVED_LABEL", _defaults.saved_value_label),
            max_input_attempts=int(os.getenv("INPUT_FORMS_MAX_ATTEMPTS", str(_defaults.max_input_attempts))),
        )


config = InputFormsConfig.from_env()


def get_config() -> InputFormsConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> InputFormsConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
