"""
Tracing configuration for input-forms.

All modules log under the "input_forms" logger. Nothing is emitted
unless the host application configures logging or calls
setup_tracing(). Value traces (binding, defaults, environment and file
sourcing) are only logged when config.trace_values is on.
"""

import logging

from input_forms.config import get_config, update_config

LOGGER_NAME = "input_forms"

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Level above CRITICAL, set on the package logger while tracing is disabled
_DISABLED_LEVEL = logging.CRITICAL + 1
_enabled_level = logging.NOTSET

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def trace_value(logger: logging.Logger, message: str, *args) -> None:
    """Log a value trace if value tracing is enabled."""
    if get_config().trace_values:
        logger.debug(message, *args)


def setup_tracing(
    enabled: bool = True,
    console: bool = True,
    verbose: bool = False,
    file_path: str | None = None,
) -> None:
    """
    Configure logging for the input-forms package.

    Args:
        enabled: Whether tracing is enabled.
        console: Whether to log to stderr.
        verbose: Whether to log value traces at DEBUG level.
        file_path: Optional file path to write logs to. Defaults to
            config.log_file.

    Example:
        >>> from input_forms.tracing import setup_tracing
        >>> setup_tracing(console=True, verbose=True)
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    if not enabled:
        disable_tracing()
        return

    config = get_config()
    update_config(trace_values=verbose)
    logger.setLevel(logging.DEBUG if verbose else config.log_level)

    handlers: list[logging.Handler] = []

    if console:
        handlers.append(logging.StreamHandler())

    file_path = file_path or config.log_file
    if file_path:
        handlers.append(logging.FileHandler(file_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)


def disable_tracing() -> None:
    """Disable all input-forms logging."""
    global _enabled_level
    update_config(trace_values=False)
    logger = logging.getLogger(LOGGER_NAME)
    if logger.level != _DISABLED_LEVEL:
        _enabled_level = logger.level
    logger.setLevel(_DISABLED_LEVEL)


def enable_tracing() -> None:
    """Re-enable input-forms logging with the handlers already installed."""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.level == _DISABLED_LEVEL:
        logger.setLevel(_enabled_level)
