"""
Configures a logger
"""

import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler

GALILEO_CLI_FORMATTER = logging.Formatter("%(message)s")
GALILEO_CLI_FORMATTER_WITH_TIMESTAMP = logging.Formatter("%(asctime)s | %(message)s")

GALILEO_CLI_LOGGER_NAME = "galileocli"

NO_LOGGING_COLOR_ENV_VAR = "NO_COLOR"
GALILEO_NO_LOGGING_COLOR_ENV_VAR = "GALILEO_CLI_NO_COLOR"
TERMINAL_ENV_VAR = "TERM"
DUMB_TERMINAL = "dumb"


class GalileoCliLogger:
    @staticmethod
    def configure_logger(logger, formatter, level):
        """
        Configure a Logger with the level provided and also the first handler's formatter.
        If there is no handler in the logger, a new handler is added: a RichHandler when stderr is an
        interactive terminal that accepts colors, a plain StreamHandler otherwise.

        Parameters
        ----------
        logger logging.getLogger
            Logger to configure
        formatter logging.formatter
            Formatter for the logger
        level int
            Logging level to set on the logger
        """
        handlers = logger.handlers
        if handlers:
            log_stream_handler = handlers[0]
        else:
            log_stream_handler = (
                RichHandler(console=Console(stderr=True), show_time=False, show_path=False, show_level=False)
                if GalileoCliLogger.use_rich_handler()
                else logging.StreamHandler()
            )
            logger.addHandler(log_stream_handler)
        log_stream_handler.setLevel(logging.DEBUG)
        log_stream_handler.setFormatter(formatter)

        logger.setLevel(level)
        logger.propagate = False

    @staticmethod
    def use_rich_handler() -> bool:
        return sys.stderr.isatty() and not any(
            [
                os.getenv(NO_LOGGING_COLOR_ENV_VAR),
                os.getenv(GALILEO_NO_LOGGING_COLOR_ENV_VAR),
                os.getenv(TERMINAL_ENV_VAR) == DUMB_TERMINAL,
            ]
        )
