"""
Context information passed to each CLI command
"""

import logging

from galileocli.lib.utils.galileo_logging import (
    GALILEO_CLI_FORMATTER_WITH_TIMESTAMP,
    GALILEO_CLI_LOGGER_NAME,
    GalileoCliLogger,
)


class Context:
    """
    Top level context object for the CLI. Exposes common functionality required by a CLI, including debug logging.

    This object is passed by Click to every command that adds the proper annotation. This class itself does not
    rely on how Click works, it is a plain old Python class that holds common properties used by every CLI command.
    """

    def __init__(self):
        """
        Initialize the context with default values
        """
        self._debug = False

    @property
    def debug(self):
        return self._debug

    @debug.setter
    def debug(self, value):
        """
        Turn on debug logging if necessary.

        :param value: Value of debug flag
        """
        self._debug = value

        if self._debug:
            # Turn on debug logging and display timestamps
            galileo_cli_logger = logging.getLogger(GALILEO_CLI_LOGGER_NAME)
            GalileoCliLogger.configure_logger(galileo_cli_logger, GALILEO_CLI_FORMATTER_WITH_TIMESTAMP, logging.DEBUG)
