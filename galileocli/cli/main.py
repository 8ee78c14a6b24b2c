"""
Entry point for the CLI
"""

import logging

import click

from galileocli import __version__
from galileocli.cli.command import BaseCommand
from galileocli.cli.context import Context
from galileocli.cli.options import debug_option
from galileocli.lib.utils.galileo_logging import GALILEO_CLI_FORMATTER, GALILEO_CLI_LOGGER_NAME, GalileoCliLogger

LOG = logging.getLogger(__name__)


pass_context = click.make_pass_decorator(Context)


def common_options(f):
    """
    Common CLI options used by all commands. Ex: --debug
    :param f: Callback function passed by Click
    :return: Callback function
    """
    f = debug_option(f)
    return f


@click.command(cls=BaseCommand)
@common_options
@click.version_option(version=__version__, prog_name="Galileo CLI")
@pass_context
def cli(ctx):
    """
    Galileo CLI

    Collects the configuration of a Galileo deployment (AWS profile and regions, foundation and Bedrock models,
    bootstrap settings) through an interactive wizard.
    """
    galileo_cli_logger = logging.getLogger(GALILEO_CLI_LOGGER_NAME)
    if not ctx.debug:
        GalileoCliLogger.configure_logger(galileo_cli_logger, GALILEO_CLI_FORMATTER, logging.INFO)
