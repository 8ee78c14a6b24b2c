"""
Decorates messages shown while running a step of the deployment wizard
"""

from galileocli.lib.utils.colors import Colored


class MessageFormatter:
    """
    Builds the display text of execution confirmations.

    A context tag names the wizard step the message belongs to (ex: "deploy", "bootstrap") and is rendered in front
    of the message, so confirmations of different steps can be told apart in a long session.
    """

    def __init__(self, colorize: bool = True) -> None:
        self._color = Colored(colorize=colorize)

    def context_message(self, ctx: str, message: str) -> str:
        return f"{self._color.magenta(f'[{ctx}]')} {message}"

    def command_message(self, ctx: str, description: str, command: str) -> str:
        return self.context_message(ctx, f"{description}\n{self._color.grey(self._color.underline(command))}")
