"""
Wrapper to generated colored messages for printing in Terminal
"""

import click


class Colored:
    """
    Helper class to add ANSI colors and decorations to text. ``click`` styles are used under the hood, callers only
    see the color names so the styling library can be swapped without touching them.

    Colors can be turned off (ex: output written to a file), in which case every method returns its input unchanged.
    """

    def __init__(self, colorize=True):
        """
        Initialize the object

        Parameters
        ----------
        colorize : bool
            Optional. Set this to True to turn on coloring. False will turn off coloring
        """
        self.colorize = colorize

    def red(self, msg):
        """Color the input red"""
        return self._color(msg, "red")

    def yellow(self, msg):
        """Color the input yellow"""
        return self._color(msg, "bright_yellow")

    def magenta(self, msg):
        """Color the input magenta"""
        return self._color(msg, "bright_magenta")

    def grey(self, msg):
        """Color the input grey"""
        return self._color(msg, "bright_black")

    def underline(self, msg):
        """Underline the input"""
        return click.style(msg, underline=True) if self.colorize else msg

    def bold(self, msg):
        """Bold the input"""
        return click.style(msg, bold=True) if self.colorize else msg

    def _color(self, msg, color):
        """Internal helper method to add colors to input"""
        kwargs = {"fg": color}
        return click.style(msg, **kwargs) if self.colorize else msg
