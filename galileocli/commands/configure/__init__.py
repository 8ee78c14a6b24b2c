"""
Configure command: collects deployment wizard answers
"""

from .command import cli  # noqa
