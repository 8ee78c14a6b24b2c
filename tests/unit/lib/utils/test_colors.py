from unittest import TestCase

from parameterized import parameterized, param

from galileocli.lib.utils.colors import Colored


class TestColored(TestCase):
    def setUp(self):
        self.msg = "message"

    @parameterized.expand(
        [
            param("red", "\x1b[31m"),
            param("yellow", "\x1b[93m"),
            param("magenta", "\x1b[95m"),
            param("grey", "\x1b[90m"),
            param("underline", "\x1b[4m"),
            param("bold", "\x1b[1m"),
        ]
    )
    def test_various_decorations(self, decoration_name, ansi_prefix):
        expected = ansi_prefix + self.msg + "\x1b[0m"

        with_color = Colored()
        without_color = Colored(colorize=False)

        self.assertEqual(expected, getattr(with_color, decoration_name)(self.msg))
        self.assertEqual(self.msg, getattr(without_color, decoration_name)(self.msg))
