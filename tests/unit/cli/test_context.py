import logging
from unittest import TestCase
from unittest.mock import patch, ANY

from galileocli.cli.context import Context


class TestContext(TestCase):
    def test_must_initialize_with_defaults(self):
        ctx = Context()
        self.assertEqual(ctx.debug, False, "debug must default to False")

    @patch("galileocli.cli.context.GalileoCliLogger")
    def test_must_set_debug_logging(self, logger_mock):
        ctx = Context()
        ctx.debug = True

        self.assertTrue(ctx.debug)
        logger_mock.configure_logger.assert_called_once_with(
            logging.getLogger("galileocli"), ANY, logging.DEBUG
        )

    @patch("galileocli.cli.context.GalileoCliLogger")
    def test_must_not_configure_logging_without_debug(self, logger_mock):
        ctx = Context()
        ctx.debug = False
        logger_mock.configure_logger.assert_not_called()
