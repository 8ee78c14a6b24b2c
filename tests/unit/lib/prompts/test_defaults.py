from unittest import TestCase
from unittest.mock import Mock

from galileocli.lib.cache import MappingCache
from galileocli.lib.prompts.defaults import from_cache, from_env, from_value, resolve_default


class TestResolveDefault(TestCase):
    def test_first_provider_with_a_value_wins(self):
        self.assertEqual(resolve_default([from_value(None), from_value("second"), from_value("third")]), "second")

    def test_providers_evaluated_lazily(self):
        later_provider = Mock()
        self.assertEqual(resolve_default([from_value("first"), later_provider]), "first")
        later_provider.assert_not_called()

    def test_no_value(self):
        self.assertIsNone(resolve_default([from_value(None), from_value(None)]))
        self.assertIsNone(resolve_default([]))

    def test_falsy_values_are_kept_by_default(self):
        self.assertEqual(resolve_default([from_value(""), from_value("fallback")]), "")
        self.assertFalse(resolve_default([from_value(False), from_value(True)]))

    def test_skip_empty(self):
        self.assertEqual(resolve_default([from_value(""), from_value([]), from_value("x")], skip_empty=True), "x")


class TestProviders(TestCase):
    def test_from_cache(self):
        cache = MappingCache({"profile": "dev"})
        self.assertEqual(from_cache(cache, "profile")(), "dev")
        self.assertIsNone(from_cache(cache, "appRegion")())

    def test_from_env(self):
        environ = {"AWS_REGION": "eu-west-1"}
        self.assertEqual(from_env(environ, "AWS_REGION")(), "eu-west-1")
        self.assertIsNone(from_env(environ, "AWS_DEFAULT_REGION")())

    def test_from_env_reads_at_call_time(self):
        environ = {}
        provider = from_env(environ, "AWS_PROFILE")
        environ["AWS_PROFILE"] = "dev"
        self.assertEqual(provider(), "dev")
