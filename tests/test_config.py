#!/usr/bin/env python
import unittest

from pydantic import ValidationError

from auxil.clone import json_clone
from auxil.config import LoggerConfig, MemoizationConfig, parse_options
from auxil.exceptions import ConfigurationError
from auxil.keys import json_key


class MemoizationConfigTests(unittest.TestCase):

    def test_defaults(self):
        config = MemoizationConfig()
        self.assertIs(json_key, config.hash_fn)
        self.assertIs(json_clone, config.clone_fn)
        self.assertIsNone(config.cache)
        self.assertIsNone(config.limit)
        self.assertFalse(config.clone)
        self.assertFalse(config.threadsafe)

    def test_none_callables_fall_back_to_defaults(self):
        config = MemoizationConfig(hash_fn=None, clone_fn=None)
        self.assertIs(json_key, config.hash_fn)
        self.assertIs(json_clone, config.clone_fn)

    def test_cache_is_kept_by_identity(self):
        cache = {}
        self.assertIs(cache, MemoizationConfig(cache=cache).cache)

    def test_numeric_string_limit(self):
        self.assertEqual(3, MemoizationConfig(limit="3").limit)

    def test_boolean_limit_is_ignored(self):
        with self.assertLogs("auxil.config", level="WARNING"):
            self.assertIsNone(MemoizationConfig(limit=True).limit)

    def test_nan_limit_is_ignored(self):
        with self.assertLogs("auxil.config", level="WARNING"):
            self.assertIsNone(MemoizationConfig(limit=float("nan")).limit)

    def test_is_frozen(self):
        config = MemoizationConfig()
        with self.assertRaises(ValidationError):
            config.limit = 4

    def test_unknown_fields_are_rejected(self):
        with self.assertRaises(ValidationError):
            MemoizationConfig(cloneFn=json_clone)


class LoggerConfigTests(unittest.TestCase):

    def test_defaults(self):
        config = LoggerConfig()
        self.assertFalse(config.store_time)
        self.assertIs(False, config.id)
        self.assertIsNone(config.file_path)
        self.assertEqual(0, config.default_depth)

    def test_empty_id_is_false(self):
        self.assertIs(False, LoggerConfig(id="").id)
        self.assertEqual("7", LoggerConfig(id=7).id)

    def test_non_numeric_depth_is_zero(self):
        self.assertEqual(0, LoggerConfig(default_depth="deep").default_depth)
        self.assertEqual(0, LoggerConfig(default_depth=None).default_depth)
        self.assertEqual(3, LoggerConfig(default_depth="3").default_depth)

    def test_non_callable_log_fn_is_rejected(self):
        with self.assertRaises(ValidationError):
            LoggerConfig(log_fn="print")


class ParseOptionsTests(unittest.TestCase):

    def test_wraps_validation_errors(self):
        with self.assertRaises(ConfigurationError) as cm:
            parse_options(MemoizationConfig, {"limt": 3})
        self.assertIsInstance(cm.exception, ValueError)
        self.assertIn("limt", str(cm.exception))

    def test_builds_model(self):
        config = parse_options(MemoizationConfig, {"limit": 5, "clone": True})
        self.assertEqual(5, config.limit)
        self.assertTrue(config.clone)


if __name__ == "__main__":
    unittest.main()
