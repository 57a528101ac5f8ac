#!/usr/bin/env python
import unittest

from auxil import get_version, __version__
from auxil.demo import main, make_fibonacci, run
from auxil.logger import Logger
from auxil.memoize import MemoState


class DemoTests(unittest.TestCase):

    def test_fibonacci(self):
        fib = make_fibonacci({}, None)
        self.assertEqual([1, 1, 2, 3, 5, 8], [fib(n) for n in range(6)])

    def test_fibonacci_stops_caching_at_limit(self):
        cache = {}
        fib = make_fibonacci(cache, 5)
        self.assertEqual(10946, fib(20))
        self.assertEqual(5, len(cache))
        self.assertEqual(MemoState.PASSTHROUGH, fib.state)

    def test_run_is_reproducible_with_a_seed(self):
        messages = []
        log = Logger(log_fn=lambda value, depth, infos: messages.append(value))
        first = run(30, 10, log, seed=3)
        second = run(30, 10, Logger(log_fn=lambda *args: None), seed=3)
        self.assertEqual(first, second)
        self.assertEqual(30, len(messages))
        self.assertLessEqual(len(first), 10)

    def test_main_logs_the_cache(self):
        with self.assertLogs("auxil.log", level="INFO") as cm:
            self.assertEqual(0, main(["--rounds", "5", "--seed", "1"]))
        self.assertTrue(cm.records[-1].getMessage().startswith(
            "logging cache for fibonacci: "))

    def test_version(self):
        self.assertEqual("1.0", __version__)
        self.assertEqual(__version__, get_version())


if __name__ == "__main__":
    unittest.main()
