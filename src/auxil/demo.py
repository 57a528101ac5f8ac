#!/usr/bin/env python
"""
Exercise memoize, case_of and Logger together: a memoized fibonacci with a
shared, size-limited cache, called from randomly dispatched cases.

    python -m auxil --limit 10 --rounds 50 --seed 1
"""
import argparse
import json
import logging
import random

from auxil import __version__
from auxil.case_of import case_of
from auxil.logger import Logger
from auxil.memoize import memoize

logger = logging.getLogger(__name__)


def make_fibonacci(cache, limit):
    @memoize(cache=cache, limit=limit)
    def fibonacci(n):
        if n < 2:
            return 1
        return fibonacci(n - 2) + fibonacci(n - 1)
    return fibonacci


def run(rounds, limit, log, seed=None):
    """
    Dispatch `rounds` random cases and return the fibonacci cache.
    """
    rng = random.Random(seed)
    cache = {}
    fib = make_fibonacci(cache, limit)

    def small():
        n = rng.randrange(10)
        log.log("fibonacci({}): {}".format(n, fib(n)))

    def large():
        n = rng.randrange(25)
        log.log("fibonacci({}): {}".format(n, fib(n)))

    switch = case_of({
        1: small,
        2: large,
        "default": lambda: log.log("default"),
    })
    for _ in range(rounds):
        switch(rng.randrange(3))

    logger.debug("fibonacci cache is %s after %d rounds", fib.state.value, rounds)
    return cache


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="auxil", description="auxil {} demo".format(__version__))
    parser.add_argument("--limit", type=int, default=10,
                        help="cache size limit for fibonacci")
    parser.add_argument("--rounds", type=int, default=50)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--store-time", action="store_true",
                        help="prefix log entries with the time")
    parser.add_argument("--id", default="auxil-demo")
    parser.add_argument("--debug", action="store_true",
                        help="show cache hits and misses")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(message)s")

    log = Logger(store_time=args.store_time, id=args.id)
    cache = run(args.rounds, args.limit, log, seed=args.seed)
    log.log("logging cache for fibonacci: " + json.dumps(cache))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
