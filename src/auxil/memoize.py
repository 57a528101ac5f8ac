"""
Implements memoization with an optional size limit and output cloning.

Entries are never evicted. Once a size limit is reached, the memoized
function stops caching for good and calls straight through for any
argument combination it has not seen yet.
"""
import logging
import threading
from contextlib import nullcontext
from enum import Enum
from functools import update_wrapper

from auxil.config import MemoizationConfig, parse_options
from auxil.store import ABSENT, CacheStore

logger = logging.getLogger(__name__)


class MemoState(str, Enum):
    CACHING = "caching"
    PASSTHROUGH = "passthrough"


class MemoCache(object):
    """
    Callable wrapper holding the cache for one memoized function.

    Attributes you may want to inspect:

    - `cache`: the backing mapping (the caller's own dict, if one was given)
    - `count`: entries inserted since construction
    - `caching`: False once the size limit has been reached
    - `state`: `MemoState.CACHING` or `MemoState.PASSTHROUGH`
    """

    def __init__(self, f, config=None):
        if not callable(f):
            raise TypeError(
                "memoize expects a callable, got {!r}".format(f))
        update_wrapper(self, f)
        self.config = config or MemoizationConfig()
        self.store = CacheStore(self.config.cache)
        self.cache = self.store.mapping
        self.limit = self.config.limit
        self.count = 0
        self.caching = True
        self._name = getattr(f, "__qualname__", None) or repr(f)
        # Re-entrant, so a memoized function may call itself.
        self._lock = threading.RLock() if self.config.threadsafe else nullcontext()

    @property
    def state(self):
        return MemoState.CACHING if self.caching else MemoState.PASSTHROUGH

    def _output(self, value):
        return self.config.clone_fn(value) if self.config.clone else value

    def __call__(self, *args, **kwargs):
        key = self.config.hash_fn(*args, **kwargs)
        with self._lock:
            value = self.store.lookup(key)
            if value is not ABSENT:
                logger.debug("%s: cache hit for %s", self._name, key)
                return self._output(value)
            if self.caching:
                logger.debug("%s: cache miss for %s", self._name, key)
                value = self.__wrapped__(*args, **kwargs)
                # Nested calls of a recursive function may have hit the limit.
                if not self.caching:
                    return value
                self.store.store(key, value)
                self.count += 1
                if self.limit is not None and self.count >= self.limit:
                    self.caching = False
                    logger.info(
                        "%s: cache limit of %g entries reached, "
                        "no longer caching new results", self._name, self.limit)
                return self._output(value)
        return self.__wrapped__(*args, **kwargs)

    def __get__(self, instance, owner=None):
        # Bind like a plain function so decorated methods get their instance.
        if instance is None:
            return self
        return BoundMemoCache(self, instance)

    def __repr__(self):
        return "<MemoCache {} {} entries={} state={}>".format(
            self._name, "limit={:g}".format(self.limit)
            if self.limit is not None else "unbounded",
            len(self.store), self.state.value)


class BoundMemoCache(object):
    """
    A MemoCache bound to an instance. Calls pass the instance as the first
    argument; `cache`, `count`, `state` and the rest come from the MemoCache.
    """

    def __init__(self, memo, instance):
        self.__func__ = memo
        self.__self__ = instance

    def __call__(self, *args, **kwargs):
        return self.__func__(self.__self__, *args, **kwargs)

    def __getattr__(self, name):
        return getattr(self.__func__, name)

    def __repr__(self):
        return "<bound {!r} of {!r}>".format(self.__func__, self.__self__)


def memoize(f=None, **options):
    """
    Memoize a function based on the arguments passed in. Example::

        @memoize
        def foo(x, y): return x + y

        foo(1, 2) # 3, computed
        foo(1, 2) # 3, from cache

    Options (all optional):

    - `hash_fn`: key function called with the same arguments as `f`.
      Defaults to `auxil.keys.json_key`. Use `auxil.keys.args_key` for
      hashable arguments that JSON cannot represent, such as `self` in
      decorated methods.
    - `cache`: mapping to use as the cache. It is shared with the caller by
      reference, so it may be pre-seeded and inspected.
    - `limit`: maximum number of entries to store. Once reached, new results
      are returned uncached. Non-numeric values mean no limit.
    - `clone`: return a copy of cached values so callers cannot mutate them.
    - `clone_fn`: the copy function, `auxil.clone.json_clone` by default.
    - `threadsafe`: serialize lookups and stores with a lock.

    With options, `memoize` works as a decorator factory::

        @memoize(limit=100, clone=True)
        def load(name): ...

    The returned MemoCache instance is a callable and exposes the cache, so
    you can inspect its memoized keys and values.

    Raises ConfigurationError on unknown or invalid options.
    """
    config = parse_options(MemoizationConfig, options)
    if f is None:
        def decorate(f):
            return MemoCache(f, config)
        return decorate
    return MemoCache(f, config)
