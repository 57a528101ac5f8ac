"""
Append-only cache store used by memoize.
"""

class _Absent(object):
    def __repr__(self):
        return "ABSENT"

# Returned by `CacheStore.lookup` for missing keys. Distinct from every
# storable value, including None, 0, "" and False.
ABSENT = _Absent()

class CacheStore:
    def __init__(self, mapping=None):
        """
        Given a mapping, this class will return a store which reads and
        writes through to it. The mapping is kept by reference, so the
        caller can pre-seed it and inspect it later. If no mapping is given,
        a new dict is used.

        Arguments:
        mapping: stateful object with a dict-key-like interface
        """
        self.mapping = {} if mapping is None else mapping

    def lookup(self, key, default=ABSENT):
        """
        Get the stored value for key, or `default` if there is none.
        A stored value is returned even if it is falsy.
        """
        if key in self.mapping:
            return self.mapping[key]
        return default

    def store(self, key, value):
        self.mapping[key] = value
        return self

    def __contains__(self, key):
        return key in self.mapping

    def __len__(self):
        return len(self.mapping)

    def __iter__(self):
        return iter(self.mapping)

    def __repr__(self):
        return "CacheStore({!r})".format(self.mapping)
