"""
Key functions for memoize.

A key function receives exactly the arguments of the memoized call and
returns a hashable value. Equal logical arguments must produce equal keys.
"""
import json

from auxil.exceptions import KeyDerivationError

def _dumps(value):
    return json.dumps(value, sort_keys=True, separators=(",", ":"))

def canonical(value, active=None):
    """
    Rewrite value so JSON keeps the distinctions Python makes. Dicts become
    `{"__dict__": [[key, value], ...]}` with pairs sorted by their JSON text,
    so `{1: "a"}` and `{"1": "a"}` differ and keys of mixed types sort.
    Tuples become lists.
    """
    if active is None:
        active = set()
    if not isinstance(value, (dict, list, tuple)):
        return value
    marker = id(value)
    if marker in active:
        raise ValueError("Circular reference detected")
    active.add(marker)
    try:
        if isinstance(value, dict):
            pairs = [[canonical(k, active), canonical(v, active)]
                     for k, v in value.items()]
            pairs.sort(key=lambda pair: _dumps(pair[0]))
            return {"__dict__": pairs}
        return [canonical(item, active) for item in value]
    finally:
        active.discard(marker)

def json_key(*args, **kwargs):
    """
    Given call arguments, generate a canonical JSON string key. Dict items
    are sorted, so `{"a": 1, "b": 2}` and `{"b": 2, "a": 1}` give the same
    key, while `{1: "a"}` and `{"1": "a"}` do not. Tuples and lists
    serialize the same way.

    Raises KeyDerivationError for arguments JSON cannot represent
    (circular structures, functions, arbitrary objects).
    """
    try:
        kwargs = {name: canonical(value) for name, value in kwargs.items()}
        return _dumps([canonical(args), kwargs])
    except (TypeError, ValueError) as e:
        raise KeyDerivationError(
            "Cannot derive a cache key from arguments: {}".format(e)) from e

def args_key(*args, **kwargs):
    """
    Key on the arguments themselves. Cheaper than `json_key`, but every
    argument has to be hashable.
    """
    return (args, frozenset(kwargs.items()))
