"""
Clone functions for memoize.

A cached value is stored and returned by reference. If the caller mutates a
returned object, it also mutates the cached one. Cloning hands every caller
an independent copy instead.
"""
import copy
import json

from auxil.exceptions import CloneError

def json_clone(value):
    """
    Clone by JSON round trip. Cheap and predictable for plain data
    (dicts, lists, strings, numbers, booleans, None). Tuples come back as
    lists and dict keys come back as strings.

    Raises CloneError for circular structures, functions and other values
    JSON cannot represent.
    """
    try:
        return json.loads(json.dumps(value))
    except (TypeError, ValueError) as e:
        raise CloneError("Cannot clone value: {}".format(e)) from e

def deep_clone(value):
    """
    Clone with `copy.deepcopy`. Keeps tuples, sets and custom objects and
    copes with circular structures.
    """
    return copy.deepcopy(value)
