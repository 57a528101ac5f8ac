"""
Auxiliary routines: a logger factory, a switch-case alternative and
function memoizing.
"""
from auxil.case_of import CaseOf, case_of
from auxil.clone import deep_clone, json_clone
from auxil.exceptions import (
    AuxilError,
    CloneError,
    ConfigurationError,
    KeyDerivationError,
)
from auxil.keys import args_key, json_key
from auxil.logger import Logger
from auxil.memoize import MemoCache, MemoState, memoize
from auxil.store import ABSENT, CacheStore

__version__ = "1.0"

__all__ = [
    "ABSENT",
    "AuxilError",
    "CacheStore",
    "CaseOf",
    "CloneError",
    "ConfigurationError",
    "KeyDerivationError",
    "Logger",
    "MemoCache",
    "MemoState",
    "args_key",
    "case_of",
    "deep_clone",
    "get_version",
    "json_clone",
    "json_key",
    "memoize",
]


def get_version():
    return __version__
