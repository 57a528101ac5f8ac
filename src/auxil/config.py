"""
Option models for memoize and Logger.

Both are validated once, when the memoized function or logger is built, so
a misspelled or mistyped option fails immediately rather than on first use.
Caller-supplied mappings and callables are typed `Any` so pydantic keeps
them by identity instead of copying them.
"""
import logging
import math
import numbers
import os
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from auxil.clone import json_clone
from auxil.exceptions import ConfigurationError
from auxil.keys import json_key

logger = logging.getLogger(__name__)


def _to_number(value):
    """Return value as a number, or None if it does not represent one."""
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        return None
    if math.isnan(value):
        return None
    return value


_DEFAULTS = {"hash_fn": json_key, "clone_fn": json_clone}


class MemoizationConfig(BaseModel):
    model_config = ConfigDict(
        extra="forbid", frozen=True, arbitrary_types_allowed=True
    )

    hash_fn: Any = Field(default=json_key)
    # Shared with the caller by reference. None means a fresh dict.
    cache: Any = None
    # None means unbounded.
    limit: Optional[float] = None
    clone: bool = False
    clone_fn: Any = Field(default=json_clone)
    threadsafe: bool = False

    @field_validator("hash_fn", "clone_fn", mode="before")
    @classmethod
    def _check_callable(cls, value, info):
        if value is None:
            return _DEFAULTS[info.field_name]
        if not callable(value):
            raise ValueError("{} must be callable".format(info.field_name))
        return value

    @field_validator("cache", mode="before")
    @classmethod
    def _check_mapping(cls, value):
        if value is None:
            return None
        for attr in ("keys", "__contains__", "__getitem__", "__setitem__"):
            if not hasattr(value, attr):
                raise ValueError(
                    "cache must be a mutable mapping, got {}".format(
                        type(value).__name__)
                )
        return value

    @field_validator("limit", mode="before")
    @classmethod
    def _coerce_limit(cls, value):
        if value is None:
            return None
        number = _to_number(value)
        if number is None:
            logger.warning(
                "Ignoring non-numeric cache limit %r, cache is unbounded", value
            )
            return None
        return abs(number)


class LoggerConfig(BaseModel):
    model_config = ConfigDict(
        extra="forbid", frozen=True, arbitrary_types_allowed=True
    )

    store_time: bool = False
    id: Any = False
    inspector: Any = None
    writer: Any = None
    file_path: Optional[str] = None
    log_fn: Any = None
    default_depth: int = 0

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return str(value) if value else False

    @field_validator("inspector", "writer", "log_fn", mode="before")
    @classmethod
    def _check_callable(cls, value, info):
        if value is not None and not callable(value):
            raise ValueError("{} must be callable".format(info.field_name))
        return value

    @field_validator("file_path", mode="before")
    @classmethod
    def _coerce_path(cls, value):
        return os.fspath(value) if value else None

    @field_validator("default_depth", mode="before")
    @classmethod
    def _coerce_depth(cls, value):
        number = _to_number(value)
        return int(number) if number is not None and not math.isinf(number) else 0


class LoggerSettings(BaseSettings):
    """Logger options read from AUXIL_LOG_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AUXIL_LOG_", case_sensitive=False
    )

    store_time: bool = False
    id: Optional[str] = None
    file_path: Optional[str] = None
    default_depth: int = 0


def parse_options(model, options):
    """
    Build `model` from a dict of options, turning pydantic's ValidationError
    into ConfigurationError.
    """
    try:
        return model(**options)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
