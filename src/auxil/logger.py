"""
Logger factory for debugging output.

A Logger renders values to the `auxil.log` logging channel, or appends them
to a file through a writer. A custom log function can replace both, e.g. to
log to a database or a web page.
"""
import json
import logging
import math
import numbers
import pprint
from datetime import datetime, timezone
from typing import Any, NamedTuple, Optional

from auxil.config import LoggerConfig, LoggerSettings, parse_options

logger = logging.getLogger(__name__)

# Channel used by base_log_fn for console-style output.
output = logging.getLogger("auxil.log")


class LogInfos(NamedTuple):
    """Parameters handed to every log function."""

    time: bool
    id: Any
    inspector: Any
    writer: Any
    file_path: Optional[str]


def append_file(path, text):
    """Default writer: append text to the file at path."""
    with open(path, "a", encoding="utf-8") as f:
        f.write(text)


def render(value, depth):
    if depth > 1:
        return json.dumps(value, default=str)
    return str(value)


def base_log_fn(value, depth, infos):
    """
    Log `value` following `infos`. If a writer and a file path are set, the
    value is appended to the file: as JSON when depth is above 1, as `str()`
    otherwise. Without them the value goes to the `auxil.log` logger,
    rendered by the inspector if there is one. Otherwise strings are logged
    as they are and other values through `pprint` (a depth of 0 or less
    means no depth limit).
    """
    time = ""
    id = ""
    if infos.time:
        time = "logTime: " + datetime.now(timezone.utc).isoformat()
    if infos.id:
        id = "env ID: " + infos.id

    if infos.writer and infos.file_path:
        infos.writer(infos.file_path,
                     "{}\n{}\n{}\n".format(time, id, render(value, depth)))
        return

    if time:
        output.info(time)
    if id:
        output.info(id)
    if infos.inspector:
        output.info(infos.inspector(value, depth))
    elif isinstance(value, str):
        output.info(value)
    else:
        output.info(pprint.pformat(value, depth=depth if depth > 0 else None))


class Logger(object):
    def __init__(self, config=None, **options):
        """
        Build a logger from a LoggerConfig or a dict of options, or from
        keyword options:

        store_time: prefix every entry with the current time
        id: string identifying the process or logger
        inspector: function (value, depth) -> str used to render values
        writer: function (path, text) used to append to file_path
        file_path: file to log to; defaults writer to `append_file`
        log_fn: function (value, depth, infos) replacing base_log_fn
        default_depth: depth used when `log` is called without one
        """
        if config is None:
            config = parse_options(LoggerConfig, options)
        elif options or not isinstance(config, LoggerConfig):
            config = parse_options(LoggerConfig, dict(config, **options))
        self.config = config
        # When False no logging will happen.
        self.debug = True
        self.default_depth = config.default_depth
        writer = config.writer
        if config.file_path and writer is None:
            writer = append_file
        self.infos = LogInfos(
            time=config.store_time,
            id=config.id,
            inspector=config.inspector,
            writer=writer,
            file_path=config.file_path,
        )
        self.log_fn = config.log_fn or base_log_fn

    @classmethod
    def from_env(cls, **options):
        """Build a logger from AUXIL_LOG_* environment variables."""
        settings = parse_options(LoggerSettings, {})
        logger.debug("Logger settings from environment: %s", settings)
        env_options = settings.model_dump(exclude_none=True)
        env_options.update(options)
        return cls(**env_options)

    def log(self, value, depth=None):
        """
        Log value. A positive int depth overrides the default depth.
        Returns whatever the log function returns, or False if debugging
        is switched off.
        """
        if not self.debug:
            return False
        if isinstance(depth, int) and not isinstance(depth, bool) and depth > 0:
            d = depth
        else:
            d = self.default_depth
        return self.log_fn(value, d, self.infos)

    def set_debug(self, value):
        self.debug = bool(value)

    def set_depth(self, depth):
        if (isinstance(depth, numbers.Real) and not isinstance(depth, bool)
                and math.isfinite(depth)):
            self.default_depth = int(depth)
        else:
            self.default_depth = 0
