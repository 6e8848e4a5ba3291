import inspect
import logging
import os
import sys
from typing import Callable, Dict, List, Optional, TextIO

from katha.logging.json import JSONFormatter


LEVEL_ENVIRONMENT_VARIABLE = 'KATHA_LOG_LEVEL'
FORMAT_ENVIRONMENT_VARIABLE = 'KATHA_LOG_FORMAT'

_TEXT_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class KathaLogger:
    """Wraps a logging.Logger so that it's easy to use str.format syntax.

    Formatting is delayed until a handler actually emits the record, and the
    caller's stack frame is only looked up when the level is enabled, since
    the currying engine logs on every saturated call.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def debug(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            caller = inspect.stack(0)[1]
            _log(self._logger.debug, format_string, caller, args, kwargs)

    def info(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if self._logger.isEnabledFor(logging.INFO):
            caller = inspect.stack(0)[1]
            _log(self._logger.info, format_string, caller, args, kwargs)

    def warning(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if self._logger.isEnabledFor(logging.WARNING):
            caller = inspect.stack(0)[1]
            _log(self._logger.warning, format_string, caller, args, kwargs)

    def error(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if self._logger.isEnabledFor(logging.ERROR):
            caller = inspect.stack(0)[1]
            _log(self._logger.error, format_string, caller, args, kwargs)


# katha is silent unless the application configures logging
logging.getLogger('katha').addHandler(logging.NullHandler())


def get_logger(name: str) -> KathaLogger:
    """Return the KathaLogger for a katha module."""
    return KathaLogger(logging.getLogger(name))


_configured_handler: Optional[logging.Handler] = None


def configure(
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
    json_format: Optional[bool] = None,
) -> logging.Handler:
    """Send katha's logs to a stream.

    `level` falls back to $KATHA_LOG_LEVEL and then WARNING. `json_format`
    falls back to whether $KATHA_LOG_FORMAT is 'json'. Calling this again
    replaces the handler installed by the previous call.
    """
    global _configured_handler

    if level is None:
        level = os.environ.get(LEVEL_ENVIRONMENT_VARIABLE, 'WARNING')
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f'unknown log level {level!r}')
    if json_format is None:
        json_format = (
            os.environ.get(FORMAT_ENVIRONMENT_VARIABLE, '').lower() == 'json'
        )

    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))

    package_logger = logging.getLogger('katha')
    if _configured_handler is not None:
        package_logger.removeHandler(_configured_handler)
    package_logger.addHandler(handler)
    package_logger.setLevel(numeric_level)
    _configured_handler = handler
    return handler


def _log(
    logging_method: Callable,
    format_string: str,
    caller: inspect.FrameInfo,
    args: List[object],
    kwargs: Dict[str, object],
) -> None:
    exc_info = None
    if 'exc_info' in kwargs:
        exc_info = kwargs['exc_info']
        del kwargs['exc_info']
    logging_method(
        _DelayedFormat(format_string, args, kwargs),
        exc_info=exc_info,
        extra={'caller': caller},
    )


class _DelayedFormat:
    def __init__(
        self, format_string: str, args: List[object], kwargs: Dict[str, object]
    ) -> None:
        self._format_string, self._args, self._kwargs = (
            format_string,
            args,
            kwargs,
        )

    def __str__(self) -> str:
        return self._format_string.format(*self._args, **self._kwargs)
