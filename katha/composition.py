"""Combinators for chaining functions together."""

import functools
import inspect
from typing import Any, Awaitable, Callable, Sequence, TypeVar

from katha.errors import InvalidFunctionFormatError
from katha.logging import get_logger


_logger = get_logger(__name__)

_T = TypeVar('_T')


def identity(x: _T) -> _T:
    return x


def compose(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions from right to left.

    compose(f, g)(x) == f(g(x)), and compose()(x) == x.
    """

    def composed(initial_value: Any) -> Any:
        return functools.reduce(
            lambda value, function: function(value),
            reversed(functions),
            initial_value,
        )

    return composed


def pipe(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Apply functions from left to right.

    The pipeline stays synchronous until some step produces an awaitable.
    From then on the rest of the steps run in a coroutine that awaits each
    awaitable before passing its value on, and that coroutine is returned.
    """

    def piped(initial_value: Any) -> Any:
        value = initial_value
        for index, function in enumerate(functions):
            if inspect.isawaitable(value):
                _logger.debug(
                    'pipe continues asynchronously before step {}', index
                )
                return _finish_pipe(value, functions[index:])
            value = function(value)
        return value

    return piped


async def _finish_pipe(
    pending: Awaitable[Any], functions: Sequence[Callable[[Any], Any]]
) -> Any:
    value = await pending
    for function in functions:
        value = function(value)
        if inspect.isawaitable(value):
            value = await value
    return value


def thread_first(value: Any, *steps: Any) -> Any:
    """Thread a value through steps, passing it as the first argument.

    A step is either a callable, or a list or tuple whose first element is a
    callable and whose remaining elements are extra arguments:

        >>> thread_first(2, [lambda x, y: x + y, 2], [lambda x, y: x * y, 3])
        12
    """
    for step in steps:
        if callable(step):
            value = step(value)
        elif isinstance(step, (list, tuple)) and step and callable(step[0]):
            function, *args = step
            value = function(value, *args)
        else:
            raise InvalidFunctionFormatError(step)
    return value


def compose_predicates(
    *predicates: Callable[[_T], object]
) -> Callable[[_T], bool]:
    """Return a predicate that holds when all of `predicates` hold."""

    def composed(value: _T) -> bool:
        return all(predicate(value) for predicate in predicates)

    return composed
