"""Currying with support for asynchronous results.

`curry` turns a function of fixed arity into one that can be applied to its
positional arguments a few at a time::

    >>> add3 = curry(lambda a, b, c: a + b + c)
    >>> add3(1)(2)(3) == add3(1, 2)(3) == add3(1, 2, 3) == 6
    True

If calling the curried entry point produces an awaitable, the entry point
returns a new awaitable instead. When it resolves to a callable, that
callable is curried too, so it can keep being partially applied.
"""

import asyncio
import dataclasses
import functools
import inspect
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Generic,
    Optional,
    Tuple,
    TypeVar,
    Union,
)
from typing_extensions import assert_never

from katha.errors import (
    ArityError,
    format_bad_arity_error,
    format_no_signature_error,
)
from katha.logging import get_logger


_logger = get_logger(__name__)

_R = TypeVar('_R')

_COUNTED_PARAMETER_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclasses.dataclass(frozen=True)
class Immediate:
    value: object


@dataclasses.dataclass(frozen=True)
class Deferred:
    awaitable: Awaitable[object]


Outcome = Union[Immediate, Deferred]


def classify(result: object) -> Outcome:
    if inspect.isawaitable(result):
        return Deferred(result)
    return Immediate(result)


def arity_of(function: Callable[..., object]) -> int:
    """Count the positional parameters that `function` requires.

    Parameters with defaults, *args, **kwargs and keyword-only parameters are
    not counted.
    """
    if not callable(function):
        raise TypeError(f'Cannot curry a non-callable object: {function!r}')
    try:
        signature = inspect.signature(function)
    except (ValueError, TypeError) as e:
        raise ArityError(function, format_no_signature_error(function)) from e
    return sum(
        1
        for parameter in signature.parameters.values()
        if parameter.kind in _COUNTED_PARAMETER_KINDS
        and parameter.default is inspect.Parameter.empty
    )


class Partial(Generic[_R]):
    """A partial application waiting for more positional arguments.

    Calling it never changes it: it either calls the target, or returns a new
    Partial holding the longer argument tuple.
    """

    __slots__ = ('_function', '_arity', '_args', '_kwargs')

    def __init__(
        self,
        function: Callable[..., _R],
        arity: int,
        args: Tuple[object, ...],
        kwargs: Dict[str, object],
    ) -> None:
        self._function = function
        self._arity = arity
        self._args = args
        self._kwargs = kwargs

    @property
    def args(self) -> Tuple[object, ...]:
        return self._args

    @property
    def keywords(self) -> Dict[str, object]:
        return dict(self._kwargs)

    @property
    def missing(self) -> int:
        """How many more positional arguments the target needs."""
        return self._arity - len(self._args)

    def __call__(
        self, *more_args: object, **more_kwargs: object
    ) -> Union['Partial[_R]', _R]:
        return _accumulate(
            self._function,
            self._arity,
            self._args + more_args,
            {**self._kwargs, **more_kwargs},
        )

    def __repr__(self) -> str:
        return (
            f'Partial({self._function!r}, args={self._args!r}, '
            f'kwargs={self._kwargs!r}, missing={self.missing})'
        )


def _accumulate(
    function: Callable[..., _R],
    arity: int,
    args: Tuple[object, ...],
    kwargs: Dict[str, object],
) -> Union[Partial[_R], _R]:
    if len(args) >= arity:
        _logger.debug(
            'saturated {!r} with {} positional arguments', function, len(args)
        )
        return function(*args, **kwargs)
    return Partial(function, arity, args, kwargs)


def curry(
    function: Callable[..., Any], arity: Optional[int] = None
) -> Callable[..., Any]:
    """Return a curried version of `function`.

    `arity` is the number of positional arguments that saturate `function`.
    When it is not given it is read from the signature of `function`, and
    ArityError is raised if there is no signature to read.

    Keyword arguments are passed through to `function` but do not count
    towards saturation.
    """
    if arity is None:
        arity = arity_of(function)
    elif isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
        raise ArityError(function, format_bad_arity_error(arity))
    _logger.debug('currying {!r} with arity {}', function, arity)

    @functools.wraps(function)
    def curried(*args: object, **kwargs: object) -> Any:
        outcome = classify(_accumulate(function, arity, args, kwargs))
        if isinstance(outcome, Deferred):
            return _curry_when_resolved(outcome.awaitable)
        elif isinstance(outcome, Immediate):
            # A callable that is returned directly is deliberately not
            # curried again; only callables that arrive through an awaitable
            # are.
            return outcome.value
        else:
            assert_never(outcome)

    return curried


def _curry_if_callable(value: object) -> object:
    if not callable(value):
        return value
    try:
        curried = curry(value)
    except ArityError:
        _logger.debug('{!r} has no signature; returning it uncurried', value)
        return value
    _logger.debug('curried {!r} resolved from an awaitable', value)
    return curried


def _curry_when_resolved(awaitable: Awaitable[object]) -> Awaitable[object]:
    if asyncio.isfuture(awaitable):
        return _chain_future(awaitable)
    return _await_and_curry(awaitable)


async def _await_and_curry(awaitable: Awaitable[object]) -> object:
    return _curry_if_callable(await awaitable)


def _chain_future(
    source: 'asyncio.Future[object]',
) -> 'asyncio.Future[object]':
    """Return a future on the same loop as `source` that resolves to the
    curried result of `source`.

    Cancelling the returned future cancels `source`. Cancellation and
    exceptions of `source` are copied to the returned future.
    """
    destination: asyncio.Future[object] = source.get_loop().create_future()

    def copy_outcome(source: 'asyncio.Future[object]') -> None:
        if destination.done():
            return
        if source.cancelled():
            destination.cancel()
            return
        exception = source.exception()
        if exception is not None:
            destination.set_exception(exception)
            return
        destination.set_result(_curry_if_callable(source.result()))

    def propagate_cancellation(destination: 'asyncio.Future[object]') -> None:
        if destination.cancelled():
            source.cancel()

    source.add_done_callback(copy_outcome)
    destination.add_done_callback(propagate_cancellation)
    return destination
