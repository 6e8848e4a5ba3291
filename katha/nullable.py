from typing import Callable, Optional, TypeVar, Union

_T = TypeVar('_T')
_L = TypeVar('_L')
_R = TypeVar('_R')


def maybe(
    function: Callable[[_T], _R]
) -> Callable[[Optional[_T]], Optional[_R]]:
    """Apply `function` unless the input is None, which is passed through."""

    def maybe_function(value: Optional[_T]) -> Optional[_R]:
        if value is None:
            return None
        return function(value)

    return maybe_function


def either(
    left: Callable[[], _L], right: Callable[[_T], _R]
) -> Callable[[Optional[_T]], Union[_L, _R]]:
    """Call left() on None and right(value) on anything else."""

    def either_function(value: Optional[_T]) -> Union[_L, _R]:
        if value is None:
            return left()
        return right(value)

    return either_function
