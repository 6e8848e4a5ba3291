"""Helpers that transform mappings and sequences value by value."""

import functools
from typing import Any, Callable, Dict, Hashable, List, Mapping, TypeVar, Union

_K = TypeVar('_K', bound=Hashable)
_V = TypeVar('_V')
_A = TypeVar('_A')


def map_object(function: Callable[[Any], Any]) -> Callable[..., Any]:
    """Lift `function` to work over a mapping, a sequence, or the arguments.

    Given a list or tuple, return one of the same type with `function`
    applied to each element. Given a mapping, return a dict with the same
    keys and `function` applied to each value. Otherwise `function` is
    applied to each argument and a list is returned; a leading None is
    skipped, so map_object(f)(None, 1, 2) == [f(1), f(2)].
    """

    def mapped(*args: Any) -> Union[Dict[Any, Any], List[Any], tuple]:
        if not args:
            return []
        first = args[0]
        if isinstance(first, list):
            return [function(element) for element in first]
        if isinstance(first, tuple):
            return tuple(function(element) for element in first)
        if isinstance(first, Mapping):
            return {key: function(value) for key, value in first.items()}
        values = args[1:] if first is None else args
        return [function(value) for value in values]

    return mapped


def filter_object(
    predicate: Callable[[_V, _K], object]
) -> Callable[[Mapping[_K, _V]], Dict[_K, _V]]:
    """predicate(value, key) -- keep the items for which it is truthy"""

    def filtered(mapping: Mapping[_K, _V]) -> Dict[_K, _V]:
        return {
            key: value
            for key, value in mapping.items()
            if predicate(value, key)
        }

    return filtered


def fold_object(
    function: Callable[[_A, _V, _K], _A], initial_value: _A
) -> Callable[[Mapping[_K, _V]], _A]:
    """function(accumulator, value, key) -- left fold over the items"""

    def folded(mapping: Mapping[_K, _V]) -> _A:
        return functools.reduce(
            lambda accumulator, item: function(accumulator, item[1], item[0]),
            mapping.items(),
            initial_value,
        )

    return folded
