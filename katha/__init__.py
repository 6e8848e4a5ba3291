"""Small functional programming helpers: currying, composition and helpers
for mappings and nullable values."""

from katha.composition import (
    compose,
    compose_predicates,
    identity,
    pipe,
    thread_first,
)
from katha.currying import curry
from katha.errors import ArityError, InvalidFunctionFormatError, KathaError
from katha.nullable import either, maybe
from katha.objects import filter_object, fold_object, map_object

version = '0.1.0'

__all__ = [
    'ArityError',
    'InvalidFunctionFormatError',
    'KathaError',
    'compose',
    'compose_predicates',
    'curry',
    'either',
    'filter_object',
    'fold_object',
    'identity',
    'map_object',
    'maybe',
    'pipe',
    'thread_first',
    'version',
]
