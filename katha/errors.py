import builtins
from typing import Callable


class KathaError(Exception):
    """Base class of the errors raised by katha itself.

    Errors raised by the functions passed to katha are never wrapped in a
    KathaError; they reach the caller unchanged.
    """


class ArityError(KathaError, builtins.ValueError):
    def __init__(self, function: object, message: str) -> None:
        super().__init__(message)
        self.function = function

    def __repr__(self) -> str:
        return f'ArityError({self.function!r}, {str(self)!r})'


class InvalidFunctionFormatError(KathaError, builtins.TypeError):
    """A step given to thread_first is neither callable nor a sequence headed
    by a callable."""

    def __init__(self, step: object) -> None:
        super().__init__('Invalid function format')
        self.step = step


def format_no_signature_error(function: Callable) -> str:
    return (
        f'cannot determine the arity of {function!r}; pass it explicitly '
        'with curry(function, arity=...)'
    )


def format_bad_arity_error(arity: object) -> str:
    return f'arity must be a non-negative integer, got {arity!r}'
