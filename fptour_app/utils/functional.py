"""Function application and composition helpers."""

from functools import reduce
from typing import Any, Callable


def pipe(value: Any, *functions: Callable[[Any], Any]) -> Any:
    """
    Feed a value through functions left to right.

    pipe(x, f, g) == g(f(x))
    """
    return reduce(lambda acc, fn: fn(acc), functions, value)


def compose(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Build a single function applying the given functions left to right.

    compose(f, g)(x) == g(f(x)); with no functions it is the identity.
    """
    def composed(value: Any) -> Any:
        return pipe(value, *functions)

    composed.__name__ = " >> ".join(getattr(fn, "__name__", repr(fn)) for fn in functions) or "identity"
    return composed
