"""
Function composition helpers shared by the components.

compose() applies right-to-left, pipe() left-to-right; both return
identity when called without functions.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce
from typing import Any, TypeVar

T = TypeVar("T")


def identity(value: T) -> T:
    return value


def _and_then(first: Callable[[Any], Any], second: Callable[[Any], Any]) -> Callable[[Any], Any]:
    return lambda value: second(first(value))


def pipe(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Chain functions left to right.

    pipe(f, g)(x) == g(f(x))
    """
    return reduce(_and_then, functions, identity)


def compose(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Chain functions right to left.

    compose(f, g)(x) == f(g(x))
    """
    return pipe(*reversed(functions))
