"""
Type predicates and the lazy-value evaluator.

Element parameters and attributes may be given either as literals or as
zero-argument callables (e.g. bound to a slider). Elements resolve them
with evaluate() every time they recompute, never caching the result.
"""

from typing import Any, Callable, TypeVar, Union

import numpy as np

T = TypeVar("T")

Lazy = Union[T, Callable[[], T]]


def evaluate(value: Lazy[T]) -> T:
    """
    Resolve a possibly lazy value.

    Args:
        value: A literal, or a zero-argument callable producing the value

    Returns:
        value() if value is callable, otherwise value itself
    """
    if callable(value):
        return value()
    return value


def is_array(value: Any) -> bool:
    """True for list, tuple and one-dimensional numpy arrays."""
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    return isinstance(value, (list, tuple))


def is_function(value: Any) -> bool:
    return callable(value)


def is_number(value: Any) -> bool:
    """True for real numbers, excluding bool."""
    return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, (bool, np.bool_))


def type_name(value: Any) -> str:
    """Short type name used in error messages."""
    return type(value).__name__
