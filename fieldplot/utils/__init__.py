"""Shared helpers."""

from .type import Lazy, evaluate, is_array, is_function, is_number, type_name

__all__ = ["Lazy", "evaluate", "is_array", "is_function", "is_number", "type_name"]
