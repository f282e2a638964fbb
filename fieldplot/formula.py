"""
Field component expressions.

Compiles textual or SymPy expressions in the variables x and y into plain
Python callables f(x, y) -> float, so a vector field can be written as

    board.create('vectorfield', [['sin(y)', 'cos(x)'], [-6, 25, 6], [-5, 20, 5]])

Compilation happens once when the field function is bound; sampling only
calls the compiled function.
"""

from __future__ import annotations

import re
from tokenize import TokenError
from typing import Any, Callable

import sympy as sp
from sympy.parsing.sympy_parser import (
    implicit_multiplication_application,
    parse_expr,
    standard_transformations,
)

from .core.errors import InvalidExpressionError
from .utils.type import is_number

_SYMPY_TRANSFORMATIONS = standard_transformations + (implicit_multiplication_application,)

X, Y = sp.symbols("x y")
VARIABLES = (X, Y)


def is_expression(value: Any) -> bool:
    """True for values compile_component() accepts."""
    return isinstance(value, (str, sp.Basic)) or is_number(value)


def parse_component(expression: Any) -> sp.Expr:
    """
    Parse one field component into a SymPy expression.

    Args:
        expression: String such as 'x^2 - sin(y)', a SymPy expression,
            or a number

    Returns:
        SymPy expression whose free symbols are a subset of {x, y}

    Raises:
        InvalidExpressionError: If the expression does not parse or uses
            other variables
    """
    if isinstance(expression, sp.Basic):
        expr = expression
    elif is_number(expression):
        expr = sp.Float(expression) if isinstance(expression, float) else sp.Integer(int(expression))
    elif isinstance(expression, str):
        # ^ means power only after an operand: 2^3, x^2, (x+1)^2
        processed = re.sub(r'([0-9a-zA-Z_\)\]])\s*\^', r'\1**', expression)
        local_dict = {'x': X, 'y': Y, 'e': sp.E, 'E': sp.E, 'pi': sp.pi, 'PI': sp.pi}
        try:
            expr = parse_expr(
                processed,
                transformations=_SYMPY_TRANSFORMATIONS,
                local_dict=local_dict,
            )
        except (SyntaxError, TokenError, TypeError, ValueError, sp.SympifyError) as e:
            raise InvalidExpressionError(expression, str(e) or type(e).__name__) from e
    else:
        raise InvalidExpressionError(expression, f"unsupported type {type(expression).__name__}")

    # "[x, y]" and "(x, y)" parse to Python containers; "x < 1" to a relation
    if not isinstance(expr, sp.Expr):
        raise InvalidExpressionError(expression, "not a scalar expression")

    unknown = expr.free_symbols - set(VARIABLES)
    if unknown:
        names = ", ".join(sorted(str(s) for s in unknown))
        raise InvalidExpressionError(expression, f"unknown variables: {names}")
    return expr


def compile_component(expression: Any) -> Callable[[float, float], float]:
    """Compile a field component to a function of (x, y)."""
    expr = parse_component(expression)
    return sp.lambdify(VARIABLES, expr, modules=['numpy', 'math'])


def as_component(value: Any) -> Callable[[float, float], Any]:
    """Return callables unchanged and compile everything else."""
    # sympy Symbols are callable (they build undefined functions)
    if callable(value) and not isinstance(value, sp.Basic):
        return value
    return compile_component(value)
