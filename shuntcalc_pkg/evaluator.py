"""Two-stack shunting-yard evaluation of tokenized expressions."""

from __future__ import annotations

import math
import operator
from typing import Callable, Iterable

from .parser import tokenize
from .types import (
    DivideByZeroError,
    InvalidOperatorError,
    MalformedExpressionError,
    NumberOverflowError,
    NumberToken,
    Token,
)

PRECEDENCE = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}

_BIN_OPS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def precedence(op: str) -> int:
    """Return the binding strength of ``op`` (higher binds tighter)."""
    try:
        return PRECEDENCE[op]
    except KeyError:
        raise InvalidOperatorError(op) from None


def _pop_operand(values: list[float]) -> float:
    if not values:
        raise MalformedExpressionError("Missing operand")
    return values.pop()


def apply_operator(values: list[float], op: str) -> None:
    """Pop two operands, apply ``op`` and push the result.

    The right-hand operand is popped first, so ``a`` is the value pushed
    earlier.

    Raises:
        InvalidOperatorError: If ``op`` is not one of ``+ - * /``
        MalformedExpressionError: If fewer than two operands are available
        DivideByZeroError: If ``op`` is ``/`` and the divisor is exactly zero
        NumberOverflowError: If the result is not a finite float
    """
    func = _BIN_OPS.get(op)
    if func is None:
        raise InvalidOperatorError(op)
    b = _pop_operand(values)
    a = _pop_operand(values)
    if op == "/" and b == 0:
        raise DivideByZeroError()
    result = func(a, b)
    if not math.isfinite(result):
        raise NumberOverflowError(a, op, b)
    values.append(result)


def evaluate_tokens(tokens: Iterable[Token]) -> float:
    """Evaluate a token stream with an operand stack and an operator stack.

    Pending operators are kept non-increasing in precedence from bottom to
    top; equal precedence pops before pushing, which gives left associativity.

    Raises:
        EvaluationError: Any subclass, see ``apply_operator`` and ``tokenize``
    """
    values: list[float] = []
    operators: list[str] = []

    for token in tokens:
        if isinstance(token, NumberToken):
            values.append(token.value)
            continue
        op = token.symbol
        while operators and precedence(operators[-1]) >= precedence(op):
            apply_operator(values, operators.pop())
        operators.append(op)

    while operators:
        apply_operator(values, operators.pop())

    if not values:
        raise MalformedExpressionError("Expression has no operands")
    if len(values) > 1:
        raise MalformedExpressionError(
            f"Expression leaves {len(values)} operands without operators"
        )
    return values[0]


def evaluate_expression(expression: str) -> float:
    """Tokenize and evaluate ``expression``, raising on failure.

    Args:
        expression: Arithmetic expression (e.g., "2+3*4")

    Returns:
        The float result

    Raises:
        EvaluationError: Any subclass describing why evaluation failed
    """
    return evaluate_tokens(tokenize(expression))
