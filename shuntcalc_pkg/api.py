"""Public API for shuntcalc - returns structured objects without side effects."""

from __future__ import annotations

from .evaluator import evaluate_expression
from .parser import format_number, tokenize
from .types import EvalResult, EvaluationError


def evaluate(expression: str) -> EvalResult:
    """Evaluate an arithmetic expression.

    Args:
        expression: Expression string using digits, '.', and + - * /

    Returns:
        EvalResult with the float value on success, or the error kind and
        message on failure

    Example:
        >>> from shuntcalc_pkg.api import evaluate
        >>> evaluate("2+3*4").value
        14.0
        >>> evaluate("5/0").error_kind
        <ErrorKind.DIVIDE_BY_ZERO: 'DIVIDE_BY_ZERO'>
    """
    try:
        value = evaluate_expression(expression)
    except EvaluationError as e:
        return EvalResult(ok=False, error_kind=e.kind, error=str(e))
    return EvalResult(ok=True, value=value, result=format_number(value))


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Check that every numeric literal in ``expression`` parses.

    Only the tokenizer runs; operator structure is not checked.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from shuntcalc_pkg.api import validate_expression
        >>> validate_expression("1.5+2")
        (True, None)
        >>> validate_expression("1..2")
        (False, "Malformed number: '1..2'")
    """
    try:
        for _ in tokenize(expression):
            pass
    except EvaluationError as e:
        return False, str(e)
    return True, None
