"""shuntcalc package: tokenizer, shunting-yard evaluator, keypad session, and CLI."""

from .api import evaluate, validate_expression
from .session import CalculatorSession
from .types import ErrorKind, EvalResult

__all__ = [
    "evaluate",
    "validate_expression",
    "CalculatorSession",
    "ErrorKind",
    "EvalResult",
]
