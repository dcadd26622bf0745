"""Type definitions: tokens, error kinds, result dataclass and exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class TokenType(Enum):
    NUMBER = "number"
    OPERATOR = "operator"


@dataclass(frozen=True)
class NumberToken:
    """Numeric literal, already parsed to float."""

    value: float
    type: TokenType = TokenType.NUMBER


@dataclass(frozen=True)
class OperatorToken:
    """Single-character binary operator (one of ``+ - * /``)."""

    symbol: str
    type: TokenType = TokenType.OPERATOR


Token = Union[NumberToken, OperatorToken]


class ErrorKind(Enum):
    """Classification of evaluation failures."""

    MALFORMED_NUMBER = "MALFORMED_NUMBER"
    DIVIDE_BY_ZERO = "DIVIDE_BY_ZERO"
    MALFORMED_EXPRESSION = "MALFORMED_EXPRESSION"
    INVALID_OPERATOR = "INVALID_OPERATOR"


@dataclass
class EvalResult:
    """Result of evaluating an arithmetic expression.

    Exactly one of ``value`` and ``error_kind`` is set, depending on ``ok``.
    """

    ok: bool
    value: float | None = None
    result: str | None = None
    error_kind: ErrorKind | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.value is not None:
            result_dict["value"] = self.value
        if self.result is not None:
            result_dict["result"] = self.result
        if self.error_kind is not None:
            result_dict["error_kind"] = self.error_kind.value
        if self.error is not None:
            result_dict["error"] = self.error
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            kind = self.error_kind.value if self.error_kind else None
            return f"EvalResult(ok=False, error_kind={kind!r}, error={self.error!r})"
        parts = [f"ok={self.ok}", f"value={self.value!r}"]
        if self.result is not None:
            parts.append(f"result={self.result!r}")
        return f"EvalResult({', '.join(parts)})"


class EvaluationError(Exception):
    """Base class for failures raised while tokenizing or evaluating."""

    kind = ErrorKind.MALFORMED_EXPRESSION

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.kind.value
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class MalformedNumberError(EvaluationError):
    """Raised when a scanned numeric literal is not a valid float."""

    kind = ErrorKind.MALFORMED_NUMBER

    def __init__(self, literal: str):
        self.literal = literal
        super().__init__(f"Malformed number: {literal!r}")


class NumberOverflowError(MalformedNumberError):
    """Raised when an operation on finite operands leaves the float range."""

    def __init__(self, a: float, op: str, b: float):
        self.literal = f"{a!r} {op} {b!r}"
        EvaluationError.__init__(self, f"Result out of range: {self.literal}")


class DivideByZeroError(EvaluationError):
    """Raised when the right-hand operand of a division is exactly zero."""

    kind = ErrorKind.DIVIDE_BY_ZERO

    def __init__(self, message: str = "Cannot divide by zero."):
        super().__init__(message)


class MalformedExpressionError(EvaluationError):
    """Raised on operand stack underflow or leftover operands."""

    kind = ErrorKind.MALFORMED_EXPRESSION


class InvalidOperatorError(EvaluationError):
    """Raised when an unknown operator reaches operator application."""

    kind = ErrorKind.INVALID_OPERATOR

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Invalid operator: {symbol}")
