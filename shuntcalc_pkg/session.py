"""Keypad session: builds an expression key by key and evaluates it.

The session owns all mutable calculator state (the accumulated expression,
the error indicator and the last result). Evaluation itself is delegated to
the stateless ``api.evaluate``.
"""

from __future__ import annotations

from . import config
from .api import evaluate
from .logging_config import get_logger
from .parser import is_operator
from .types import ErrorKind, EvalResult

logger = get_logger("session")


class CalculatorSession:
    """Accumulates keypad input and evaluates it on demand.

    Operation model:
        1. Digit, '.' and operator keys are appended to ``expression``
        2. An operator is rejected when the expression is empty or already
           ends in an operator
        3. '=' evaluates; on success the formatted result replaces the
           expression so computation can continue from it
        4. 'C' clears everything

    After a failed evaluation the expression is reset and ``display`` shows
    the error text until the next key.
    """

    def __init__(self):
        self.expression = ""
        self.error_text: str | None = None
        self.last_result: EvalResult | None = None

    def press(self, key: str) -> str:
        """Handle one key and return the resulting display text.

        Args:
            key: "=" to evaluate, "C" to clear, anything else is appended
        """
        if key == config.EVALUATE_KEY:
            self.evaluate()
        elif key == config.CLEAR_KEY:
            self.clear()
        else:
            self.append(key)
        return self.display

    def append(self, key: str) -> bool:
        """Append ``key`` to the expression.

        Returns:
            bool: False if the key was rejected (leading or doubled operator)
        """
        self.error_text = None
        if is_operator(key) and (
            not self.expression or is_operator(self.expression[-1])
        ):
            logger.debug("Rejected operator %r after %r", key, self.expression)
            return False
        self.expression += key
        return True

    def clear(self) -> None:
        """Reset the expression and any error indicator."""
        self.expression = ""
        self.error_text = None

    def evaluate(self) -> EvalResult:
        """Evaluate the accumulated expression.

        Returns:
            EvalResult from ``api.evaluate``; the session state is updated
            from it as a side effect
        """
        result = evaluate(self.expression)
        self.last_result = result
        if result.ok:
            logger.debug("Evaluated %r -> %s", self.expression, result.result)
            self.expression = result.result
            self.error_text = None
            return result

        logger.error(
            "Error evaluating expression %r: %s", self.expression, result.error
        )
        self.expression = ""
        if result.error_kind is ErrorKind.DIVIDE_BY_ZERO:
            self.error_text = config.DIVIDE_BY_ZERO_DISPLAY
        else:
            self.error_text = config.ERROR_DISPLAY
        return result

    @property
    def display(self) -> str:
        """Text to show on the calculator display."""
        if self.error_text is not None:
            return self.error_text
        return self.expression or config.EMPTY_DISPLAY
