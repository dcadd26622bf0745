"""Input scanning and result formatting module.

This module handles:
- Tokenizing raw expression strings into numbers and operators
- Formatting numeric results so they can be displayed and re-evaluated
"""

from __future__ import annotations

import math
from typing import Iterator

import numpy as np

from . import config
from .config import NUMBER_CHARS, OPERATORS
from .types import MalformedNumberError, NumberToken, OperatorToken, Token


def is_operator(char: str) -> bool:
    """Return True if ``char`` is one of the four binary operators."""
    return len(char) == 1 and char in OPERATORS


def parse_number(literal: str) -> float:
    """Parse a scanned numeric literal.

    Args:
        literal: Run of digits and dots (e.g., "2.5", ".5", "1..2")

    Returns:
        The float value of the literal

    Raises:
        MalformedNumberError: If the literal is not a valid float (e.g., "1..2", ".")
            or is too large to represent as a finite float
    """
    try:
        value = float(literal)
    except ValueError:
        raise MalformedNumberError(literal) from None
    if not math.isfinite(value):
        raise MalformedNumberError(literal)
    return value


def tokenize(expression: str) -> Iterator[Token]:
    """Scan ``expression`` left to right and yield tokens lazily.

    Runs of digits and dots become one NumberToken, each operator character
    becomes an OperatorToken, and every other character is skipped.

    Args:
        expression: Raw expression string (e.g., "2.5*2+1")

    Yields:
        NumberToken or OperatorToken in input order

    Raises:
        MalformedNumberError: When a numeric run cannot be parsed
    """
    i = 0
    length = len(expression)
    while i < length:
        char = expression[i]
        if char in NUMBER_CHARS:
            start = i
            while i < length and expression[i] in NUMBER_CHARS:
                i += 1
            yield NumberToken(parse_number(expression[start:i]))
            continue
        if is_operator(char):
            yield OperatorToken(char)
        i += 1


def format_number(val: float, precision: int | None = None) -> str:
    """Format a numeric value in positional notation.

    Exponent notation is never produced, so the returned string can be fed
    back to the tokenizer (e.g., 14.0 -> "14", 1e20 -> "100000000000000000000").

    Args:
        val: Numeric value to format
        precision: Maximum number of significant digits (default: config.OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    return np.format_float_positional(
        float(val),
        precision=int(precision),
        unique=True,
        fractional=False,
        trim="-",
    )
