"""Centralized configuration for shuntcalc.

This module defines:
- Output precision for formatting results
- Display strings used by the keypad session
- Default logging level
- The operator and numeric character sets recognized by the tokenizer

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with SHUNTCALC_)
"""

import importlib.metadata
import os
import string

try:
    VERSION = importlib.metadata.version("shuntcalc")
except importlib.metadata.PackageNotFoundError:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Significant digits kept when a result is turned back into text
OUTPUT_PRECISION = int(os.getenv("SHUNTCALC_OUTPUT_PRECISION", "15"))

# Keypad session display strings
EMPTY_DISPLAY = os.getenv("SHUNTCALC_EMPTY_DISPLAY", "0")
ERROR_DISPLAY = os.getenv("SHUNTCALC_ERROR_DISPLAY", "Error")
DIVIDE_BY_ZERO_DISPLAY = os.getenv(
    "SHUNTCALC_DIVIDE_BY_ZERO_DISPLAY", "Error: Divide by Zero"
)

LOG_LEVEL = os.getenv("SHUNTCALC_LOG_LEVEL", "WARNING")

OPERATORS = "+-*/"
NUMBER_CHARS = frozenset(string.digits + ".")

# Keypad commands
EVALUATE_KEY = "="
CLEAR_KEY = "C"
