from __future__ import annotations

import argparse
import json
from typing import Any

from . import config
from .api import evaluate
from .logging_config import get_logger, setup_logging
from .session import CalculatorSession
from .types import EvalResult

logger = get_logger("cli")


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running shuntcalc health check...")
    print("-" * 50)

    try:
        import numpy

        print(f"[OK] NumPy {numpy.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] NumPy import failed: {e}")
        print("  To install: pip install numpy")
        checks_failed += 1

    try:
        result = evaluate("2+3*4")
        if result.ok and result.value == 14:
            print("[OK] Basic evaluation works")
            checks_passed += 1
        else:
            print(f"[FAIL] Basic evaluation failed: expected 14, got {result}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Evaluation check failed: {e}")
        checks_failed += 1

    try:
        result = evaluate("5/0")
        if not result.ok and result.error_kind is not None:
            print(f"[OK] Division by zero reported as {result.error_kind.value}")
            checks_passed += 1
        else:
            print(f"[FAIL] Division by zero not detected: {result}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Division check failed: {e}")
        checks_failed += 1

    try:
        session = CalculatorSession()
        for key in "2+3=*2=":
            session.press(key)
        if session.display == "10":
            print("[OK] Keypad session chaining works")
            checks_passed += 1
        else:
            print(f"[FAIL] Keypad session check failed: display {session.display!r}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Keypad session check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(res: EvalResult, output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Evaluation result
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(
            json.dumps(res.to_dict(), indent=2, ensure_ascii=False, allow_nan=False)
        )
        return
    if not res.ok:
        print("Error:", res.error)
        return
    print(res.result)


def replay_keys(keys: str, output_format: str = "human") -> int:
    """Feed each character of ``keys`` to a keypad session and print the display."""
    session = CalculatorSession()
    for key in keys:
        session.press(key)

    if output_format == "json":
        payload: dict[str, Any] = {
            "display": session.display,
            "expression": session.expression,
            "last_result": (
                session.last_result.to_dict() if session.last_result else None
            ),
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False, allow_nan=False))
    else:
        print(session.display)

    if session.last_result is not None and not session.last_result.ok:
        return 1
    return 0


def print_help_text() -> None:
    print(
        """shuntcalc - four-function arithmetic with operator precedence

Enter an expression such as 2+3*4 or 2.5*2+1 and press Enter.
Supported: digits, '.', and the operators + - * /
Other characters (spaces, letters, parentheses) are ignored.

Commands:
  help                          Show this help
  health                        Run health check
  quit, exit                    Leave the calculator
"""
    )


def repl_loop(output_format: str = "human") -> None:
    """Read expressions line by line and print their values until EOF or quit."""
    print(f"shuntcalc {config.VERSION}. Type 'help' for help, 'quit' to exit.")
    while True:
        try:
            raw = input(">>> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        line = raw.strip()
        if not line:
            continue
        cmd = line.lower()
        if cmd in ("quit", "exit"):
            break
        if cmd == "help":
            print_help_text()
            continue
        if cmd in ("health", "healthcheck", "health-check"):
            _health_check()
            continue

        res = evaluate(line)
        if not res.ok:
            logger.info("Evaluation of %r failed: %s", line, res.error)
        print_result_pretty(res, output_format=output_format)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the shuntcalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="shuntcalc")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "-k",
        "--keys",
        type=str,
        help="Replay keypad presses ('=' evaluates, 'C' clears) and print the display",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=config.LOG_LEVEL.upper(),
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    if args.precision and args.precision > 0:
        config.OUTPUT_PRECISION = int(args.precision)

    if args.version:
        print(config.VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.keys is not None:
        return replay_keys(args.keys, output_format=args.format)
    if args.eval_expr is not None:
        res = evaluate(args.eval_expr)
        print_result_pretty(res, output_format=args.format)
        return 0 if res.ok else 1

    repl_loop(output_format=args.format)
    return 0


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m shuntcalc_pkg.cli"""
    import sys

    sys.exit(main_entry())
