"""Tests for the two-stack evaluator and operator application."""

import pytest

from shuntcalc_pkg.evaluator import (
    PRECEDENCE,
    apply_operator,
    evaluate_expression,
    evaluate_tokens,
    precedence,
)
from shuntcalc_pkg.types import (
    DivideByZeroError,
    ErrorKind,
    InvalidOperatorError,
    MalformedExpressionError,
    MalformedNumberError,
    NumberOverflowError,
    NumberToken,
    OperatorToken,
)


class TestPrecedence:
    """Test precedence table."""

    def test_levels(self):
        assert precedence("+") == precedence("-") == 1
        assert precedence("*") == precedence("/") == 2

    def test_table_covers_all_operators(self):
        assert set(PRECEDENCE) == set("+-*/")

    def test_unknown_operator(self):
        with pytest.raises(InvalidOperatorError):
            precedence("^")


class TestApplyOperator:
    """Test applying one operator to the operand stack."""

    @pytest.mark.parametrize(
        "op,expected",
        [("+", 10.0), ("-", 6.0), ("*", 16.0), ("/", 4.0)],
    )
    def test_left_operand_is_pushed_first(self, op, expected):
        values = [8.0, 2.0]
        apply_operator(values, op)
        assert values == [expected]

    def test_only_top_two_are_used(self):
        values = [1.0, 9.0, 3.0]
        apply_operator(values, "-")
        assert values == [1.0, 6.0]

    def test_divide_by_zero(self):
        values = [5.0, 0.0]
        with pytest.raises(DivideByZeroError):
            apply_operator(values, "/")

    def test_zero_numerator_is_fine(self):
        values = [0.0, 5.0]
        apply_operator(values, "/")
        assert values == [0.0]

    def test_invalid_operator(self):
        with pytest.raises(InvalidOperatorError) as exc_info:
            apply_operator([1.0, 2.0], "%")
        assert exc_info.value.symbol == "%"

    def test_non_finite_result(self):
        values = [1e308, 10.0]
        with pytest.raises(NumberOverflowError) as exc_info:
            apply_operator(values, "*")
        assert exc_info.value.kind is ErrorKind.MALFORMED_NUMBER

    def test_underflow(self):
        with pytest.raises(MalformedExpressionError):
            apply_operator([1.0], "+")
        with pytest.raises(MalformedExpressionError):
            apply_operator([], "*")


class TestEvaluateExpression:
    """Test full evaluation of expression strings."""

    @pytest.mark.parametrize(
        "expr,expected",
        [
            ("2+3*4", 14.0),
            ("2*3+4", 10.0),
            ("8-3-2", 3.0),
            ("64/4/2", 8.0),
            ("2.5*2+1", 6.0),
            ("2 + 3", 5.0),
            ("14", 14.0),
            ("1+2*3-4/2", 5.0),
            ("10-2*3-1", 3.0),
            ("2*3*4-5*6/3", 14.0),
            ("7/2", 3.5),
            ("0.1+0.2", 0.1 + 0.2),
            ("3-5", -2.0),
        ],
    )
    def test_values(self, expr, expected):
        assert evaluate_expression(expr) == pytest.approx(expected)

    def test_mixed_precedence_left_to_right(self):
        # 8/2*4 is (8/2)*4, not 8/(2*4)
        assert evaluate_expression("8/2*4") == 16.0
        # 8-2+4 is (8-2)+4, not 8-(2+4)
        assert evaluate_expression("8-2+4") == 10.0

    def test_divide_by_zero(self):
        with pytest.raises(DivideByZeroError):
            evaluate_expression("5/0")

    def test_divide_by_computed_zero(self):
        # Left to right: the division by zero happens before the multiply
        with pytest.raises(DivideByZeroError):
            evaluate_expression("5/0*3")

    def test_divide_by_zero_decimal(self):
        with pytest.raises(DivideByZeroError):
            evaluate_expression("1/0.0")

    def test_malformed_number(self):
        with pytest.raises(MalformedNumberError):
            evaluate_expression("1..2+3")

    @pytest.mark.parametrize("expr", ["", "   ", "abc", "+", "+-*/"])
    def test_no_operands(self, expr):
        with pytest.raises(MalformedExpressionError):
            evaluate_expression(expr)

    @pytest.mark.parametrize("expr", ["+2", "2+", "2++3", "2*/3", "*2"])
    def test_missing_operands(self, expr):
        with pytest.raises(MalformedExpressionError):
            evaluate_expression(expr)

    def test_leftover_operands(self):
        with pytest.raises(MalformedExpressionError):
            evaluate_expression("2 3")

    def test_ignored_characters(self):
        assert evaluate_expression("(2+3)*4") == 14.0


class TestEvaluateTokens:
    """Test evaluation from an explicit token stream."""

    def test_accepts_any_iterable(self):
        tokens = iter(
            [NumberToken(6.0), OperatorToken("/"), NumberToken(3.0)]
        )
        assert evaluate_tokens(tokens) == 2.0

    def test_single_number(self):
        assert evaluate_tokens([NumberToken(42.0)]) == 42.0

    def test_empty(self):
        with pytest.raises(MalformedExpressionError):
            evaluate_tokens([])

    def test_invalid_operator_token(self):
        tokens = [NumberToken(2.0), OperatorToken("^"), NumberToken(3.0)]
        with pytest.raises(InvalidOperatorError):
            evaluate_tokens(tokens)
