"""Performance tests for shuntcalc.

These tests are marked as 'slow' and can be skipped with: pytest -m "not slow"
"""

import time

import pytest

from shuntcalc_pkg.api import evaluate


@pytest.mark.slow
class TestEvaluationPerformance:
    """Test evaluation performance."""

    def test_simple_expression_time(self):
        """Benchmark simple expression evaluation."""
        start = time.time()
        for _ in range(1000):
            evaluate("2+3*4-8/2")
        elapsed = time.time() - start
        assert elapsed < 1.0, f"Evaluation too slow: {elapsed}s"

    def test_long_expression_is_linear(self):
        """A long chain evaluates in reasonable time."""
        expr = "+".join(["1*2"] * 20000)
        start = time.time()
        result = evaluate(expr)
        elapsed = time.time() - start
        assert result.value == 40000.0
        assert elapsed < 2.0, f"Long expression too slow: {elapsed}s"
