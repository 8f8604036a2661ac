"""Tests for rounding modes.

Each case rescales a literal to scale 0 so the truncated quotient and the
remainder are easy to read off the input.
"""

import pytest

from bigdecimal import RoundingMode, RoundingRequiredError
from bigdecimal.rounding import need_increment
from tests.helpers import d

# Rows: input, then expected result for
# UP, DOWN, CEILING, FLOOR, HALF_UP, HALF_DOWN, HALF_EVEN
ROUNDING_TABLE = [
    ("5.5", 6, 5, 6, 5, 6, 5, 6),
    ("2.5", 3, 2, 3, 2, 3, 2, 2),
    ("1.6", 2, 1, 2, 1, 2, 2, 2),
    ("1.1", 2, 1, 2, 1, 1, 1, 1),
    ("-1.1", -2, -1, -1, -2, -1, -1, -1),
    ("-1.6", -2, -1, -1, -2, -2, -2, -2),
    ("-2.5", -3, -2, -2, -3, -3, -2, -2),
    ("-5.5", -6, -5, -5, -6, -6, -5, -6),
]

MODES = [
    RoundingMode.UP,
    RoundingMode.DOWN,
    RoundingMode.CEILING,
    RoundingMode.FLOOR,
    RoundingMode.HALF_UP,
    RoundingMode.HALF_DOWN,
    RoundingMode.HALF_EVEN,
]


@pytest.mark.parametrize(
    "text,mode,expected",
    [(row[0], mode, row[i + 1]) for row in ROUNDING_TABLE for i, mode in enumerate(MODES)],
)
def test_rounding_table(text, mode, expected):
    """Every mode rounds the classic examples to the expected integer."""
    result = d(text).with_scale(0, mode)
    assert result.scale == 0
    assert result.unscaled == expected


class TestHalfBoundary:
    """Exact-half behaviour."""

    def test_half_even_rounds_to_even_neighbour(self):
        """HALF_EVEN picks the even neighbour."""
        assert d("2.5").with_scale(0, RoundingMode.HALF_EVEN) == 2
        assert d("3.5").with_scale(0, RoundingMode.HALF_EVEN) == 4

    def test_half_up_rounds_away_from_zero(self):
        """HALF_UP moves away from zero on a tie."""
        assert d("2.5").with_scale(0, RoundingMode.HALF_UP) == 3
        assert d("3.5").with_scale(0, RoundingMode.HALF_UP) == 4

    def test_just_above_half(self):
        """Anything above half rounds up in every HALF mode."""
        for mode in (RoundingMode.HALF_UP, RoundingMode.HALF_DOWN, RoundingMode.HALF_EVEN):
            assert d("2.5000001").with_scale(0, mode) == 3

    def test_just_below_half(self):
        """Anything below half rounds down in every HALF mode."""
        for mode in (RoundingMode.HALF_UP, RoundingMode.HALF_DOWN, RoundingMode.HALF_EVEN):
            assert d("2.4999999").with_scale(0, mode) == 2

    def test_mode_accepts_string_value(self):
        """Rounding modes can be given by value."""
        assert d("2.5").with_scale(0, "half_even") == 2


class TestUnnecessary:
    """UNNECESSARY only allows exact results."""

    def test_exact_passes(self):
        """Exact rescaling succeeds."""
        assert d("2.000").with_scale(0, RoundingMode.UNNECESSARY) == 2

    @pytest.mark.parametrize("text", ["2.5", "-0.1", "1.0001"])
    def test_inexact_raises(self, text):
        """Inexact rescaling raises RoundingRequiredError."""
        with pytest.raises(RoundingRequiredError):
            d(text).with_scale(0, RoundingMode.UNNECESSARY)

    def test_is_the_default(self):
        """with_scale defaults to UNNECESSARY."""
        with pytest.raises(RoundingRequiredError):
            d("1.5").with_scale(0)

    def test_is_arithmetic_error(self):
        """RoundingRequiredError is an ArithmeticError."""
        with pytest.raises(ArithmeticError):
            d("1.5").to_int()


class TestNeedIncrement:
    """Direct tests of the increment decision."""

    def test_half_compares_against_divisor_magnitude(self):
        """A negative divisor does not flip the half comparison."""
        # -7 / -2 = 3 remainder 1: exactly half
        assert need_increment(-2, RoundingMode.HALF_UP, True, 3, 1) is True
        assert need_increment(-2, RoundingMode.HALF_DOWN, True, 3, 1) is False
        assert need_increment(-2, RoundingMode.HALF_EVEN, True, 3, 1) is True

    def test_half_even_with_negative_odd_quotient(self):
        """Oddness is judged on magnitude for negative quotients."""
        assert need_increment(2, RoundingMode.HALF_EVEN, False, -3, 1) is True
        assert need_increment(2, RoundingMode.HALF_EVEN, False, -2, 1) is False

    def test_ceiling_and_floor_follow_sign(self):
        """CEILING and FLOOR depend on the quotient sign."""
        assert need_increment(3, RoundingMode.CEILING, True, 0, 1) is True
        assert need_increment(3, RoundingMode.CEILING, False, 0, 1) is False
        assert need_increment(3, RoundingMode.FLOOR, True, 0, 1) is False
        assert need_increment(3, RoundingMode.FLOOR, False, 0, 1) is True

    def test_unnecessary_raises(self):
        """UNNECESSARY raises instead of deciding."""
        with pytest.raises(RoundingRequiredError, match="Rounding necessary"):
            need_increment(3, RoundingMode.UNNECESSARY, True, 0, 1)

    @pytest.mark.parametrize("mode", MODES)
    def test_every_mode_decides(self, mode):
        """Every mode except UNNECESSARY returns a decision."""
        assert need_increment(2, mode, True, 2, 1) in (True, False)
