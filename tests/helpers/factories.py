"""Factory functions for creating test values.

Usage:
    from tests.helpers import d, pair

    assert pair(d("1.50")) == (150, 2)
"""

from bigdecimal import BigDecimal


def d(text: str) -> BigDecimal:
    """Parse a literal; shorthand for BigDecimal.parse."""
    return BigDecimal.parse(text)


def pair(value: BigDecimal) -> tuple[int, int]:
    """The (unscaled, scale) representation of a value."""
    return value.unscaled, value.scale
