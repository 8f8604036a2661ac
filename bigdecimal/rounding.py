"""Rounding modes and the increment decision for truncated quotients.

Division always truncates toward zero first. When the remainder is nonzero,
need_increment() decides whether the magnitude of the truncated quotient
must grow by one unit to honour the requested rounding mode.
"""

from enum import Enum

from bigdecimal.errors import RoundingRequiredError


class RoundingMode(str, Enum):
    """How to treat a discarded nonzero remainder."""

    UP = "up"  # away from zero
    DOWN = "down"  # toward zero
    CEILING = "ceiling"  # toward +infinity
    FLOOR = "floor"  # toward -infinity
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    HALF_EVEN = "half_even"
    UNNECESSARY = "unnecessary"  # exact results only


def need_increment(
    divisor: int,
    rounding_mode: RoundingMode,
    quotient_positive: bool,
    quotient: int,
    remainder: int,
) -> bool:
    """Decide whether a truncated quotient's magnitude must be incremented.

    Args:
        divisor: Divisor of the division (sign is ignored)
        rounding_mode: Requested rounding mode
        quotient_positive: True if the exact quotient is positive
        quotient: Quotient truncated toward zero
        remainder: Absolute value of the remainder, must be nonzero

    Returns:
        True if the quotient must move one unit away from zero

    Raises:
        RoundingRequiredError: If rounding_mode is UNNECESSARY
    """
    if rounding_mode is RoundingMode.UNNECESSARY:
        raise RoundingRequiredError("Rounding necessary")
    if rounding_mode is RoundingMode.UP:
        return True
    if rounding_mode is RoundingMode.DOWN:
        return False
    if rounding_mode is RoundingMode.CEILING:
        return quotient_positive
    if rounding_mode is RoundingMode.FLOOR:
        return not quotient_positive

    # Compare the discarded fraction against one half
    twice_remainder = 2 * remainder
    divisor_magnitude = abs(divisor)
    if twice_remainder < divisor_magnitude:
        return False
    if twice_remainder > divisor_magnitude:
        return True

    # Exactly half
    if rounding_mode is RoundingMode.HALF_DOWN:
        return False
    if rounding_mode is RoundingMode.HALF_UP:
        return True
    return quotient % 2 != 0
