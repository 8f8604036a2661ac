"""Integer kernels behind BigDecimal arithmetic.

Every function here works on (unscaled, scale) pairs of plain Python ints
and returns such a pair, leaving construction of the value type to the
caller. A pair denotes unscaled * 10^-scale.

Python's // floors toward negative infinity. Decimal division is defined
in terms of truncation toward zero, so the division helpers below
truncate explicitly.
"""

from __future__ import annotations

from bigdecimal.errors import DivisionByZero
from bigdecimal.rounding import RoundingMode, need_increment

__all__ = [
    "add",
    "digits_of",
    "div_trunc",
    "divide",
    "divide_and_round",
    "int_from_digits",
    "pow10",
    "precision",
    "strip_zeros_for_scale",
]

# log10(2) as a 31-bit fixed-point fraction
LOG10_2_FIXED = 646456993
LOG10_2_SHIFT = 31

# Below the interpreter's default int/str conversion limit (4300 digits)
STR_CHUNK_DIGITS = 4000

_TEN_POWERS = tuple(10**i for i in range(32))


def pow10(n: int) -> int:
    """Return 10**n for n >= 0."""
    if n < len(_TEN_POWERS):
        return _TEN_POWERS[n]
    return 10**n


def int_from_digits(digits: str) -> int:
    """Convert an unsigned ASCII digit string of any length to int.

    int() refuses strings longer than sys.get_int_max_str_digits(), so long
    inputs are split and recombined.
    """
    if len(digits) <= STR_CHUNK_DIGITS:
        return int(digits)
    low_len = len(digits) // 2
    high = int_from_digits(digits[:-low_len])
    return high * pow10(low_len) + int_from_digits(digits[-low_len:])


def digits_of(magnitude: int) -> str:
    """Decimal digits of a non-negative int of any size (see int_from_digits)."""
    if magnitude < pow10(STR_CHUNK_DIGITS):
        return str(magnitude)
    low_len = precision(magnitude) // 2
    high, low = divmod(magnitude, pow10(low_len))
    return digits_of(high) + digits_of(low).rjust(low_len, "0")


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Examples:
        Python: -7 // 3 = -3 (rounds toward -inf)
        div_trunc(-7, 3) = -2 (truncates toward zero)

    Raises:
        DivisionByZero: If b is zero
    """
    if b == 0:
        raise DivisionByZero("Division by zero")

    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def add(unscaled_a: int, scale_a: int, unscaled_b: int, scale_b: int) -> tuple[int, int]:
    """Exact sum of two pairs at the larger of the two scales."""
    scale_diff = scale_a - scale_b
    if scale_diff == 0:
        return unscaled_a + unscaled_b, scale_a
    if scale_diff < 0:
        return unscaled_a * pow10(-scale_diff) + unscaled_b, scale_b
    return unscaled_a + unscaled_b * pow10(scale_diff), scale_a


def strip_zeros_for_scale(unscaled: int, scale: int, preferred_scale: int) -> tuple[int, int]:
    """Drop trailing zero digits, lowering scale but never below preferred_scale."""
    while abs(unscaled) >= 10 and scale > preferred_scale:
        if unscaled & 1:
            break
        if unscaled % 10 != 0:
            break
        unscaled = div_trunc(unscaled, 10)
        scale -= 1
    return unscaled, scale


def divide_and_round(
    dividend: int,
    divisor: int,
    scale: int,
    rounding_mode: RoundingMode,
    preferred_scale: int,
) -> tuple[int, int]:
    """Divide two integers and round the quotient to the given scale.

    The quotient of dividend / divisor is taken as the unscaled value at
    `scale`. An exact quotient is stripped of trailing zeros toward
    preferred_scale; an inexact one is rounded and left at `scale`.

    Args:
        dividend: Already scaled dividend
        divisor: Already scaled divisor, nonzero
        scale: Scale of the result
        rounding_mode: Applied only when the remainder is nonzero
        preferred_scale: Lowest scale an exact result may be stripped to

    Returns:
        (unscaled, scale) of the result

    Raises:
        DivisionByZero: If divisor is zero
        RoundingRequiredError: If inexact and rounding_mode is UNNECESSARY
    """
    quotient = div_trunc(dividend, divisor)
    remainder = abs(dividend - quotient * divisor)
    quotient_positive = (dividend >= 0) == (divisor >= 0)

    if remainder != 0:
        if need_increment(divisor, rounding_mode, quotient_positive, quotient, remainder):
            quotient += 1 if quotient_positive else -1
        return quotient, scale

    if preferred_scale != scale:
        return strip_zeros_for_scale(quotient, scale, preferred_scale)
    return quotient, scale


def divide(
    dividend: int,
    dividend_scale: int,
    divisor: int,
    divisor_scale: int,
    scale: int,
    rounding_mode: RoundingMode,
) -> tuple[int, int]:
    """Divide two pairs, producing a result at exactly `scale` (before stripping).

    Reduces the decimal division to one truncating integer division by
    raising whichever operand has too few digits for the target scale.

    Raises:
        DivisionByZero: If divisor is zero and dividend is not
        RoundingRequiredError: If inexact and rounding_mode is UNNECESSARY
    """
    if dividend == 0:
        return 0, scale
    if divisor == 0:
        raise DivisionByZero(
            f"Division by zero: {precision(dividend)}-digit dividend at scale {dividend_scale}"
        )

    if scale + divisor_scale > dividend_scale:
        raise_by = scale + divisor_scale - dividend_scale
        return divide_and_round(dividend * pow10(raise_by), divisor, scale, rounding_mode, scale)

    raise_by = dividend_scale - scale - divisor_scale
    return divide_and_round(dividend, divisor * pow10(raise_by), scale, rounding_mode, scale)


def precision(unscaled: int) -> int:
    """Number of decimal digits in |unscaled|; 1 for zero."""
    if unscaled == 0:
        return 1

    magnitude = abs(unscaled)
    estimate = ((magnitude.bit_length() + 1) * LOG10_2_FIXED) >> LOG10_2_SHIFT

    # estimate is d or d - 1 until the fixed-point constant drifts at very
    # large bit lengths
    while estimate > 1 and magnitude < pow10(estimate - 1):
        estimate -= 1
    while magnitude >= pow10(estimate):
        estimate += 1
    return estimate
