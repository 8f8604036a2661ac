"""Text rendering for (unscaled, scale) pairs.

Two notations are produced:

- plain:      [-]digits[.digits]
- scientific: [-]d[.digits]e(+|-)exponent

to_string() picks plain notation for values with a non-negative scale whose
adjusted exponent is at least PLAIN_MIN_ADJUSTED_EXPONENT, and scientific
notation otherwise. to_plain_string() is always plain.
"""

from bigdecimal.arithmetic import digits_of

# Smallest adjusted exponent still printed in plain notation (0.000001)
PLAIN_MIN_ADJUSTED_EXPONENT = -6


def to_string(unscaled: int, scale: int) -> str:
    """Canonical rendering, switching to scientific notation when needed."""
    if scale == 0:
        return _signed(unscaled, digits_of(abs(unscaled)))

    digits = digits_of(abs(unscaled))
    adjusted = len(digits) - 1 - scale
    if scale >= 0 and adjusted >= PLAIN_MIN_ADJUSTED_EXPONENT:
        return _plain(unscaled, digits, scale)

    parts = [digits[0]]
    if len(digits) > 1:
        parts.append(".")
        parts.append(digits[1:])
    if adjusted != 0:
        parts.append("e")
        if adjusted > 0:
            parts.append("+")
        parts.append(str(adjusted))
    return _signed(unscaled, "".join(parts))


def to_plain_string(unscaled: int, scale: int) -> str:
    """Fixed-point rendering, never scientific."""
    return _plain(unscaled, digits_of(abs(unscaled)), scale)


def _plain(unscaled: int, digits: str, scale: int) -> str:
    if scale == 0:
        return _signed(unscaled, digits)
    if scale < 0:
        return _signed(unscaled, digits + "0" * -scale)
    if len(digits) > scale:
        return _signed(unscaled, f"{digits[:-scale]}.{digits[-scale:]}")
    return _signed(unscaled, "0." + digits.rjust(scale, "0"))


def _signed(unscaled: int, body: str) -> str:
    return "-" + body if unscaled < 0 else body
