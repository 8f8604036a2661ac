"""Decimal literal scanner.

Accepted grammar (ASCII only, no whitespace):

    [+|-] digits* [ '.' digits* ] [ (e|E) [+|-] digits+ ]

At least one digit must appear before the exponent. The unscaled value is
the integer and fractional digits read as one integer; the scale is the
number of fractional digits minus the exponent.

scan_literal() never raises: it reports failures through ScanResult so
that BigDecimal.try_parse() does not use exceptions for control flow.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bigdecimal.arithmetic import int_from_digits
from bigdecimal.config import INT64_MAX, INT64_MIN

_DIGITS = frozenset("0123456789")


class ScanError(Enum):
    """Reasons a literal is rejected."""

    EMPTY = "empty"
    NO_DIGITS = "no_digits"
    BAD_EXPONENT = "bad_exponent"
    EXPONENT_OUT_OF_RANGE = "exponent_out_of_range"
    UNEXPECTED_INPUT = "unexpected_input"


@dataclass(frozen=True)
class ScanResult:
    """Outcome of scanning a decimal literal.

    Attributes:
        unscaled: Signed digits of the literal, or 0 on failure
        scale: Fractional digit count minus exponent, or 0 on failure
        error: Why the literal was rejected, None on success
        error_detail: Human-readable description of the failure

    Examples:
        result = scan_literal("-1.50e2")
        assert result.is_valid
        assert (result.unscaled, result.scale) == (-150, 0)

        result = scan_literal("1.2.3")
        assert result.error is ScanError.UNEXPECTED_INPUT
    """

    unscaled: int = 0
    scale: int = 0
    error: ScanError | None = None
    error_detail: str | None = None

    @property
    def is_valid(self) -> bool:
        """True if the literal was accepted."""
        return self.error is None

    @classmethod
    def with_error(cls, error: ScanError, detail: str) -> ScanResult:
        """Create a failed result."""
        return cls(error=error, error_detail=detail)


def _skip_digits(text: str, start: int) -> int:
    """Return the index of the first non-digit at or after start."""
    index = start
    while index < len(text) and text[index] in _DIGITS:
        index += 1
    return index


def _scan_exponent(text: str) -> int | ScanResult:
    """Parse `[+|-]digits+` as a signed 64-bit integer."""
    body = text[1:] if text[:1] in ("+", "-") else text
    if not body or _skip_digits(body, 0) != len(body):
        return ScanResult.with_error(ScanError.BAD_EXPONENT, f"malformed exponent {text!r}")

    # Longer than any int64, whatever the zero padding
    if len(body.lstrip("0")) > 19:
        return ScanResult.with_error(
            ScanError.EXPONENT_OUT_OF_RANGE, f"exponent {text!r} out of range"
        )
    exponent = int(body.lstrip("0") or "0")
    if text[:1] == "-":
        exponent = -exponent
    if not INT64_MIN <= exponent <= INT64_MAX:
        return ScanResult.with_error(
            ScanError.EXPONENT_OUT_OF_RANGE, f"exponent {text!r} out of range"
        )
    return exponent


def scan_literal(text: str) -> ScanResult:
    """Scan text as a decimal literal without raising.

    Args:
        text: Candidate literal

    Returns:
        ScanResult with the unscaled value and scale, or the failure reason
    """
    if not text:
        return ScanResult.with_error(ScanError.EMPTY, "empty string")

    sign = ""
    index = 0
    if text[0] == "-":
        sign = "-"
        index = 1
    elif text[0] == "+":
        index = 1

    end = _skip_digits(text, index)
    integer_part = text[index:end]
    index = end

    fraction_part = ""
    if index < len(text) and text[index] == ".":
        end = _skip_digits(text, index + 1)
        fraction_part = text[index + 1 : end]
        index = end

    if not integer_part and not fraction_part:
        return ScanResult.with_error(ScanError.NO_DIGITS, "no digits before exponent")

    exponent = 0
    if index < len(text):
        if text[index] not in ("e", "E"):
            return ScanResult.with_error(
                ScanError.UNEXPECTED_INPUT, f"unexpected {text[index:]!r} at index {index}"
            )
        parsed = _scan_exponent(text[index + 1 :])
        if isinstance(parsed, ScanResult):
            return parsed
        exponent = parsed

    unscaled = int_from_digits(integer_part + fraction_part)
    if sign:
        unscaled = -unscaled
    return ScanResult(unscaled=unscaled, scale=len(fraction_part) - exponent)
