"""Arbitrary-precision signed decimal value type.

A BigDecimal is an unscaled Python int paired with a scale:

    value = unscaled * 10^-scale

Example: 1.50 is stored as unscaled=150, scale=2, and 1.5E+3 as
unscaled=15, scale=-2.

Values are immutable. Addition, subtraction and multiplication are always
exact. Division and rescaling take a RoundingMode; the default,
UNNECESSARY, raises RoundingRequiredError instead of discarding digits.

Usage:
    from bigdecimal import BigDecimal, RoundingMode

    price = BigDecimal.parse("19.99")
    total = price * 3                            # 59.97
    share = total.divide(BigDecimal.parse("7"), RoundingMode.HALF_EVEN, scale=2)
    str(share)                                   # '8.57'
"""

from __future__ import annotations

import sys
from typing import ClassVar

import structlog

from bigdecimal import arithmetic, formatting
from bigdecimal.config import get_config
from bigdecimal.errors import DomainError, FormatError
from bigdecimal.parsing import scan_literal
from bigdecimal.rounding import RoundingMode

__all__ = ["BigDecimal", "MAX_POW_EXPONENT"]

logger = structlog.get_logger()

MAX_POW_EXPONENT = 999_999_999

# Beyond these adjusted exponents a float conversion is 0.0 or overflows
FLOAT_MAX_ADJUSTED_EXPONENT = 308
FLOAT_MIN_ADJUSTED_EXPONENT = -400

# Numeric hashing parameters shared with int, float, Fraction and Decimal
_HASH_MODULUS = sys.hash_info.modulus
_HASH_10_INV = pow(10, _HASH_MODULUS - 2, _HASH_MODULUS)


class BigDecimal:
    """Immutable decimal number with an arbitrary-precision unscaled value.

    Equality and ordering are numeric: BigDecimal("5") == BigDecimal("5.00").
    Use exactly_equals() to also require the same scale.

    Attributes:
        unscaled: Significant digits with sign (read-only)
        scale: Digits right of the decimal point; negative for trailing zeros (read-only)
        precision: Digit count of the unscaled value, 1 for zero (read-only)
    """

    ZERO: ClassVar[BigDecimal]
    ONE: ClassVar[BigDecimal]
    TWO: ClassVar[BigDecimal]
    TEN: ClassVar[BigDecimal]

    __slots__ = ("_unscaled", "_scale", "_precision")
    _unscaled: int
    _scale: int
    _precision: int | None

    def __init__(self, unscaled: int, scale: int = 0) -> None:
        """Create a BigDecimal from an unscaled integer and a scale.

        Args:
            unscaled: Significant digits with sign
            scale: Power-of-ten divisor exponent

        Raises:
            TypeError: If unscaled or scale is not an int
            DomainError: If scale lies outside the configured bounds
        """
        if not isinstance(unscaled, int):
            raise TypeError(
                f"BigDecimal requires int unscaled value, got {type(unscaled).__name__}"
            )
        if not isinstance(scale, int):
            raise TypeError(f"BigDecimal requires int scale, got {type(scale).__name__}")
        self._unscaled = int(unscaled)
        self._scale = get_config().check_scale(int(scale))
        self._precision = None

    @classmethod
    def _create(cls, unscaled: int, scale: int) -> BigDecimal:
        """Build without validation; callers guarantee a legal scale."""
        value = object.__new__(cls)
        value._unscaled = unscaled
        value._scale = scale
        value._precision = None
        return value

    @classmethod
    def from_int(cls, value: int) -> BigDecimal:
        """Create a BigDecimal with scale 0 from an integer.

        Raises:
            TypeError: If value is not an int
        """
        if not isinstance(value, int):
            raise TypeError(f"BigDecimal.from_int requires int, got {type(value).__name__}")
        return cls._create(int(value), 0)

    @classmethod
    def parse(cls, text: str) -> BigDecimal:
        """Parse a decimal literal such as "-12.50" or "1.5E-3".

        Raises:
            TypeError: If text is not a str
            FormatError: If text is not a valid literal, or its exponent
                drives the scale outside the configured bounds
        """
        if not isinstance(text, str):
            raise TypeError(f"BigDecimal.parse requires str, got {type(text).__name__}")

        result = scan_literal(text)
        if not result.is_valid:
            raise FormatError(text, result.error_detail or "invalid literal")
        if not get_config().in_range(result.scale):
            raise FormatError(text, f"scale {result.scale} out of range")
        return cls._create(result.unscaled, result.scale)

    @classmethod
    def try_parse(cls, text: str) -> BigDecimal | None:
        """Parse a decimal literal, returning None instead of raising FormatError."""
        if not isinstance(text, str):
            raise TypeError(f"BigDecimal.try_parse requires str, got {type(text).__name__}")

        result = scan_literal(text)
        if not result.is_valid:
            logger.debug(
                "bigdecimal_parse_rejected",
                text=text,
                reason=result.error.value if result.error else None,
            )
            return None
        if not get_config().in_range(result.scale):
            logger.debug("bigdecimal_parse_rejected", text=text, reason="scale_out_of_range")
            return None
        return cls._create(result.unscaled, result.scale)

    # --- Representation ---

    @property
    def unscaled(self) -> int:
        """The unscaled integer value."""
        return self._unscaled

    @property
    def scale(self) -> int:
        """The scale (number of digits right of the decimal point)."""
        return self._scale

    @property
    def precision(self) -> int:
        """Number of significant decimal digits in the unscaled value."""
        # Idempotent write; concurrent first reads compute the same value
        if self._precision is None:
            self._precision = arithmetic.precision(self._unscaled)
        return self._precision

    def signum(self) -> int:
        """-1, 0 or 1 according to the sign of the value."""
        return (self._unscaled > 0) - (self._unscaled < 0)

    def is_zero(self) -> bool:
        return self._unscaled == 0

    # --- Arithmetic ---

    def __add__(self, other: BigDecimal | int) -> BigDecimal:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return BigDecimal._create(
            *arithmetic.add(self._unscaled, self._scale, other_val._unscaled, other_val._scale)
        )

    def __radd__(self, other: int) -> BigDecimal:
        return self.__add__(other)

    def __sub__(self, other: BigDecimal | int) -> BigDecimal:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return BigDecimal._create(
            *arithmetic.add(self._unscaled, self._scale, -other_val._unscaled, other_val._scale)
        )

    def __rsub__(self, other: int) -> BigDecimal:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return other_val.__sub__(self)

    def __mul__(self, other: BigDecimal | int) -> BigDecimal:
        """Exact product; scales add.

        Raises:
            DomainError: If the scale sum leaves the configured bounds
        """
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        scale = get_config().check_scale(self._scale + other_val._scale)
        return BigDecimal._create(self._unscaled * other_val._unscaled, scale)

    def __rmul__(self, other: int) -> BigDecimal:
        return self.__mul__(other)

    def __truediv__(self, other: BigDecimal | int) -> BigDecimal:
        """Exact division at this value's scale (see divide)."""
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return self.divide(other_val)

    def __rtruediv__(self, other: int) -> BigDecimal:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return other_val.divide(self)

    def __neg__(self) -> BigDecimal:
        return BigDecimal._create(-self._unscaled, self._scale)

    def __pos__(self) -> BigDecimal:
        return self

    def __abs__(self) -> BigDecimal:
        if self._unscaled >= 0:
            return self
        return BigDecimal._create(-self._unscaled, self._scale)

    def __pow__(self, n: int, modulo: None = None) -> BigDecimal:
        if modulo is not None:
            return NotImplemented
        return self.pow(n)

    def divide(
        self,
        divisor: BigDecimal | int,
        rounding_mode: RoundingMode | str = RoundingMode.UNNECESSARY,
        scale: int | None = None,
    ) -> BigDecimal:
        """Divide by divisor, producing a result at the given scale.

        Args:
            divisor: Value to divide by
            rounding_mode: Applied when the quotient is not exact at `scale`
            scale: Scale of the result; defaults to this value's scale

        Returns:
            The rounded quotient with exactly `scale` digits after the point

        Raises:
            DivisionByZero: If divisor is zero and this value is not
            RoundingRequiredError: If the quotient is inexact at `scale`
                and rounding_mode is UNNECESSARY
            DomainError: If scale lies outside the configured bounds
        """
        divisor_val = _coerce(divisor)
        if divisor_val is None:
            raise TypeError(f"Cannot divide BigDecimal by {type(divisor).__name__}")
        rounding_mode = RoundingMode(rounding_mode)
        target_scale = self._scale if scale is None else get_config().check_scale(scale)

        return BigDecimal._create(
            *arithmetic.divide(
                self._unscaled,
                self._scale,
                divisor_val._unscaled,
                divisor_val._scale,
                target_scale,
                rounding_mode,
            )
        )

    def pow(self, n: int) -> BigDecimal:
        """Raise to a non-negative integer power; exact.

        Raises:
            TypeError: If n is not an int
            DomainError: If n is outside [0, 999999999] or the resulting
                scale leaves the configured bounds
        """
        if not isinstance(n, int):
            raise TypeError(f"BigDecimal.pow requires int exponent, got {type(n).__name__}")
        if not 0 <= n <= MAX_POW_EXPONENT:
            raise DomainError(f"Invalid operation: exponent {n} not in [0, {MAX_POW_EXPONENT}]")
        scale = get_config().check_scale(self._scale * n)
        return BigDecimal._create(self._unscaled**n, scale)

    # --- Rescaling ---

    def with_scale(
        self,
        new_scale: int,
        rounding_mode: RoundingMode | str = RoundingMode.UNNECESSARY,
    ) -> BigDecimal:
        """Return a numerically equal value at new_scale, rounding if allowed.

        Raises:
            RoundingRequiredError: If digits would be dropped and
                rounding_mode is UNNECESSARY
            DomainError: If new_scale lies outside the configured bounds
        """
        rounding_mode = RoundingMode(rounding_mode)
        get_config().check_scale(new_scale)

        if new_scale == self._scale:
            return self
        if self._unscaled == 0:
            return BigDecimal._create(0, new_scale)
        if new_scale > self._scale:
            scaled = self._unscaled * arithmetic.pow10(new_scale - self._scale)
            return BigDecimal._create(scaled, new_scale)

        divisor = arithmetic.pow10(self._scale - new_scale)
        return BigDecimal._create(
            *arithmetic.divide_and_round(
                self._unscaled, divisor, new_scale, rounding_mode, new_scale
            )
        )

    def strip_trailing_zeros(self) -> BigDecimal:
        """Numerically equal value with every trailing zero digit removed.

        Zero becomes 0 at scale 0.
        """
        if self._unscaled == 0:
            return BigDecimal.ZERO
        unscaled, scale = arithmetic.strip_zeros_for_scale(
            self._unscaled, self._scale, get_config().min_scale
        )
        if unscaled == self._unscaled:
            return self
        return BigDecimal._create(unscaled, scale)

    # --- Conversion ---

    def to_int(self, rounding_mode: RoundingMode | str = RoundingMode.UNNECESSARY) -> int:
        """Integer value, rounded with rounding_mode.

        Raises:
            RoundingRequiredError: If there is a fractional part and
                rounding_mode is UNNECESSARY
        """
        return self.with_scale(0, rounding_mode)._unscaled

    def to_float(self) -> float:
        """Nearest float to this value.

        Raises:
            OverflowError: If the magnitude exceeds the float range
        """
        if self._unscaled == 0:
            return 0.0
        adjusted = self.precision - 1 - self._scale
        if adjusted > FLOAT_MAX_ADJUSTED_EXPONENT:
            raise OverflowError("BigDecimal too large to convert to float")
        if adjusted < FLOAT_MIN_ADJUSTED_EXPONENT:
            return -0.0 if self._unscaled < 0 else 0.0
        if self._scale <= 0:
            return float(self._unscaled * arithmetic.pow10(-self._scale))
        return self._unscaled / arithmetic.pow10(self._scale)

    def __int__(self) -> int:
        """Truncate toward zero, like int() on float and Decimal."""
        return self.to_int(RoundingMode.DOWN)

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._unscaled != 0

    # --- Comparison ---

    def compare_to(self, other: BigDecimal | int) -> int:
        """Numeric three-way comparison: -1, 0 or 1."""
        other_val = _coerce(other)
        if other_val is None:
            raise TypeError(f"Cannot compare BigDecimal with {type(other).__name__}")

        if self._scale == other_val._scale:
            return (self._unscaled > other_val._unscaled) - (self._unscaled < other_val._unscaled)

        this_sign = self.signum()
        other_sign = other_val.signum()
        if this_sign != other_sign:
            return 1 if this_sign > other_sign else -1
        if this_sign == 0:
            return 0

        difference, _ = arithmetic.add(
            self._unscaled, self._scale, -other_val._unscaled, other_val._scale
        )
        return (difference > 0) - (difference < 0)

    def exactly_equals(self, other: object) -> bool:
        """True only if unscaled value and scale both match."""
        if not isinstance(other, BigDecimal):
            return False
        return self._unscaled == other._unscaled and self._scale == other._scale

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (BigDecimal, int)):
            return NotImplemented
        return self.compare_to(other) == 0

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: BigDecimal | int) -> bool:
        if not isinstance(other, (BigDecimal, int)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: BigDecimal | int) -> bool:
        if not isinstance(other, (BigDecimal, int)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: BigDecimal | int) -> bool:
        if not isinstance(other, (BigDecimal, int)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: BigDecimal | int) -> bool:
        if not isinstance(other, (BigDecimal, int)):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        """Hash of the numeric value, consistent with ==.

        Numerically equal values hash alike whatever their scale, and match
        the hash of an equal int, float, Fraction or Decimal.
        """
        if self._unscaled == 0:
            return 0
        if self._scale <= 0:
            exp_hash = pow(10, -self._scale, _HASH_MODULUS)
        else:
            exp_hash = pow(_HASH_10_INV, self._scale, _HASH_MODULUS)
        hash_ = abs(self._unscaled) * exp_hash % _HASH_MODULUS
        result = hash_ if self._unscaled > 0 else -hash_
        return -2 if result == -1 else result

    # --- Formatting ---

    def __str__(self) -> str:
        return formatting.to_string(self._unscaled, self._scale)

    def to_plain_string(self) -> str:
        """Render without scientific notation."""
        return formatting.to_plain_string(self._unscaled, self._scale)

    def __repr__(self) -> str:
        return f"BigDecimal('{self}')"


def _coerce(x: BigDecimal | int) -> BigDecimal | None:
    """Promote an int operand; None for unsupported types."""
    if isinstance(x, BigDecimal):
        return x
    if isinstance(x, int):
        return BigDecimal._create(int(x), 0)
    return None


BigDecimal.ZERO = BigDecimal._create(0, 0)
BigDecimal.ONE = BigDecimal._create(1, 0)
BigDecimal.TWO = BigDecimal._create(2, 0)
BigDecimal.TEN = BigDecimal._create(10, 0)
