"""BigDecimal error classes.

Every error derives from ArithmeticError so callers can catch the whole
family with one clause, and mixes in the builtin error a plain Python
numeric operation would raise for the same condition.
"""


class BigDecimalError(ArithmeticError):
    """Base error for BigDecimal operations."""

    pass


class FormatError(BigDecimalError, ValueError):
    """Text is not a valid decimal literal."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Not a valid BigDecimal literal: {text!r} ({reason})")


class RoundingRequiredError(BigDecimalError):
    """Result is not exact and the rounding mode is UNNECESSARY."""

    pass


class DomainError(BigDecimalError):
    """Argument outside the operation's domain (power exponent, scale bounds)."""

    pass


class DivisionByZero(BigDecimalError, ZeroDivisionError):
    """Division by a zero divisor."""

    pass
