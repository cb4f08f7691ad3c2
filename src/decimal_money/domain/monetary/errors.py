"""Errors raised by the monetary domain.

All errors derive from `MoneyError`, so callers can catch the whole family at
once or pick a precise kind.
"""


class MoneyError(ValueError):
    """Base class for all monetary errors."""


class InvalidCurrencyCodeError(MoneyError):
    """Raised when a currency code is not exactly 3 ASCII letters."""


class InvalidAmountError(MoneyError):
    """Raised when an amount, multiplier, divisor or rate is not a recognizable number."""


class InvalidFormatError(MoneyError):
    """Raised when a `<amount>:<CODE>` literal cannot be parsed."""


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Raised when a divisor normalizes to zero at the operating scale."""


class CurrencyMismatchError(MoneyError):
    """Raised when a binary operation combines different currencies."""


class InvalidScaleError(MoneyError):
    """Raised when a scale is not a non-negative integer."""
