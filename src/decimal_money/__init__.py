__version__ = "0.1.0"

from decimal_money.domain.monetary.currency import Currency
from decimal_money.domain.monetary.errors import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidAmountError,
    InvalidCurrencyCodeError,
    InvalidFormatError,
    InvalidScaleError,
    MoneyError,
)
from decimal_money.domain.monetary.money import Money, money

__all__ = [
    "Currency",
    "Money",
    "money",
    "MoneyError",
    "InvalidCurrencyCodeError",
    "InvalidAmountError",
    "InvalidFormatError",
    "DivisionByZeroError",
    "CurrencyMismatchError",
    "InvalidScaleError",
]
