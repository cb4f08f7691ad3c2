from __future__ import annotations

import logging
import re
from decimal import Decimal

from decimal_money.domain.monetary.currency import Currency
from decimal_money.domain.monetary.currency_registry import is_known_code
from decimal_money.domain.monetary.errors import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidCurrencyCodeError,
    InvalidFormatError,
)
from decimal_money.utils import decimal_engine
from decimal_money.utils.numeric_tools import DecimalLike, infer_scale, validate_scale

logger = logging.getLogger(__name__)

ZERO = "0"

# Amount part of the `<amount>:<CODE>` literal
_LITERAL_AMOUNT = re.compile(r"-?\d+(?:\.\d+)?")


class Money:
    """Represents an exact monetary amount in a single currency.

    The amount is stored as a canonical decimal string with exactly `scale`
    fractional digits (e.g. "12.30" at scale 2), so no binary floating point
    error is ever introduced. Money is immutable: every operation returns a new
    instance.

    All arithmetic truncates to the result scale. Rounding (half away from zero)
    happens only in `round` or when `multiply_by` / `divide_by` are asked to
    `round`.

    Attributes:
        amount (str): Canonical decimal string, zero-padded to `scale`.
        scale (int): Number of fractional digits kept.
        currency (Currency): Currency of the amount.
    """

    __slots__ = ("_amount", "_scale", "_currency")

    SEPARATOR = ":"

    # region Init

    def __init__(self, amount: DecimalLike, currency: Currency, scale: int | None = None):
        """Initialize Money with amount, currency and scale.

        Args:
            amount: Numeric value (int, float, numeric str or Decimal).
            currency (Currency): Currency object.
            scale (int | None): Fractional digits to keep. If None, the number of
                fractional digits $amount carries is used (0 for integers).

        Raises:
            TypeError: If $currency is not a Currency instance.
            InvalidAmountError: If $amount is not a recognizable number.
            InvalidScaleError: If $scale is not a non-negative integer.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

        scale = infer_scale(amount) if scale is None else validate_scale(scale)

        self._amount = decimal_engine.normalize(amount, scale)
        self._scale = scale
        self._currency = currency

    @classmethod
    def from_amount(cls, amount: DecimalLike, currency: Currency, scale: int | None = None) -> Money:
        """Create Money from a numeric amount; see `Money.__init__`."""
        return cls(amount, currency, scale)

    @classmethod
    def from_string(cls, literal: str) -> Money:
        """Parse Money from a literal like '12.34:EUR'.

        The scale is the number of digits after the decimal point (0 if none).
        The currency code is case-insensitive.

        Args:
            literal (str): String in format '<amount>:<CODE>'.

        Returns:
            Money: Parsed Money object.

        Raises:
            InvalidFormatError: If $literal does not parse.
        """
        if not isinstance(literal, str):
            raise InvalidFormatError(f"$literal must be a string, but provided value is: {literal!r}")

        parts = literal.strip().split(cls.SEPARATOR)
        if len(parts) != 2:
            raise InvalidFormatError(f"Literal with $literal = '{literal}' must be in format '<amount>{cls.SEPARATOR}<CODE>'")

        amount_part, code_part = parts
        if not _LITERAL_AMOUNT.fullmatch(amount_part):
            raise InvalidFormatError(f"Invalid amount part '{amount_part}' in literal '{literal}'")

        try:
            currency = Currency.from_code(code_part)
        except InvalidCurrencyCodeError as e:
            raise InvalidFormatError(f"Invalid currency part '{code_part}' in literal '{literal}'") from e

        scale = len(amount_part.partition(".")[2])
        return cls(amount_part, currency, scale)

    # endregion

    # region Properties

    @property
    def amount(self) -> str:
        """Get the canonical amount string."""
        return self._amount

    @property
    def scale(self) -> int:
        """Get the number of fractional digits."""
        return self._scale

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def value(self) -> Decimal:
        """Get the amount as Decimal."""
        return Decimal(self._amount)

    # endregion

    # region Arithmetic

    def add(self, other: Money) -> Money:
        """Return the sum of this and $other at the larger of both scales.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        self._check_same_currency(other)
        scale = max(self._scale, other._scale)
        return self.__class__(decimal_engine.add(self._amount, other._amount, scale), self._currency, scale)

    def subtract(self, other: Money) -> Money:
        """Return this minus $other at the larger of both scales.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        self._check_same_currency(other)
        scale = max(self._scale, other._scale)
        return self.__class__(decimal_engine.subtract(self._amount, other._amount, scale), self._currency, scale)

    def multiply_by(self, multiplier: DecimalLike, scale: int | None = None, round: bool = False) -> Money:
        """Return this amount multiplied by $multiplier.

        Args:
            multiplier: Numeric factor; normalized to the working scale first.
            scale (int | None): Result scale. Defaults to this Money's scale.
            round (bool): If True, compute one extra digit and round half away
                from zero to $scale. Otherwise truncate.

        Raises:
            InvalidAmountError: If $multiplier is not a recognizable number.
            InvalidScaleError: If $scale is not a non-negative integer.
        """
        target_scale = self._scale if scale is None else validate_scale(scale)
        working_scale = target_scale + 1 if round else target_scale

        factor = decimal_engine.normalize(multiplier, working_scale)
        amount = decimal_engine.multiply(self._amount, factor, working_scale)
        if round:
            amount = decimal_engine.round(amount, working_scale, target_scale)

        return self.__class__(amount, self._currency, target_scale)

    def divide_by(self, divisor: DecimalLike, scale: int | None = None, round: bool = False) -> Money:
        """Return this amount divided by $divisor.

        Args:
            divisor: Numeric divisor; normalized to the working scale first.
            scale (int | None): Result scale. Defaults to this Money's scale.
            round (bool): If True, compute one extra digit and round half away
                from zero to $scale. Otherwise truncate.

        Raises:
            DivisionByZeroError: If $divisor normalizes to zero at the working scale.
            InvalidAmountError: If $divisor is not a recognizable number.
            InvalidScaleError: If $scale is not a non-negative integer.
        """
        target_scale = self._scale if scale is None else validate_scale(scale)
        working_scale = target_scale + 1 if round else target_scale

        normalized_divisor = decimal_engine.normalize(divisor, working_scale)

        # Raise: 0, 0.0 and "0" (or anything truncating to zero) cannot divide
        if decimal_engine.compare(normalized_divisor, ZERO, working_scale) == 0:
            raise DivisionByZeroError(f"Cannot call `divide_by` because $divisor ({divisor!r}) normalizes to zero at scale {working_scale}")

        amount = decimal_engine.divide(self._amount, normalized_divisor, working_scale)
        if round:
            amount = decimal_engine.round(amount, working_scale, target_scale)

        return self.__class__(amount, self._currency, target_scale)

    def round(self, scale: int = 0) -> Money:
        """Return this Money rounded half away from zero to $scale digits.

        Raises:
            InvalidScaleError: If $scale is not a non-negative integer.
        """
        scale = validate_scale(scale)
        return self.__class__(decimal_engine.round(self._amount, self._scale, scale), self._currency, scale)

    def convert_to(self, target_currency: Currency, rate: DecimalLike) -> Money:
        """Return this amount multiplied by $rate and tagged with $target_currency.

        Both $rate and the result use this Money's own scale; there is no scale
        override here, unlike `multiply_by` / `divide_by`.

        Raises:
            TypeError: If $target_currency is not a Currency instance.
            InvalidAmountError: If $rate is not a recognizable number.
        """
        if not isinstance(target_currency, Currency):
            raise TypeError(f"$target_currency must be a Currency instance, but provided value is: {target_currency!r}")

        normalized_rate = decimal_engine.normalize(rate, self._scale)
        amount = decimal_engine.multiply(self._amount, normalized_rate, self._scale)
        return self.__class__(amount, target_currency, self._scale)

    def negate(self) -> Money:
        """Return this Money with the opposite sign."""
        return self.__class__(decimal_engine.subtract(ZERO, self._amount, self._scale), self._currency, self._scale)

    def absolute(self) -> Money:
        """Return this Money without sign."""
        return self.negate() if self.is_negative() else self

    # endregion

    # region Comparison

    def has_same_currency_as(self, other: Money) -> bool:
        """Check whether $other is in the same currency as this Money."""
        if not isinstance(other, Money):
            raise TypeError(f"$other must be a Money instance, but provided value is: {other!r}")
        return self._currency.equals(other._currency)

    def equals(self, other: Money) -> bool:
        """Check whether $other has the same value (same currency required)."""
        return self._compare_to(other) == 0

    def is_greater_than(self, other: Money) -> bool:
        return self._compare_to(other) == 1

    def is_greater_than_or_equal_to(self, other: Money) -> bool:
        return self._compare_to(other) >= 0

    def is_less_than(self, other: Money) -> bool:
        return self._compare_to(other) == -1

    def is_less_than_or_equal_to(self, other: Money) -> bool:
        return self._compare_to(other) <= 0

    def is_zero(self) -> bool:
        return self._compare_to_zero() == 0

    def is_positive(self) -> bool:
        return self._compare_to_zero() == 1

    def is_negative(self) -> bool:
        return self._compare_to_zero() == -1

    def _check_same_currency(self, other: Money) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            TypeError: If $other is not a Money instance.
            CurrencyMismatchError: If currencies don't match.
        """
        if not self.has_same_currency_as(other):
            raise CurrencyMismatchError(f"Cannot operate on different currencies: {self._currency} and {other._currency}")

    def _compare_to(self, other: Money) -> int:
        self._check_same_currency(other)
        return decimal_engine.compare(self._amount, other._amount, max(self._scale, other._scale))

    def _compare_to_zero(self) -> int:
        return decimal_engine.compare(self._amount, ZERO, self._scale)

    # endregion

    # region Operators

    def __eq__(self, other) -> bool:
        """Check equality with another Money object; different currencies are never equal."""
        if not isinstance(other, Money):
            return False
        if not self.has_same_currency_as(other):
            return False
        return self._compare_to(other) == 0

    def __hash__(self) -> int:
        """Hash based on numeric value and currency, so equal amounts at different scales hash alike."""
        return hash((self.value, self._currency))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_less_than(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_less_than_or_equal_to(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_greater_than(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_greater_than_or_equal_to(other)

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.absolute()

    # endregion

    # region String representations

    def to_string(self) -> str:
        """Return the literal form, like '12.34:EUR'."""
        return f"{self._amount}{self.SEPARATOR}{self._currency.code}"

    def __str__(self) -> str:
        """Return string like '1000.50:USD'."""
        return self.to_string()

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, USD)'."""
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"

    # endregion


def money(code: str, amount: DecimalLike, scale: int | None = None) -> Money:
    """Shorthand for `Money(amount, Currency.from_code(code), scale)`.

    Example:
        ```python
        five_dollars = money("USD", 5)
        ```

    Raises:
        InvalidCurrencyCodeError: If $code is not a 3-letter currency code.
        InvalidAmountError: If $amount is not a recognizable number.
        InvalidScaleError: If $scale is not a non-negative integer.
    """
    currency = Currency.from_code(code)
    if not is_known_code(currency.code):
        logger.debug(f"Creating Money in currency '{currency.code}' that is not among the well-known currencies")
    return Money(amount, currency, scale)
