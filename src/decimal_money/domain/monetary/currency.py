from __future__ import annotations

from decimal_money.domain.monetary.errors import InvalidCurrencyCodeError


class Currency:
    """Represents a currency identified by its 3-letter code.

    The code is validated and uppercased once, at construction, so every live
    instance is valid. Instances are immutable and compare by code.

    Attributes:
        code (str): Uppercase 3-letter currency code (e.g., "EUR", "USD").
    """

    __slots__ = ("_code",)

    def __init__(self, code: str):
        """Initialize a Currency instance.

        Args:
            code (str): 3-letter currency code, in any letter case.

        Raises:
            InvalidCurrencyCodeError: If $code is not a string of exactly 3 ASCII letters.
        """
        # Raise: code must be a string made of exactly 3 ASCII letters
        if not isinstance(code, str) or len(code) != 3 or not (code.isascii() and code.isalpha()):
            raise InvalidCurrencyCodeError(f"$code must be a 3-letter currency code, but provided value is: {code!r}")

        self._code = code.upper()

    @classmethod
    def from_code(cls, code: str) -> Currency:
        """Create a Currency from its code.

        Args:
            code (str): 3-letter currency code, case-insensitive.

        Returns:
            Currency: The currency instance.

        Raises:
            InvalidCurrencyCodeError: If $code is not a string of exactly 3 ASCII letters.
        """
        return cls(code)

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    def equals(self, other: Currency) -> bool:
        """Check whether $other has the same code as this currency."""
        if not isinstance(other, Currency):
            raise TypeError(f"$other must be a Currency instance, but provided value is: {other!r}")
        return self._code == other._code

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self._code == other._code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self._code)

    def __str__(self) -> str:
        """Return the currency code."""
        return self._code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self._code}')"
