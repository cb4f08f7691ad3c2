from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import TypeAlias

from decimal_money.domain.monetary.errors import InvalidAmountError, InvalidScaleError

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent
_NUMERIC_STRING = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

# How far the exponent may exceed the digit count, so the fixed-point form stays proportional to the input
MAX_EXPONENT_EXCESS = 1000


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to a finite `Decimal`.

    Floats are converted via `str` (shortest repr) to avoid binary precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        InvalidAmountError: If $value is not a recognizable finite number.
    """
    # Raise: `bool` is an `int` subclass, but it is never an amount
    if isinstance(value, bool):
        raise InvalidAmountError(f"$value must be a number, but provided value is: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not _NUMERIC_STRING.fullmatch(text):
            raise InvalidAmountError(f"$value must be a numeric string, but provided value is: {value!r}")
        try:
            result = Decimal(text)
        except InvalidOperation as e:
            raise InvalidAmountError(f"$value must be a numeric string, but provided value is: {value!r}") from e
    else:
        raise InvalidAmountError(f"$value must be int, float, str or Decimal, but provided value is: {value!r}")

    # Raise: NaN and infinities have no decimal digits
    if not result.is_finite():
        raise InvalidAmountError(f"$value must be a finite number, but provided value is: {value!r}")

    # Raise: "1e100000000" would expand into a hundred million digits; plain fixed-point text is already as long as its expansion
    _, digits, exponent = result.as_tuple()
    is_fixed_point_text = isinstance(value, str) and "e" not in value.lower()
    if not is_fixed_point_text and abs(exponent) > len(digits) + MAX_EXPONENT_EXCESS:
        raise InvalidAmountError(f"$value exponent must be within {MAX_EXPONENT_EXCESS} of its digit count, but provided value is: {value!r}")

    return result


def validate_scale(scale: int) -> int:
    """Checks that $scale is a non-negative integer and returns it.

    Raises:
        InvalidScaleError: If $scale is not an `int` (`bool` excluded) or is negative.
    """
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise InvalidScaleError(f"$scale must be an integer, but provided value is: {scale!r}")
    if scale < 0:
        raise InvalidScaleError(f"$scale must be >= 0, but provided value is: {scale}")
    return scale


def infer_scale(value: DecimalLike) -> int:
    """Returns how many fractional digits $value carries.

    Examples:
        >>> infer_scale(100)
        0
        >>> infer_scale("12.340")
        3
        >>> infer_scale(0.01)
        2
        >>> infer_scale("1e3")
        0
    """
    exponent = as_decimal(value).as_tuple().exponent
    return max(0, -exponent)
