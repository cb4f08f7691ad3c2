"""Exact decimal arithmetic over (digits, scale) pairs.

Every value is handled as a scaled integer (`value * 10**scale`), so results
never depend on the active `decimal` context and precision is only bounded by
memory. All primitives truncate toward zero; `round` is the only operation that
rounds, and it rounds half away from zero.

Results are canonical strings with exactly `scale` fractional digits, e.g.
`normalize("1.5", 3) == "1.500"` and `normalize("-0.004", 2) == "0.00"`.
"""

from __future__ import annotations

from decimal import Decimal

from decimal_money.domain.monetary.errors import DivisionByZeroError
from decimal_money.utils.numeric_tools import DecimalLike, as_decimal, validate_scale

__all__ = ["normalize", "add", "subtract", "multiply", "divide", "round", "compare"]


# region Scaled integer helpers


def _split(value: Decimal) -> tuple[int, int]:
    """Returns signed coefficient and exponent, so that $value == coefficient * 10**exponent."""
    sign, digits, exponent = value.as_tuple()
    # Decimal <-> int conversion is exact and not bound by the int/str digit limit
    coefficient = int(Decimal((0, digits, 0)))
    return (-coefficient if sign else coefficient), exponent


def _units_from_parts(coefficient: int, exponent: int, scale: int) -> int:
    shift = exponent + scale
    if shift >= 0:
        return coefficient * 10**shift

    # Truncate toward zero, so work on magnitude
    magnitude = abs(coefficient) // 10**-shift
    return -magnitude if coefficient < 0 else magnitude


def _to_units(value: DecimalLike, scale: int) -> int:
    return _units_from_parts(*_split(as_decimal(value)), scale)


def _round_units(units: int, from_scale: int, to_scale: int) -> int:
    if to_scale >= from_scale:
        return units * 10 ** (to_scale - from_scale)

    step = 10 ** (from_scale - to_scale)
    # Adding half a step and truncating is half-away-from-zero on the magnitude
    magnitude = (abs(units) + step // 2) // step
    return -magnitude if units < 0 else magnitude


def _format(units: int, scale: int) -> str:
    sign = "-" if units < 0 else ""
    digits = Decimal(abs(units)).as_tuple().digits
    text = "".join(map(str, digits)).rjust(scale + 1, "0")
    if scale == 0:
        return f"{sign}{text}"
    return f"{sign}{text[:-scale]}.{text[-scale:]}"


# endregion

# region Public API


def normalize(value: DecimalLike, scale: int) -> str:
    """Converts $value into its canonical decimal string at $scale.

    Integers, Decimals and numeric strings are zero-padded or truncated (never
    rounded). Floats are first taken by their shortest repr and rounded half
    away from zero to $scale, as that is the only consistent way to read them.

    Raises:
        InvalidAmountError: If $value is not a recognizable number.
        InvalidScaleError: If $scale is not a non-negative integer.
    """
    scale = validate_scale(scale)
    decimal_value = as_decimal(value)

    coefficient, exponent = _split(decimal_value)

    if isinstance(value, float):
        natural_scale = max(0, -exponent)
        units = _units_from_parts(coefficient, exponent, natural_scale)
        return _format(_round_units(units, natural_scale, scale), scale)

    return _format(_units_from_parts(coefficient, exponent, scale), scale)


def add(a: DecimalLike, b: DecimalLike, scale: int) -> str:
    """Returns $a + $b at $scale; both operands are truncated to $scale first."""
    scale = validate_scale(scale)
    return _format(_to_units(a, scale) + _to_units(b, scale), scale)


def subtract(a: DecimalLike, b: DecimalLike, scale: int) -> str:
    """Returns $a - $b at $scale; both operands are truncated to $scale first."""
    scale = validate_scale(scale)
    return _format(_to_units(a, scale) - _to_units(b, scale), scale)


def multiply(a: DecimalLike, b: DecimalLike, scale: int) -> str:
    """Returns the exact product of $a and $b truncated to $scale."""
    scale = validate_scale(scale)
    a_coefficient, a_exponent = _split(as_decimal(a))
    b_coefficient, b_exponent = _split(as_decimal(b))
    units = _units_from_parts(a_coefficient * b_coefficient, a_exponent + b_exponent, scale)
    return _format(units, scale)


def divide(a: DecimalLike, b: DecimalLike, scale: int) -> str:
    """Returns the exact quotient $a / normalize($b, $scale) truncated to $scale.

    The divisor goes through `normalize` first, so float divisors are rounded
    half away from zero and other divisors are truncated to $scale.

    Raises:
        DivisionByZeroError: If $b normalizes to zero at $scale.
    """
    scale = validate_scale(scale)
    normalized_b = normalize(b, scale)

    # Raise: divisor must not vanish at the operating scale
    if _to_units(normalized_b, scale) == 0:
        raise DivisionByZeroError(f"Cannot divide because $b ({b!r}) normalizes to zero at scale {scale}")

    a_coefficient, a_exponent = _split(as_decimal(a))
    b_coefficient, b_exponent = _split(as_decimal(normalized_b))

    # a / b * 10**scale == a_coefficient * 10**shift / b_coefficient
    shift = a_exponent - b_exponent + scale
    if shift >= 0:
        numerator, denominator = a_coefficient * 10**shift, b_coefficient
    else:
        numerator, denominator = a_coefficient, b_coefficient * 10**-shift

    magnitude = abs(numerator) // abs(denominator)
    units = -magnitude if (numerator < 0) != (denominator < 0) else magnitude
    return _format(units, scale)


def round(value: DecimalLike, from_scale: int, to_scale: int) -> str:
    """Rounds $value (read at $from_scale) half away from zero to $to_scale.

    Adds 5 * 10**-($to_scale + 1) to the magnitude, then truncates. The sign is
    taken from the original value. When $to_scale >= $from_scale the value is
    only zero-padded.
    """
    from_scale = validate_scale(from_scale)
    to_scale = validate_scale(to_scale)
    units = _to_units(value, from_scale)
    return _format(_round_units(units, from_scale, to_scale), to_scale)


def compare(a: DecimalLike, b: DecimalLike, scale: int) -> int:
    """Returns -1, 0 or 1 as $a is less than, equal to or greater than $b at $scale."""
    scale = validate_scale(scale)
    a_units = _to_units(a, scale)
    b_units = _to_units(b, scale)
    return (a_units > b_units) - (a_units < b_units)


# endregion
