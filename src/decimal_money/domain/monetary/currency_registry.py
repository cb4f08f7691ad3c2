from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from decimal_money.domain.monetary.currency import Currency


# Fiat currencies
USD = Currency("USD")
EUR = Currency("EUR")
GBP = Currency("GBP")
JPY = Currency("JPY")
CHF = Currency("CHF")
CAD = Currency("CAD")
AUD = Currency("AUD")
CNY = Currency("CNY")
SEK = Currency("SEK")
NOK = Currency("NOK")
DKK = Currency("DKK")
PLN = Currency("PLN")
CZK = Currency("CZK")
MXN = Currency("MXN")
BRL = Currency("BRL")

# Commodities
XAU = Currency("XAU")
XAG = Currency("XAG")

# Read-only lookup of the well-known currencies above
KNOWN_CURRENCIES: Mapping[str, Currency] = MappingProxyType(
    {c.code: c for c in (USD, EUR, GBP, JPY, CHF, CAD, AUD, CNY, SEK, NOK, DKK, PLN, CZK, MXN, BRL, XAU, XAG)},
)


def is_known_code(code: str) -> bool:
    """Check whether $code (any letter case) names one of the well-known currencies."""
    return isinstance(code, str) and code.upper() in KNOWN_CURRENCIES
