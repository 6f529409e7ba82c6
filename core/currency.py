"""
Currency catalog lookups.
"""

from typing import List

from .domain import Currency
from .policy import BASE_CURRENCY, CURRENCIES


def get_currency(code: str) -> Currency:
    """
    Resolve a currency code against the catalog.

    Unknown codes fall back to a multiplier of 1, using the code itself
    as the display symbol.
    """
    code = (code or BASE_CURRENCY).upper()
    if code not in CURRENCIES:
        return Currency(code=code, symbol=code, name=code, multiplier=1)
    symbol, name, multiplier = CURRENCIES[code]
    return Currency(code=code, symbol=symbol, name=name, multiplier=multiplier)


def list_currencies() -> List[Currency]:
    return [get_currency(code) for code in CURRENCIES]


def is_known_currency(code: str) -> bool:
    return bool(code) and code.upper() in CURRENCIES
