"""
Display formatting for cost figures.

Internal totals keep full float precision; these helpers are only applied
at the presentation boundary.
"""

import math

from .domain import ErrorKind, Participant, RateMode
from .policy import COMPACT_LABEL_CURRENCIES


ERROR_MESSAGES = {
    ErrorKind.NO_PARTICIPANTS: "Please add at least one participant",
    ErrorKind.INVALID_DURATION: "Please enter a valid duration",
    ErrorKind.INVALID_AMOUNT: "Please enter valid hourly rates",
    ErrorKind.MISSING_BRACKET: "Please select salary ranges for all participants",
}


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves rounding up."""
    return int(math.floor(value + 0.5))


def format_money(amount: float) -> str:
    """
    Format a money amount with display precision.

    Amounts of 100 or more with no significant cents are shown without
    decimals; everything else is shown with two decimals.

    Args:
        amount: Unrounded amount

    Returns:
        Formatted amount without currency symbol
    """
    if amount < 100 or amount % 1 > 0.01:
        return f"{amount:.2f}"
    return f"{amount:.0f}"


def format_currency(amount: float, symbol: str = "$") -> str:
    return f"{symbol}{format_money(amount)}"


def format_person_hours(hours: float) -> str:
    """Whole person-hours without decimals, otherwise one decimal place."""
    if hours % 1 == 0:
        return str(int(hours))
    return f"{hours:.1f}"


def format_bracket_amount(amount: int, currency_code: str) -> str:
    """Format a bracket bound for use in its label."""
    if currency_code in COMPACT_LABEL_CURRENCIES:
        if amount >= 1_000_000:
            return f"{round_half_up(amount / 100_000) / 10:.1f}M"
        if amount >= 1000:
            return f"{round_half_up(amount / 1000)}k"
        return str(amount)
    return f"{amount:,.0f}"


def bracket_label(min_hourly: int, max_hourly: int, symbol: str, currency_code: str,
                  open_ended: bool = False) -> str:
    low = format_bracket_amount(min_hourly, currency_code)
    if open_ended:
        return f"{symbol}{low}+/hr"
    high = format_bracket_amount(max_hourly, currency_code)
    return f"{symbol}{low}-{symbol}{high}/hr"


def display_name(participant: Participant, position: int) -> str:
    """Return the participant's name, or "Person N" for a 0-based position."""
    return participant.name.strip() or f"Person {position + 1}"


def error_message(kind: ErrorKind) -> str:
    return ERROR_MESSAGES[kind]


def rate_mode_label(mode: RateMode) -> str:
    return "Exact rates" if mode == RateMode.EXACT else "Salary ranges"
