"""
Rate Normalizer

Converts one participant's compensation entry into an hourly rate.
Pure Python implementation - NO Django imports.
"""

import math
from typing import Optional, Sequence, Union

from .brackets import find_bracket
from .domain import (
    Bracket,
    BracketEntry,
    ErrorKind,
    ExactEntry,
    Participant,
    Periodicity,
    RateMode,
    RateResult,
)
from .policy import HOURS_PER_MONTH, HOURS_PER_YEAR


PERIOD_DIVISORS = {
    Periodicity.HOURLY: 1,
    Periodicity.MONTHLY: HOURS_PER_MONTH,
    Periodicity.ANNUAL: HOURS_PER_YEAR,
}


def parse_decimal(value: Union[str, int, float, None]) -> Optional[float]:
    """
    Parse user input as a finite float.

    Returns:
        The parsed number, or None for empty, non-numeric, NaN or infinite
        input. Digit separators such as "1_000" are not accepted.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value or "_" in value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def hourly_from_amount(amount: float, periodicity: Periodicity) -> float:
    """Convert an amount paid per period into its hourly equivalent."""
    divisor = PERIOD_DIVISORS[Periodicity(periodicity)]
    if divisor == 1:
        return amount
    return amount / divisor


def _exact_rate(entry: ExactEntry) -> RateResult:
    amount = parse_decimal(entry.amount)
    if amount is None or amount < 0:
        return RateResult(success=False, error=ErrorKind.INVALID_AMOUNT)
    return RateResult(success=True, hourly_rate=hourly_from_amount(amount, entry.periodicity))


def _bracket_rate(entry: BracketEntry, brackets: Sequence[Bracket]) -> RateResult:
    bracket = find_bracket(entry.bracket_id, brackets)
    if bracket is None:
        return RateResult(success=False, error=ErrorKind.MISSING_BRACKET)
    return RateResult(success=True, hourly_rate=bracket.midpoint_hourly)


def to_hourly_rate(
    participant: Participant,
    mode: RateMode,
    brackets: Sequence[Bracket],
) -> RateResult:
    """
    Normalize a participant's live rate entry to an hourly rate.

    Args:
        participant: Participant snapshot
        mode: Session-wide rate mode, selects the live entry
        brackets: Active bracket table, used in bracket mode

    Returns:
        RateResult with the hourly rate, or INVALID_AMOUNT / MISSING_BRACKET
    """
    entry = participant.entry_for(RateMode(mode))
    if isinstance(entry, BracketEntry):
        return _bracket_rate(entry, brackets)
    return _exact_rate(entry)
