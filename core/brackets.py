"""
Bracket Table Generator

Builds currency-scaled salary brackets from the fixed USD base table and
maps bracket selections across currency changes.
Pure Python implementation - NO Django imports.
"""

import math
from typing import List, Optional, Sequence

from .currency import get_currency
from .domain import Bracket
from .formatting import bracket_label, round_half_up
from .policy import BASE_BRACKETS, BASE_CURRENCY, OPEN_BRACKET_CEILING_FACTOR


def generate_brackets(
    currency_multiplier: float,
    symbol: str = "$",
    currency_code: str = BASE_CURRENCY,
) -> List[Bracket]:
    """
    Generate the bracket table for a currency.

    Args:
        currency_multiplier: Approximate USD to target currency rate
        symbol: Currency symbol used in labels
        currency_code: Currency code, controls label notation

    Returns:
        Brackets ordered by min_hourly, ids taken from the base table

    Raises:
        ValueError: If the multiplier is not a positive finite number
    """
    if not isinstance(currency_multiplier, (int, float)) or isinstance(currency_multiplier, bool):
        raise ValueError("Currency multiplier must be a number")
    if not math.isfinite(currency_multiplier) or currency_multiplier <= 0:
        raise ValueError(f"Currency multiplier must be positive, got {currency_multiplier}")

    brackets = []
    for bracket_id, base_min, base_max in BASE_BRACKETS:
        open_ended = base_max is None
        if open_ended:
            base_max = base_min * OPEN_BRACKET_CEILING_FACTOR

        min_hourly = round_half_up(base_min * currency_multiplier)
        max_hourly = round_half_up(base_max * currency_multiplier)
        # Small multipliers collapse rounded bounds; keep every bracket at
        # least one unit wide and starting no lower than the previous ceiling.
        if brackets:
            min_hourly = max(min_hourly, brackets[-1].max_hourly)
        max_hourly = max(max_hourly, min_hourly + 1)
        brackets.append(
            Bracket(
                id=bracket_id,
                label=bracket_label(min_hourly, max_hourly, symbol, currency_code, open_ended),
                min_hourly=min_hourly,
                max_hourly=max_hourly,
                open_ended=open_ended,
            )
        )
    return brackets


def brackets_for_currency(currency_code: str) -> List[Bracket]:
    """Generate the bracket table for a catalog currency."""
    currency = get_currency(currency_code)
    return generate_brackets(currency.multiplier, currency.symbol, currency.code)


def find_bracket(bracket_id: Optional[str], brackets: Sequence[Bracket]) -> Optional[Bracket]:
    if not bracket_id:
        return None
    for bracket in brackets:
        if bracket.id == bracket_id:
            return bracket
    return None


def bracket_for_rate(hourly_rate: float, brackets: Sequence[Bracket]) -> Optional[Bracket]:
    """
    Find the bracket covering an hourly rate.

    A bracket covers rates from its own floor up to the next bracket's
    floor; the open top bracket covers everything above its floor.
    """
    if hourly_rate < 0 or not brackets:
        return None
    match = None
    for bracket in brackets:
        if hourly_rate >= bracket.min_hourly:
            match = bracket
        else:
            break
    return match


def closest_bracket(
    old_bracket_id: Optional[str],
    old_table: Sequence[Bracket],
    new_table: Sequence[Bracket],
) -> Optional[str]:
    """
    Pick the bracket in new_table that best matches a previous selection.

    The id is kept whenever it exists in the new table. Otherwise the
    bracket with the nearest midpoint wins, ties going to the lower index.

    Args:
        old_bracket_id: Previously selected bracket id, may be empty
        old_table: Table the selection was made from
        new_table: Table to select from

    Returns:
        Bracket id from new_table, or None if nothing was selected
    """
    if not old_bracket_id or not new_table:
        return None

    if find_bracket(old_bracket_id, new_table) is not None:
        return old_bracket_id

    old_bracket = find_bracket(old_bracket_id, old_table)
    if old_bracket is None:
        return new_table[0].id

    target = old_bracket.midpoint_hourly
    closest = new_table[0]
    min_difference = math.inf
    for bracket in new_table:
        difference = abs(bracket.midpoint_hourly - target)
        if difference < min_difference:
            min_difference = difference
            closest = bracket
    return closest.id
