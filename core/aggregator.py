"""
Cost Aggregator

Combines normalized hourly rates with the meeting duration into
per-participant costs and summary statistics.
Pure Python implementation - NO Django imports.
"""

from typing import Dict, Optional, Sequence

from .domain import (
    AggregateResult,
    Bracket,
    CostSummary,
    DurationUnit,
    ErrorKind,
    MeetingContext,
    Participant,
    RateMode,
)
from .policy import MINUTES_PER_HOUR
from .rates import parse_decimal, to_hourly_rate


def duration_in_hours(context: MeetingContext) -> Optional[float]:
    """
    Convert the meeting duration to hours.

    Returns:
        Duration in hours, or None if the value is missing, non-numeric
        or not positive
    """
    value = parse_decimal(context.duration_value)
    if value is None or value <= 0:
        return None
    if DurationUnit(context.duration_unit) == DurationUnit.MINUTES:
        return value / MINUTES_PER_HOUR
    return value


def normalize_all(
    participants: Sequence[Participant],
    mode: RateMode,
    brackets: Sequence[Bracket],
):
    """
    Normalize every participant.

    Returns:
        Tuple of (hourly rates by id, failures by id)
    """
    rates: Dict[str, float] = {}
    failures: Dict[str, ErrorKind] = {}
    for participant in participants:
        result = to_hourly_rate(participant, mode, brackets)
        if result.success:
            rates[participant.id] = result.hourly_rate
        else:
            failures[participant.id] = result.error
    return rates, failures


def aggregate(
    participants: Sequence[Participant],
    context: MeetingContext,
    mode: RateMode,
    brackets: Sequence[Bracket],
) -> AggregateResult:
    """
    Aggregate participant costs for a meeting.

    The summary is all-or-nothing: if any participant cannot be
    normalized no figures are returned.

    Args:
        participants: Participant snapshots in display order
        context: Meeting settings
        mode: Session-wide rate mode
        brackets: Active bracket table

    Returns:
        AggregateResult with a CostSummary, or the first error kind
    """
    if not participants:
        return AggregateResult(success=False, error=ErrorKind.NO_PARTICIPANTS)

    duration_hours = duration_in_hours(context)
    if duration_hours is None:
        return AggregateResult(success=False, error=ErrorKind.INVALID_DURATION)

    rates, failures = normalize_all(participants, mode, brackets)
    if failures:
        return AggregateResult(
            success=False,
            error=next(iter(failures.values())),
            failures=failures,
        )

    per_participant_cost = {
        participant.id: rates[participant.id] * duration_hours for participant in participants
    }
    # The total is the sum of the parts, never rate * duration computed separately
    total_cost = sum(per_participant_cost.values())

    count = len(participants)
    cost_per_hour = total_cost / duration_hours

    percentage_share: Dict[str, float] = {}
    if total_cost != 0:
        percentage_share = {
            participant_id: cost / total_cost * 100
            for participant_id, cost in per_participant_cost.items()
        }

    summary = CostSummary(
        total_cost=total_cost,
        per_participant_cost=per_participant_cost,
        per_person_average=total_cost / count,
        cost_per_hour=cost_per_hour,
        cost_per_minute=cost_per_hour / MINUTES_PER_HOUR,
        total_person_hours=duration_hours * count,
        percentage_share=percentage_share,
        duration_hours=duration_hours,
        participant_count=count,
        hourly_rates=rates,
        total_hourly_rate=sum(rates.values()),
    )
    return AggregateResult(success=True, summary=summary)
