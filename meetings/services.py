"""
Meetings Service Layer

Bridges cleaned form data to the framework-agnostic cost engine in the
core package, and turns engine results into JSON-ready dictionaries.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from django.conf import settings

from core.brackets import brackets_for_currency, closest_bracket
from core.currency import get_currency, is_known_currency, list_currencies
from core.domain import (
    Bracket,
    BracketEntry,
    Currency,
    DurationUnit,
    Estimate,
    ExactEntry,
    MeetingContext,
    Participant,
    Periodicity,
    RateMode,
)
from core.formatting import (
    display_name,
    error_message,
    format_currency,
    format_person_hours,
    rate_mode_label,
)
from core.insights import savings_insights
from core.meeting_engine import estimate
from core.policy import COMMON_TEAM_SIZES
from core.roster import new_participant_id

logger = logging.getLogger(__name__)

DEFAULT_MEETING_NAME = "Meeting Cost Summary"


@dataclass
class MeetingRequest:
    """A fully parsed recompute request."""

    meeting_name: str
    participants: List[Participant]
    context: MeetingContext
    mode: RateMode
    currency: Currency


def build_participant(row: Dict[str, Any]) -> Participant:
    """
    Build a participant snapshot from a cleaned formset row.

    Rows without an id get a fresh one.
    """
    return Participant(
        id=row.get("participant_id") or new_participant_id(),
        name=row.get("name", ""),
        exact=ExactEntry(
            amount=row.get("amount", ""),
            periodicity=Periodicity(row.get("periodicity") or Periodicity.HOURLY.value),
        ),
        bracket=BracketEntry(bracket_id=row.get("bracket_id") or None),
    )


def build_request(meeting_data: Dict[str, Any], participant_rows: Iterable[Dict[str, Any]]) -> MeetingRequest:
    """
    Build the engine inputs from cleaned form data.

    Args:
        meeting_data: MeetingForm.cleaned_data
        participant_rows: cleaned_data of each ParticipantForm, in order

    Returns:
        MeetingRequest ready for the engine
    """
    currency = get_currency(meeting_data.get("currency") or "USD")
    context = MeetingContext(
        duration_value=meeting_data.get("duration", ""),
        duration_unit=DurationUnit(meeting_data.get("time_unit") or DurationUnit.HOURS.value),
        currency_multiplier=currency.multiplier,
        has_been_edited=bool(meeting_data.get("has_been_edited")),
    )
    return MeetingRequest(
        meeting_name=meeting_data.get("meeting_name") or DEFAULT_MEETING_NAME,
        participants=[build_participant(row) for row in participant_rows],
        context=context,
        mode=RateMode(meeting_data.get("rate_mode") or RateMode.EXACT.value),
        currency=currency,
    )


def estimate_meeting_cost(request: MeetingRequest) -> Estimate:
    """Run the cost engine for one request."""
    result = estimate(request.participants, request.context, request.mode, request.currency.code)

    if result.error is not None:
        logger.info(
            "Meeting estimate rejected: %s (%d participant(s) failed)",
            result.error.value,
            len(result.failures),
        )
    elif result.summary is None:
        logger.debug("No total available for unedited meeting form")
    else:
        logger.debug(
            "Meeting estimate: %d participant(s), %.4f %s",
            result.summary.participant_count,
            result.summary.total_cost,
            request.currency.code,
        )
    return result


def serialize_bracket(bracket: Bracket) -> Dict[str, Any]:
    return {
        "id": bracket.id,
        "label": bracket.label,
        "min_hourly": bracket.min_hourly,
        "max_hourly": bracket.max_hourly,
        "midpoint_hourly": bracket.midpoint_hourly,
        "open_ended": bracket.open_ended,
    }


def serialize_estimate(request: MeetingRequest, result: Estimate) -> Dict[str, Any]:
    """
    Convert an engine result into a JSON-ready dictionary.

    Raw figures are kept unrounded; the "display" block applies the money
    rounding rule.
    """
    symbol = request.currency.symbol
    payload: Dict[str, Any] = {
        "meeting_name": request.meeting_name,
        "currency": request.currency.code,
        "rate_mode": request.mode.value,
        "error": result.error.value if result.error else None,
        "message": error_message(result.error) if result.error else None,
        "failed_participants": list(result.failures) if result.error else [],
        "summary": None,
        "brackets": [serialize_bracket(b) for b in result.brackets],
    }

    summary = result.summary
    if summary is None:
        return payload

    participants = []
    for position, participant in enumerate(request.participants):
        cost = summary.per_participant_cost[participant.id]
        participants.append({
            "id": participant.id,
            "name": display_name(participant, position),
            "hourly_rate": summary.hourly_rates[participant.id],
            "cost": cost,
            "percentage_share": summary.percentage_share.get(participant.id),
            "display_cost": format_currency(cost, symbol),
        })

    payload["summary"] = {
        "total_cost": summary.total_cost,
        "per_person_average": summary.per_person_average,
        "cost_per_hour": summary.cost_per_hour,
        "cost_per_minute": summary.cost_per_minute,
        "total_person_hours": summary.total_person_hours,
        "duration_hours": summary.duration_hours,
        "participant_count": summary.participant_count,
        "participants": participants,
        "display": {
            "total_cost": format_currency(summary.total_cost, symbol),
            "per_person_average": format_currency(summary.per_person_average, symbol),
            "cost_per_hour": format_currency(summary.cost_per_hour, symbol),
            "cost_per_minute": format_currency(summary.cost_per_minute, symbol),
            "total_person_hours": format_person_hours(summary.total_person_hours),
        },
        "insights": [
            {
                "text": insight.text,
                "source": insight.source,
                "savings": insight.savings,
                "display_savings": (
                    format_currency(insight.savings, symbol) if insight.savings is not None else None
                ),
            }
            for insight in savings_insights(summary, request.context.duration_unit)
        ],
    }
    return payload


def bracket_table(
    currency_code: str,
    previous_currency: Optional[str] = None,
    selected: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Bracket table for a currency, with an optional carried-over selection.

    Args:
        currency_code: Currency to build the table for
        previous_currency: Currency the selection was made in
        selected: Previously selected bracket id

    Returns:
        Dictionary with the currency, its brackets and the reselected id
    """
    if not is_known_currency(currency_code):
        logger.warning("Unknown currency %r, using base multiplier", currency_code)

    currency = get_currency(currency_code)
    table = brackets_for_currency(currency.code)

    reselected = None
    if selected:
        old_table = brackets_for_currency(previous_currency or currency.code)
        reselected = closest_bracket(selected, old_table, table)

    return {
        "currency": currency.code,
        "symbol": currency.symbol,
        "brackets": [serialize_bracket(b) for b in table],
        "selected": reselected,
    }


def catalog() -> Dict[str, Any]:
    """Static choices the calculator front end needs."""
    return {
        "currencies": [
            {"code": c.code, "symbol": c.symbol, "name": c.name, "multiplier": c.multiplier}
            for c in list_currencies()
        ],
        "team_sizes": [{"label": label, "value": value} for label, value in COMMON_TEAM_SIZES],
        "rate_modes": [{"value": mode.value, "label": rate_mode_label(mode)} for mode in RateMode],
        "periodicities": [p.value for p in Periodicity],
        "duration_units": [u.value for u in DurationUnit],
        "max_participants": settings.MEETING_MAX_PARTICIPANTS,
    }
