"""
Savings suggestions derived from a cost summary.
"""

from dataclasses import dataclass
from typing import List, Optional

from .domain import CostSummary, DurationUnit

# Attendance above this size triggers the "limit attendance" suggestion
FOCUSED_GROUP_SIZE = 5


@dataclass(frozen=True)
class Insight:
    text: str
    source: str
    savings: Optional[float] = None


def savings_insights(summary: CostSummary, duration_unit: DurationUnit) -> List[Insight]:
    """
    Build optimization suggestions for a meeting.

    Args:
        summary: Aggregated costs
        duration_unit: Unit the duration was entered in; only meetings
            entered in hours get the shorten suggestion

    Returns:
        Suggestions, the agenda suggestion always last
    """
    insights = []

    if DurationUnit(duration_unit) == DurationUnit.HOURS and summary.duration_hours > 1:
        insights.append(
            Insight(
                text="Consider shortening to a 30-45 minute meeting",
                source="Research shows that shorter, focused meetings improve engagement",
                savings=summary.cost_per_hour * 0.5,
            )
        )

    if summary.participant_count > FOCUSED_GROUP_SIZE:
        lowest = sorted(summary.per_participant_cost.values())
        insights.append(
            Insight(
                text="Limit attendance to essential decision-makers",
                source="Smaller groups reach decisions up to 3x faster",
                savings=sum(lowest[: summary.participant_count - FOCUSED_GROUP_SIZE]),
            )
        )

    insights.append(
        Insight(
            text="Set clear outcomes and share agendas in advance",
            source="Structured meetings are 33% more productive",
        )
    )
    return insights
