"""
Meeting Cost Domain Types

Snapshot records passed into the cost engine and the results it returns.
Pure Python implementation - NO Django imports.
All records are frozen; the engine never mutates its inputs.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union


class RateMode(str, Enum):
    """Session-wide choice of which compensation representation is live."""

    EXACT = "exact"
    BRACKET = "bracket"


class Periodicity(str, Enum):
    HOURLY = "hourly"
    MONTHLY = "monthly"
    ANNUAL = "annual"


class DurationUnit(str, Enum):
    HOURS = "hours"
    MINUTES = "minutes"


class ErrorKind(str, Enum):
    """Recoverable input errors reported by the engine."""

    NO_PARTICIPANTS = "no_participants"
    INVALID_DURATION = "invalid_duration"
    INVALID_AMOUNT = "invalid_amount"
    MISSING_BRACKET = "missing_bracket"


@dataclass(frozen=True)
class ExactEntry:
    """A compensation figure typed in by the user."""

    amount: str = ""
    periodicity: Periodicity = Periodicity.HOURLY


@dataclass(frozen=True)
class BracketEntry:
    """A salary bracket picked instead of an exact figure."""

    bracket_id: Optional[str] = None


RateEntry = Union[ExactEntry, BracketEntry]


@dataclass(frozen=True)
class Participant:
    """
    One attendee's compensation record.

    Both representations are kept so that switching the rate mode loses
    nothing, but only the one returned by entry_for() feeds calculation.
    """

    id: str
    name: str = ""
    exact: ExactEntry = field(default_factory=ExactEntry)
    bracket: BracketEntry = field(default_factory=BracketEntry)

    def entry_for(self, mode: RateMode) -> RateEntry:
        """Return the live rate entry for the given session mode."""
        if mode == RateMode.BRACKET:
            return self.bracket
        return self.exact


@dataclass(frozen=True)
class MeetingContext:
    """Session-wide meeting settings."""

    duration_value: str = "1"
    duration_unit: DurationUnit = DurationUnit.HOURS
    currency_multiplier: float = 1.0
    has_been_edited: bool = False


@dataclass(frozen=True)
class Currency:
    code: str
    symbol: str
    name: str
    multiplier: float


@dataclass(frozen=True)
class Bracket:
    """A compensation range in the active currency's hourly terms."""

    id: str
    label: str
    min_hourly: int
    max_hourly: int
    open_ended: bool = False

    @property
    def midpoint_hourly(self) -> float:
        return (self.min_hourly + self.max_hourly) / 2


@dataclass(frozen=True)
class RateResult:
    """Result of normalizing one participant to an hourly rate."""

    success: bool
    hourly_rate: Optional[float] = None
    error: Optional[ErrorKind] = None


@dataclass(frozen=True)
class CostSummary:
    """Aggregated meeting cost figures, unrounded."""

    total_cost: float
    per_participant_cost: Dict[str, float]
    per_person_average: float
    cost_per_hour: float
    cost_per_minute: float
    total_person_hours: float
    percentage_share: Dict[str, float]
    duration_hours: float
    participant_count: int
    hourly_rates: Dict[str, float]
    total_hourly_rate: float


@dataclass(frozen=True)
class AggregateResult:
    """Result of aggregating a full participant list."""

    success: bool
    summary: Optional[CostSummary] = None
    error: Optional[ErrorKind] = None
    failures: Dict[str, ErrorKind] = field(default_factory=dict)


@dataclass(frozen=True)
class ValidationResult:
    error: Optional[ErrorKind] = None
    failures: Dict[str, ErrorKind] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class Estimate:
    """Output of one full recompute: validation outcome, totals and brackets."""

    error: Optional[ErrorKind]
    summary: Optional[CostSummary]
    brackets: List[Bracket]
    failures: Dict[str, ErrorKind] = field(default_factory=dict)

    @property
    def total_cost(self) -> Optional[float]:
        return self.summary.total_cost if self.summary else None
