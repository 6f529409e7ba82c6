"""
Participant roster helpers for the calling layer.

Each operation takes a participant list and returns a new one. The
participant limit is enforced here, not in the cost engine.
"""

import dataclasses
import uuid
from typing import List, Optional, Sequence

from .brackets import closest_bracket
from .domain import Bracket, BracketEntry, ExactEntry, Participant, Periodicity, RateMode
from .policy import MAX_PARTICIPANTS, MIN_DURATION
from .rates import parse_decimal


class ParticipantLimitError(ValueError):
    """Raised when a roster operation would exceed the participant limit."""

    pass


def new_participant_id() -> str:
    return uuid.uuid4().hex


def new_participant(
    name: str = "",
    exact: Optional[ExactEntry] = None,
    bracket: Optional[BracketEntry] = None,
) -> Participant:
    return Participant(
        id=new_participant_id(),
        name=name,
        exact=exact or ExactEntry(),
        bracket=bracket or BracketEntry(),
    )


def _check_limit(count: int, limit: int) -> None:
    if count > limit:
        raise ParticipantLimitError(f"A meeting can have at most {limit} participants")


def add_participant(
    participants: Sequence[Participant],
    limit: int = MAX_PARTICIPANTS,
) -> List[Participant]:
    """Append a participant that copies the last participant's rate entries."""
    _check_limit(len(participants) + 1, limit)
    if participants:
        last = participants[-1]
        added = new_participant(exact=last.exact, bracket=last.bracket)
    else:
        added = new_participant()
    return [*participants, added]


def set_participant_count(
    participants: Sequence[Participant],
    count: int,
    limit: int = MAX_PARTICIPANTS,
) -> List[Participant]:
    """
    Resize the roster to exactly count participants.

    Existing participants are kept in order; new ones copy the first
    participant's rate entries.

    Raises:
        ValueError: If count is below 1
        ParticipantLimitError: If count is above the limit
    """
    if count < 1:
        raise ValueError("A meeting needs at least one participant")
    _check_limit(count, limit)

    kept = list(participants[:count])
    template = participants[0] if participants else None
    while len(kept) < count:
        if template is None:
            kept.append(new_participant())
        else:
            kept.append(new_participant(exact=template.exact, bracket=template.bracket))
    return kept


def remove_participant(participants: Sequence[Participant], participant_id: str) -> List[Participant]:
    """Remove a participant; the last remaining participant is never removed."""
    if len(participants) <= 1:
        return list(participants)
    return [p for p in participants if p.id != participant_id]


def update_participant(
    participants: Sequence[Participant],
    participant_id: str,
    **changes,
) -> List[Participant]:
    return [
        dataclasses.replace(p, **changes) if p.id == participant_id else p
        for p in participants
    ]


def apply_rate_to_all(
    participants: Sequence[Participant],
    mode: RateMode,
    value: str,
    periodicity: Optional[Periodicity] = None,
) -> List[Participant]:
    """
    Write the same live rate to every participant.

    In exact mode value is the amount (periodicity is kept unless given);
    in bracket mode value is the bracket id.
    """
    updated = []
    for participant in participants:
        if RateMode(mode) == RateMode.BRACKET:
            updated.append(dataclasses.replace(participant, bracket=BracketEntry(bracket_id=value)))
        else:
            exact = ExactEntry(
                amount=value,
                periodicity=periodicity or participant.exact.periodicity,
            )
            updated.append(dataclasses.replace(participant, exact=exact))
    return updated


def reselect_brackets(
    participants: Sequence[Participant],
    old_table: Sequence[Bracket],
    new_table: Sequence[Bracket],
) -> List[Participant]:
    """Carry bracket selections over to a regenerated table."""
    updated = []
    for participant in participants:
        selected = closest_bracket(participant.bracket.bracket_id, old_table, new_table)
        if selected == participant.bracket.bracket_id:
            updated.append(participant)
        else:
            updated.append(dataclasses.replace(participant, bracket=BracketEntry(bracket_id=selected)))
    return updated


def clamp_duration(raw: str) -> Optional[str]:
    """
    Apply the duration edit rule.

    Returns:
        The value to store: empty input stays empty, values below the
        minimum become the minimum. None means the edit is rejected.
    """
    raw = (raw or "").strip()
    if raw == "":
        return ""
    value = parse_decimal(raw)
    if value is None:
        return None
    if value < MIN_DURATION:
        return str(MIN_DURATION)
    return raw
