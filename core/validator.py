"""
Validator

Classifies the input set before aggregation. A session starts Idle and
never surfaces errors until the first edit moves it to Active for good.
"""

import dataclasses
from enum import Enum
from typing import Sequence

from .aggregator import duration_in_hours, normalize_all
from .domain import (
    Bracket,
    ErrorKind,
    MeetingContext,
    Participant,
    RateMode,
    ValidationResult,
)


class ValidatorState(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"


def state_for(context: MeetingContext) -> ValidatorState:
    return ValidatorState.ACTIVE if context.has_been_edited else ValidatorState.IDLE


def mark_edited(context: MeetingContext) -> MeetingContext:
    """Return a copy of the context in the Active state. There is no way back."""
    if context.has_been_edited:
        return context
    return dataclasses.replace(context, has_been_edited=True)


def validate(
    participants: Sequence[Participant],
    context: MeetingContext,
    mode: RateMode,
    brackets: Sequence[Bracket],
) -> ValidationResult:
    """
    Validate a snapshot, first failure wins.

    Order: no participants, invalid duration, participant rate errors.
    Rate errors are reported as a single kind; the failing participants
    are listed in ValidationResult.failures.
    """
    if state_for(context) == ValidatorState.IDLE:
        return ValidationResult()

    if not participants:
        return ValidationResult(error=ErrorKind.NO_PARTICIPANTS)

    if duration_in_hours(context) is None:
        return ValidationResult(error=ErrorKind.INVALID_DURATION)

    _, failures = normalize_all(participants, mode, brackets)
    if failures:
        kind = (
            ErrorKind.MISSING_BRACKET
            if RateMode(mode) == RateMode.BRACKET
            else ErrorKind.INVALID_AMOUNT
        )
        return ValidationResult(error=kind, failures=failures)

    return ValidationResult()
