"""
Meeting Cost Engine

Pure Python business logic, framework-agnostic.
This module should have NO Django imports.

The caller runs estimate() after every state change and replaces the
previous result; nothing is cached between calls.
"""

from typing import Optional, Sequence

from .aggregator import aggregate
from .brackets import brackets_for_currency, generate_brackets
from .domain import Estimate, MeetingContext, Participant, RateMode
from .validator import validate


def estimate(
    participants: Sequence[Participant],
    context: MeetingContext,
    mode: RateMode,
    currency_code: Optional[str] = None,
) -> Estimate:
    """
    Run the full Validate -> Normalize -> Aggregate pipeline.

    Args:
        participants: Participant snapshots in display order
        context: Meeting settings
        mode: Session-wide rate mode
        currency_code: Catalog currency; if omitted the bracket table is
            built from context.currency_multiplier

    Returns:
        Estimate with either a validation error or a cost summary. In the
        Idle state invalid input yields neither.
    """
    if currency_code:
        brackets = brackets_for_currency(currency_code)
    else:
        brackets = generate_brackets(context.currency_multiplier)

    validation = validate(participants, context, mode, brackets)
    if not validation.is_valid:
        return Estimate(
            error=validation.error,
            summary=None,
            brackets=brackets,
            failures=validation.failures,
        )

    result = aggregate(participants, context, mode, brackets)
    return Estimate(
        error=None,
        summary=result.summary if result.success else None,
        brackets=brackets,
        failures=result.failures,
    )
