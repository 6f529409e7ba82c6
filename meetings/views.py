import logging

from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from .forms import MeetingForm, ParticipantFormSet
from .services import (
    bracket_table,
    build_request,
    catalog,
    estimate_meeting_cost,
    serialize_estimate,
)

logger = logging.getLogger(__name__)

PARTICIPANT_PREFIX = "participants"


@require_GET
def index(request):
    """Choices the calculator needs to build its form."""
    return JsonResponse(catalog())


@require_GET
def brackets(request):
    """
    Bracket table for a currency.

    GET ?currency=EUR&previous=USD&selected=26-50 also returns the bracket
    the previous selection maps to.
    """
    currency = request.GET.get("currency") or settings.MEETING_DEFAULT_CURRENCY
    return JsonResponse(
        bracket_table(
            currency,
            previous_currency=request.GET.get("previous") or None,
            selected=request.GET.get("selected") or None,
        )
    )


@csrf_exempt
@require_POST
def estimate(request):
    """
    Recompute the meeting cost.

    POST: meeting fields plus a participant formset. Engine errors come back
    with status 200 and no summary; malformed submissions get status 400.
    The endpoint is stateless and takes no CSRF token.
    """
    form = MeetingForm(request.POST)
    formset = ParticipantFormSet(request.POST, prefix=PARTICIPANT_PREFIX)

    if not (form.is_valid() and formset.is_valid()):
        logger.warning("Rejected meeting submission with invalid form data")
        return JsonResponse(
            {
                "errors": form.errors.get_json_data(),
                "participant_errors": [f.errors.get_json_data() for f in formset.forms],
                "formset_errors": [str(error) for error in formset.non_form_errors()],
            },
            status=400,
        )

    meeting = build_request(form.cleaned_data, [f.cleaned_data for f in formset.forms])
    result = estimate_meeting_cost(meeting)
    return JsonResponse(serialize_estimate(meeting, result))
