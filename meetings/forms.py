"""
Forms for the meetings application.

Forms only check the request shape (choices, lengths, participant count).
Whether the numbers make sense is decided by the cost engine.
"""
from django import forms
from django.conf import settings
from django.forms import formset_factory

from core.domain import DurationUnit, Periodicity, RateMode
from core.policy import CURRENCIES
from core.roster import clamp_duration


DURATION_UNIT_CHOICES = [
    (DurationUnit.HOURS.value, "Hours"),
    (DurationUnit.MINUTES.value, "Minutes"),
]

RATE_MODE_CHOICES = [
    (RateMode.EXACT.value, "Exact rates"),
    (RateMode.BRACKET.value, "Salary ranges"),
]

PERIODICITY_CHOICES = [
    (Periodicity.HOURLY.value, "Hourly"),
    (Periodicity.MONTHLY.value, "Monthly"),
    (Periodicity.ANNUAL.value, "Annual"),
]

CURRENCY_CHOICES = [(code, f"{code} ({name})") for code, (_, name, _) in CURRENCIES.items()]


class MeetingForm(forms.Form):
    """Meeting-wide settings for one recompute."""

    meeting_name = forms.CharField(max_length=100, required=False)
    duration = forms.CharField(max_length=32, required=False)
    time_unit = forms.ChoiceField(choices=DURATION_UNIT_CHOICES, required=False)
    currency = forms.ChoiceField(choices=CURRENCY_CHOICES, required=False)
    rate_mode = forms.ChoiceField(choices=RATE_MODE_CHOICES, required=False)
    has_been_edited = forms.BooleanField(required=False)

    def clean_duration(self):
        """Clamp numeric durations to the minimum; leave anything else for the engine."""
        raw = self.cleaned_data.get("duration", "")
        clamped = clamp_duration(raw)
        if clamped is None:
            return raw.strip()
        return clamped

    def clean_time_unit(self):
        return self.cleaned_data.get("time_unit") or DurationUnit.HOURS.value

    def clean_currency(self):
        return self.cleaned_data.get("currency") or settings.MEETING_DEFAULT_CURRENCY

    def clean_rate_mode(self):
        return self.cleaned_data.get("rate_mode") or RateMode.EXACT.value


class ParticipantForm(forms.Form):
    """One attendee row. Both rate representations may be submitted."""

    participant_id = forms.CharField(max_length=64, required=False)
    name = forms.CharField(max_length=100, required=False)
    amount = forms.CharField(max_length=32, required=False)
    periodicity = forms.ChoiceField(choices=PERIODICITY_CHOICES, required=False)
    bracket_id = forms.CharField(max_length=32, required=False)

    def clean_periodicity(self):
        return self.cleaned_data.get("periodicity") or Periodicity.HOURLY.value


class BaseParticipantFormSet(forms.BaseFormSet):
    def clean(self):
        """Participant ids must be unique within the meeting."""
        if any(self.errors):
            return
        seen = set()
        for form in self.forms:
            participant_id = form.cleaned_data.get("participant_id")
            if not participant_id:
                continue
            if participant_id in seen:
                raise forms.ValidationError(f"Duplicate participant id: {participant_id}")
            seen.add(participant_id)


ParticipantFormSet = formset_factory(
    ParticipantForm,
    formset=BaseParticipantFormSet,
    extra=0,
    max_num=settings.MEETING_MAX_PARTICIPANTS,
    validate_max=True,
)
