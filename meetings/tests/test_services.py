"""
Tests for meetings services.
"""
from django.conf import settings
from django.test import SimpleTestCase, override_settings

from core.domain import DurationUnit, ErrorKind, Periodicity, RateMode
from core.policy import MAX_PARTICIPANTS
from core.roster import ParticipantLimitError, set_participant_count
from meetings.forms import ParticipantFormSet
from meetings.services import (
    DEFAULT_MEETING_NAME,
    bracket_table,
    build_participant,
    build_request,
    catalog,
    estimate_meeting_cost,
    serialize_estimate,
)


def meeting(**overrides):
    data = {
        "meeting_name": "",
        "duration": "1",
        "time_unit": "hours",
        "currency": "USD",
        "rate_mode": "exact",
        "has_been_edited": True,
    }
    data.update(overrides)
    return data


class BuildRequestTests(SimpleTestCase):
    """Tests for turning cleaned form data into engine inputs."""

    def test_build_participant_keeps_both_entries(self):
        participant = build_participant({
            "participant_id": "a",
            "name": "Ana",
            "amount": "60000",
            "periodicity": "annual",
            "bracket_id": "26-50",
        })

        self.assertEqual(participant.id, "a")
        self.assertEqual(participant.exact.amount, "60000")
        self.assertEqual(participant.exact.periodicity, Periodicity.ANNUAL)
        self.assertEqual(participant.bracket.bracket_id, "26-50")

    def test_build_participant_assigns_missing_id(self):
        first = build_participant({})
        second = build_participant({})

        self.assertTrue(first.id)
        self.assertNotEqual(first.id, second.id)
        self.assertIsNone(first.bracket.bracket_id)

    def test_build_request(self):
        request = build_request(
            meeting(duration="30", time_unit="minutes", currency="EUR", rate_mode="bracket"),
            [{"participant_id": "a", "bracket_id": "0-25"}],
        )

        self.assertEqual(request.meeting_name, DEFAULT_MEETING_NAME)
        self.assertEqual(request.context.duration_unit, DurationUnit.MINUTES)
        self.assertEqual(request.context.currency_multiplier, 0.9)
        self.assertTrue(request.context.has_been_edited)
        self.assertEqual(request.mode, RateMode.BRACKET)
        self.assertEqual(request.currency.symbol, "€")
        self.assertEqual(len(request.participants), 1)


class EstimateMeetingCostTests(SimpleTestCase):
    """Tests for estimate_meeting_cost and serialize_estimate."""

    def test_successful_estimate(self):
        request = build_request(meeting(meeting_name="Standup"), [
            {"participant_id": "a", "name": "Ana", "amount": "40"},
            {"participant_id": "b", "amount": "60"},
        ])

        result = estimate_meeting_cost(request)
        payload = serialize_estimate(request, result)

        self.assertIsNone(payload["error"])
        self.assertEqual(payload["meeting_name"], "Standup")
        self.assertEqual(payload["summary"]["total_cost"], 100)
        self.assertEqual(payload["summary"]["display"]["total_cost"], "$100")
        self.assertEqual(payload["summary"]["display"]["total_person_hours"], "2")
        self.assertEqual(
            [p["name"] for p in payload["summary"]["participants"]], ["Ana", "Person 2"]
        )
        self.assertAlmostEqual(payload["summary"]["participants"][1]["percentage_share"], 60)
        self.assertEqual(len(payload["brackets"]), 9)

    def test_error_estimate(self):
        request = build_request(meeting(), [
            {"participant_id": "a", "amount": "40"},
            {"participant_id": "b", "amount": ""},
        ])

        with self.assertLogs("meetings.services", level="INFO") as logs:
            result = estimate_meeting_cost(request)
        payload = serialize_estimate(request, result)

        self.assertEqual(result.error, ErrorKind.INVALID_AMOUNT)
        self.assertEqual(payload["error"], "invalid_amount")
        self.assertEqual(payload["message"], "Please enter valid hourly rates")
        self.assertEqual(payload["failed_participants"], ["b"])
        self.assertIsNone(payload["summary"])
        self.assertIn("invalid_amount", logs.output[0])

    def test_unedited_form_hides_errors(self):
        request = build_request(meeting(has_been_edited=False), [])

        payload = serialize_estimate(request, estimate_meeting_cost(request))

        self.assertIsNone(payload["error"])
        self.assertIsNone(payload["summary"])

    def test_insights_are_formatted(self):
        request = build_request(meeting(duration="2"), [
            {"participant_id": "a", "amount": "40"},
            {"participant_id": "b", "amount": "60"},
        ])

        payload = serialize_estimate(request, estimate_meeting_cost(request))
        insights = payload["summary"]["insights"]

        self.assertEqual(insights[0]["display_savings"], "$50.00")
        self.assertIsNone(insights[-1]["display_savings"])


class BracketTableTests(SimpleTestCase):
    """Tests for bracket_table."""

    def test_table_for_currency(self):
        table = bracket_table("CAD")

        self.assertEqual(table["symbol"], "C$")
        self.assertEqual(table["brackets"][1]["min_hourly"], 34)
        self.assertEqual(table["brackets"][1]["label"], "C$34-C$65/hr")
        self.assertIsNone(table["selected"])

    def test_selection_carried_over(self):
        table = bracket_table("CAD", previous_currency="USD", selected="26-50")
        self.assertEqual(table["selected"], "26-50")

    def test_unknown_selection_falls_back_to_first(self):
        table = bracket_table("EUR", previous_currency="USD", selected="missing")
        self.assertEqual(table["selected"], "0-25")

    def test_unknown_currency_logs_warning(self):
        with self.assertLogs("meetings.services", level="WARNING"):
            table = bracket_table("XYZ")

        self.assertEqual(table["brackets"][0]["max_hourly"], 25)


class CatalogTests(SimpleTestCase):

    def test_catalog(self):
        data = catalog()

        self.assertEqual(len(data["currencies"]), 12)
        self.assertEqual(data["team_sizes"][0], {"label": "Just me", "value": 1})
        self.assertEqual(data["max_participants"], 20)

    @override_settings(MEETING_MAX_PARTICIPANTS=10)
    def test_catalog_uses_configured_limit(self):
        self.assertEqual(catalog()["max_participants"], 10)

    def test_form_and_roster_share_the_limit(self):
        self.assertEqual(settings.MEETING_MAX_PARTICIPANTS, MAX_PARTICIPANTS)
        self.assertEqual(ParticipantFormSet.max_num, MAX_PARTICIPANTS)
        with self.assertRaises(ParticipantLimitError):
            set_participant_count([], settings.MEETING_MAX_PARTICIPANTS + 1)
