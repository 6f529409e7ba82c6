"""
Tests for savings insights.
"""
import unittest

from core.aggregator import aggregate
from core.brackets import generate_brackets
from core.domain import DurationUnit, ExactEntry, MeetingContext, Participant, RateMode
from core.insights import savings_insights


def summary_for(rates, duration="1", unit=DurationUnit.HOURS):
    participants = [
        Participant(id=str(i), exact=ExactEntry(str(rate))) for i, rate in enumerate(rates)
    ]
    context = MeetingContext(duration_value=duration, duration_unit=unit)
    return aggregate(participants, context, RateMode.EXACT, generate_brackets(1)).summary


class TestSavingsInsights(unittest.TestCase):

    def test_agenda_suggestion_always_present(self):
        insights = savings_insights(summary_for([50]), DurationUnit.HOURS)

        self.assertEqual(len(insights), 1)
        self.assertIsNone(insights[0].savings)
        self.assertIn("agendas", insights[0].text)

    def test_long_meeting_suggests_shortening(self):
        summary = summary_for([40, 60], duration="2")

        insights = savings_insights(summary, DurationUnit.HOURS)

        self.assertEqual(len(insights), 2)
        self.assertEqual(insights[0].savings, 50)

    def test_minutes_never_suggest_shortening(self):
        summary = summary_for([40, 60], duration="120", unit=DurationUnit.MINUTES)
        insights = savings_insights(summary, DurationUnit.MINUTES)
        self.assertEqual(len(insights), 1)

    def test_large_meeting_suggests_limiting_attendance(self):
        summary = summary_for([10, 20, 30, 40, 50, 60, 70])

        insights = savings_insights(summary, DurationUnit.HOURS)

        self.assertEqual(len(insights), 2)
        self.assertEqual(insights[0].savings, 30)
        self.assertIn("attendance", insights[0].text)


if __name__ == '__main__':
    unittest.main()
