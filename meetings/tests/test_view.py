"""
Tests for meetings views.
"""
from unittest.mock import patch

from django.test import Client, SimpleTestCase
from django.urls import reverse

from core.domain import Estimate, ErrorKind

from .test_forms import formset_data


class IndexViewTests(SimpleTestCase):
    """Tests for the catalog endpoint."""

    def setUp(self):
        self.client = Client()
        self.url = reverse('meetings:index')

    def test_index_returns_catalog(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertIn('currencies', data)
        self.assertEqual(data['rate_modes'][0]['value'], 'exact')

    def test_index_rejects_post(self):
        response = self.client.post(self.url)
        self.assertEqual(response.status_code, 405)


class BracketsViewTests(SimpleTestCase):
    """Tests for the bracket table endpoint."""

    def setUp(self):
        self.client = Client()
        self.url = reverse('meetings:brackets')

    def test_default_currency(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['currency'], 'USD')
        self.assertEqual(response.json()['brackets'][-1]['label'], '$500+/hr')

    def test_reselection(self):
        response = self.client.get(
            self.url, {'currency': 'GBP', 'previous': 'USD', 'selected': '151-200'}
        )

        data = response.json()
        self.assertEqual(data['selected'], '151-200')
        self.assertEqual(data['symbol'], '£')


class EstimateViewTests(SimpleTestCase):
    """Tests for the estimate endpoint."""

    def setUp(self):
        self.client = Client()
        self.url = reverse('meetings:estimate')

    def post(self, meeting, rows):
        data = dict(meeting)
        data.update(formset_data(rows))
        return self.client.post(self.url, data)

    def test_get_not_allowed(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 405)

    def test_single_hourly_participant(self):
        response = self.post(
            {'duration': '1', 'has_been_edited': 'on'},
            [{'participant_id': 'a', 'amount': '50', 'periodicity': 'hourly'}],
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertIsNone(data['error'])
        self.assertEqual(data['summary']['total_cost'], 50)
        self.assertEqual(data['summary']['display']['total_cost'], '$50.00')

    def test_post_without_csrf_token(self):
        """A client that enforces CSRF checks can still post estimates."""
        client = Client(enforce_csrf_checks=True)
        data = {'duration': '1', 'has_been_edited': 'on'}
        data.update(formset_data([{'participant_id': 'a', 'amount': '50'}]))

        response = client.post(self.url, data)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['summary']['total_cost'], 50)

    def test_bracket_mode_in_other_currency(self):
        response = self.post(
            {'duration': '1', 'has_been_edited': 'on', 'rate_mode': 'bracket', 'currency': 'CAD'},
            [{'participant_id': 'a', 'bracket_id': '26-50'}],
        )

        data = response.json()
        self.assertEqual(data['summary']['total_cost'], 49.5)
        self.assertEqual(data['summary']['display']['total_cost'], 'C$49.50')

    def test_engine_error_is_reported(self):
        response = self.post(
            {'duration': '1', 'has_been_edited': 'on', 'rate_mode': 'bracket'},
            [{'participant_id': 'a'}, {'participant_id': 'b', 'bracket_id': '0-25'}],
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['error'], 'missing_bracket')
        self.assertEqual(data['message'], 'Please select salary ranges for all participants')
        self.assertIsNone(data['summary'])

    def test_no_participants(self):
        response = self.post({'duration': '1', 'has_been_edited': 'on'}, [])

        data = response.json()
        self.assertEqual(data['error'], 'no_participants')
        self.assertIsNone(data['summary'])

    def test_invalid_duration(self):
        response = self.post(
            {'duration': 'later', 'has_been_edited': 'on'},
            [{'participant_id': 'a', 'amount': '50'}],
        )
        self.assertEqual(response.json()['error'], 'invalid_duration')

    def test_unedited_form_shows_no_error(self):
        response = self.post({'duration': '1'}, [{'participant_id': 'a', 'amount': ''}])

        data = response.json()
        self.assertIsNone(data['error'])
        self.assertIsNone(data['summary'])

    def test_too_many_participants(self):
        rows = [{'participant_id': str(i), 'amount': '10'} for i in range(21)]

        response = self.post({'duration': '1', 'has_been_edited': 'on'}, rows)

        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.json()['formset_errors'])

    def test_invalid_choice(self):
        response = self.post(
            {'duration': '1', 'currency': 'ZZZ'},
            [{'participant_id': 'a', 'amount': '10'}],
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn('currency', response.json()['errors'])

    def test_missing_management_form(self):
        response = self.client.post(self.url, {'duration': '1'})
        self.assertEqual(response.status_code, 400)

    @patch('meetings.views.estimate_meeting_cost')
    def test_view_uses_service_result(self, mock_estimate):
        mock_estimate.return_value = Estimate(
            error=ErrorKind.INVALID_DURATION, summary=None, brackets=[]
        )

        response = self.post(
            {'duration': '1', 'has_been_edited': 'on'},
            [{'participant_id': 'a', 'amount': '10'}],
        )

        self.assertEqual(response.json()['error'], 'invalid_duration')
        self.assertEqual(response.json()['brackets'], [])
        mock_estimate.assert_called_once()
