"""
Tests for the backend REST client.

The HTTP session is mocked; no network access is needed.
"""

import unittest
from datetime import date
from unittest.mock import Mock, patch

import requests

from src.smartrice.api import SmartRiceAPI


def make_response(payload, content=b"[]"):
    response = Mock()
    response.json.return_value = payload
    response.content = content
    response.raise_for_status.return_value = None
    return response


class TestSmartRiceAPI(unittest.TestCase):
    """Test the table operations of the API client."""

    def setUp(self):
        """Set up test fixtures."""
        self.api = SmartRiceAPI(
            base_url="https://example.supabase.co/",
            api_key="anon-key",
            logger=Mock()
        )
        self.request = Mock(return_value=make_response([]))
        self.api.session.request = self.request

    def tearDown(self):
        self.api.close()

    def test_headers(self):
        headers = self.api.session.headers
        self.assertEqual(headers["apikey"], "anon-key")
        self.assertEqual(headers["Authorization"], "Bearer anon-key")

    def test_set_access_token(self):
        self.api.set_access_token("user-token")
        self.assertEqual(self.api.session.headers["Authorization"], "Bearer user-token")
        self.assertEqual(self.api.session.headers["apikey"], "anon-key")

    def test_requires_api_key(self):
        with self.assertRaises(ValueError):
            SmartRiceAPI(base_url="https://example.supabase.co", api_key="")

    def test_fetch_harvest_logs(self):
        rows = [{"id": "h1", "actual_harvest_date": "2025-06-10"}]
        self.request.return_value = make_response(rows)

        result = self.api.fetch_harvest_logs()

        self.assertEqual(result, rows)
        kwargs = self.request.call_args.kwargs
        self.assertEqual(kwargs["method"], "GET")
        self.assertEqual(kwargs["url"], "https://example.supabase.co/rest/v1/harvest_logs")
        self.assertEqual(kwargs["params"], {"select": "*", "order": "created_at.desc"})

    def test_fetch_planting_logs(self):
        self.api.fetch_planting_logs()
        self.assertTrue(self.request.call_args.kwargs["url"].endswith("/rest/v1/planting_logs"))

    def test_fetch_daily_rainfall_since(self):
        self.api.fetch_daily_rainfall(since=date(2025, 6, 1), limit=7)

        params = self.request.call_args.kwargs["params"]
        self.assertEqual(params["select"], "date,rainfall_amount")
        self.assertEqual(params["order"], "date.desc")
        self.assertEqual(params["date"], "gte.2025-06-01")
        self.assertEqual(params["limit"], 7)

    def test_non_list_response(self):
        self.request.return_value = make_response({"message": "unexpected"})
        self.assertEqual(self.api.fetch_recommendations(), [])

    def test_insert_comparisons(self):
        rows = [{"harvest_log_id": "h1", "timing_difference_days": 9}]
        self.request.return_value = make_response(rows, content=b"[{}]")

        result = self.api.insert_comparisons(rows)

        self.assertEqual(result, rows)
        kwargs = self.request.call_args.kwargs
        self.assertEqual(kwargs["method"], "POST")
        self.assertEqual(kwargs["json"], rows)
        self.assertEqual(kwargs["headers"], {"Prefer": "return=representation"})

    def test_insert_nothing(self):
        self.assertEqual(self.api.insert_comparisons([]), [])
        self.request.assert_not_called()

    def test_request_failure_is_logged_and_raised(self):
        response = make_response(None)
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("401 Unauthorized")
        self.request.return_value = response

        with self.assertRaises(requests.exceptions.HTTPError):
            self.api.fetch_harvest_logs()
        self.api.logger.error.assert_called_once()

    def test_context_manager_closes_session(self):
        with patch.object(self.api.session, "close") as close:
            with self.api:
                pass
        close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
