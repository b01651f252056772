"""
Data store client tests.

Tests the REST client and business hub operations against a mocked session.
"""

import unittest
from unittest.mock import Mock, patch

import requests  # type: ignore

from src.lagona_location.api import LagonaStoreAPI
from src.lagona_location.models import Coordinates, LocationRecord, TerritoryBounds


def make_response(payload, status_code=200):
    response = Mock()
    response.json.return_value = payload
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    return response


class TestLagonaStoreAPI(unittest.TestCase):
    """Test the data store client."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = LagonaStoreAPI(
            base_url="https://example.supabase.co/",
            api_key="test-key",
            timeout=5,
            logger=Mock()
        )
        self.row = {
            "id": "hub-1",
            "name": "Cebu City Hub",
            "location": {
                "display": "Cebu City",
                "coordinates": {"lat": 10.3157, "lng": 123.8854},
                "validation_status": "valid",
            },
            "territory_boundaries": {"centerLat": 10.33, "centerLng": 123.9, "radiusKm": 15},
        }

    def tearDown(self):
        self.client.close()

    def test_headers(self):
        headers = self.client.session.headers
        self.assertEqual(headers["apikey"], "test-key")
        self.assertEqual(headers["Authorization"], "Bearer test-key")
        self.assertEqual(headers["Accept-Profile"], "public")
        self.assertEqual(self.client.rest_url, "https://example.supabase.co/rest/v1")

    def test_requires_credentials(self):
        with self.assertRaises(ValueError):
            LagonaStoreAPI(base_url="", api_key="k")
        with self.assertRaises(ValueError):
            LagonaStoreAPI(base_url="https://example.supabase.co", api_key="")

    def test_list_business_hubs(self):
        with patch.object(self.client.session, "request", return_value=make_response([self.row])) as request:
            hubs = self.client.list_business_hubs(status="active")

        self.assertEqual(len(hubs), 1)
        self.assertEqual(hubs[0].id, "hub-1")
        self.assertEqual(hubs[0].location.coordinates.lat, 10.3157)
        self.assertEqual(hubs[0].territory_boundaries.radius_km, 15.0)

        kwargs = request.call_args.kwargs
        self.assertEqual(kwargs["method"], "GET")
        self.assertEqual(kwargs["url"], "https://example.supabase.co/rest/v1/business_hubs")
        self.assertEqual(kwargs["params"]["status"], "eq.active")
        self.assertEqual(kwargs["params"]["order"], "created_at.desc")
        self.assertIn("location", kwargs["params"]["select"])
        self.assertEqual(kwargs["timeout"], 5)

    def test_list_business_hubs_unexpected_payload(self):
        with patch.object(self.client.session, "request", return_value=make_response({"message": "x"})):
            self.assertEqual(self.client.list_business_hubs(), [])

    def test_get_business_hub(self):
        with patch.object(self.client.session, "request", return_value=make_response([self.row])) as request:
            hub = self.client.get_business_hub("hub-1")

        self.assertEqual(hub.name, "Cebu City Hub")
        self.assertEqual(request.call_args.kwargs["params"]["id"], "eq.hub-1")

    def test_get_business_hub_not_found(self):
        with patch.object(self.client.session, "request", return_value=make_response([])):
            self.assertIsNone(self.client.get_business_hub("missing"))

    def test_update_hub_location(self):
        record = LocationRecord(display="Cebu City", coordinates=Coordinates(10.3157, 123.8854))
        bounds = TerritoryBounds(center_lat=10.3157, center_lng=123.8854, radius_km=15.0)

        with patch.object(self.client.session, "request", return_value=make_response([self.row])) as request:
            hub = self.client.update_hub_location("hub-1", record, bounds)

        self.assertEqual(hub.id, "hub-1")
        kwargs = request.call_args.kwargs
        self.assertEqual(kwargs["method"], "PATCH")
        self.assertEqual(kwargs["params"], {"id": "eq.hub-1"})
        self.assertEqual(kwargs["headers"], {"Prefer": "return=representation"})
        self.assertEqual(kwargs["json"]["location"]["coordinates"], {"lat": 10.3157, "lng": 123.8854})
        self.assertEqual(kwargs["json"]["territory_boundaries"]["radiusKm"], 15.0)

    def test_update_hub_location_without_bounds(self):
        record = LocationRecord(display="Cebu City", coordinates=Coordinates(10.3157, 123.8854))

        with patch.object(self.client.session, "request", return_value=make_response([])) as request:
            self.assertIsNone(self.client.update_hub_location("hub-1", record))

        self.assertNotIn("territory_boundaries", request.call_args.kwargs["json"])

    def test_http_error_is_raised(self):
        with patch.object(self.client.session, "request", return_value=make_response({}, status_code=401)):
            with self.assertRaises(requests.exceptions.HTTPError):
                self.client.list_business_hubs()

        self.client.logger.error.assert_called_once()


if __name__ == "__main__":
    unittest.main()
