"""
Tests for stored location document extraction.
"""

from src.lagona_location.processing import extractor
from src.lagona_location.processing import extract_legacy_location_data


class TestLocationGetters:
    """Test cases for the individual field getters."""

    def test_getters_read_document(self, hub_rows):
        location = hub_rows[0]["location"]

        assert extractor.get_validation_status(location) == "valid"
        assert extractor.get_within_bounds(location) is True
        assert extractor.get_accuracy(location) == 5.0
        assert extractor.get_source(location) == "user_selection"
        assert extractor.get_coordinates(location) == {"lat": 10.3157, "lng": 123.8854}
        assert extractor.get_plus_code(location) == "7Q63HX8C+5V"
        assert extractor.get_formatted_address(location) == "Osmeña Blvd, Cebu City"
        assert extractor.get_distance_from_center(location) == 0.0
        assert extractor.get_selected_at(location) == "2024-05-01T08:30:00Z"
        assert extractor.get_administrative(location)["barangay"] == "Kalubihan"

    def test_getters_reject_non_documents(self):
        for value in (None, {}, {"coordinates": {"lat": 1.0}}, [], "x"):
            assert extractor.get_validation_status(value) is None
            assert extractor.get_within_bounds(value) is None
            assert extractor.get_coordinates(value) is None
            assert extractor.get_plus_code(value) is None
            assert extractor.get_administrative(value) is None

    def test_missing_territory_fields(self, hub_rows):
        location = dict(hub_rows[1]["location"])
        location.pop("territory")

        assert extractor.get_within_bounds(location) is None
        assert extractor.get_distance_from_center(location) is None
        assert extractor.get_selected_at(location) is None

    def test_zero_distance_is_kept(self):
        location = {
            "coordinates": {"lat": 1.0, "lng": 2.0},
            "territory": {"distance_from_center": 0, "is_within_bounds": False},
        }

        assert extractor.get_distance_from_center(location) == 0
        assert extractor.get_within_bounds(location) is False


class TestLegacyExtraction:
    """Test cases for extract_legacy_location_data."""

    def test_document_values(self, hub_rows):
        result = extract_legacy_location_data(hub_rows[0])

        assert result["location_validation_status"] == "valid"
        assert result["is_within_territory_bounds"] is True
        assert result["location_accuracy_meters"] == 5.0
        assert result["location_source"] == "user_selection"
        assert result["coordinates"] == {"lat": 10.3157, "lng": 123.8854}
        assert result["plus_code"] == "7Q63HX8C+5V"
        assert result["formatted_address"] == "Osmeña Blvd, Cebu City"
        assert result["location_selected_at"] == "2024-05-01T08:30:00Z"

    def test_falls_back_to_legacy_columns(self, hub_rows):
        result = extract_legacy_location_data(hub_rows[2])

        assert result["coordinates"] == {"lat": 7.0731, "lng": 125.6128}
        assert result["plus_code"] == "6QX6C9FC+XX"
        assert result["formatted_address"] == "San Pedro St, Davao City"
        assert result["location_validation_status"] is None
        assert result["is_within_territory_bounds"] is None

    def test_document_wins_over_legacy_columns(self, hub_rows):
        row = dict(hub_rows[0])
        row["plus_code"] = "OLD"
        row["coordinates"] = {"lat": 0.0, "lng": 0.0}

        result = extract_legacy_location_data(row)

        assert result["plus_code"] == "7Q63HX8C+5V"
        assert result["coordinates"] == {"lat": 10.3157, "lng": 123.8854}
