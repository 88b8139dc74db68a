"""
Tests for the geolocation bridge.
"""

from urllib.parse import parse_qs, urlparse

import pytest  # type: ignore
import responses  # type: ignore

from src.meteologix.core.exceptions import CityNotFoundError, DecodeError
from src.meteologix.models.geolocation import GeoLocation, geolocations_from_list


class TestGeolocationLookup:
    """Test gazetteer requests."""

    @pytest.mark.integration
    def test_top_candidate(self, client, load_fixture):
        with responses.RequestsMock() as rsps:
            rsps.add(
                responses.GET, client.config.geocoder_url,
                json=load_fixture("nominatim_cologne.json"),
            )
            location = client.get_geolocation_by_name("Cologne, Germany")

            url = urlparse(rsps.calls[0].request.url)
            assert parse_qs(url.query) == {"format": ["json"], "q": ["Cologne, Germany"]}

        assert "Cologne" in location.name
        assert "North Rhine-Westphalia" in location.name
        assert "Germany" in location.name
        assert location.latitude == 50.938361
        assert location.longitude == 6.959974
        assert location.place_id == 298938128

    @pytest.mark.integration
    def test_all_candidates(self, client, load_fixture):
        with responses.RequestsMock() as rsps:
            rsps.add(
                responses.GET, client.config.geocoder_url,
                json=load_fixture("nominatim_cologne.json"),
            )
            locations = client.get_geolocations_by_name("Cologne, Germany")

        assert len(locations) == 3
        importances = [loc.importance for loc in locations]
        assert importances == sorted(importances, reverse=True)

    @pytest.mark.integration
    def test_city_not_found(self, client):
        with responses.RequestsMock() as rsps:
            rsps.add(responses.GET, client.config.geocoder_url, json=[])
            with pytest.raises(CityNotFoundError):
                client.get_geolocation_by_name("Nonexisting City")

    @pytest.mark.integration
    def test_location_variant_propagates_city_not_found(self, client):
        with responses.RequestsMock() as rsps:
            rsps.add(responses.GET, client.config.geocoder_url, json=[])
            with pytest.raises(CityNotFoundError):
                client.current_weather_by_location("Nonexisting City")
            assert len(rsps.calls) == 1


class TestGeolocationDecoding:
    """Test candidate decoding."""

    def test_equal_importance_keeps_order(self, load_fixture):
        locations = geolocations_from_list(load_fixture("nominatim_cologne.json"))
        assert [loc.place_id for loc in locations] == [298938128, 299434816, 298948211]

    def test_invalid_latitude(self):
        with pytest.raises(DecodeError):
            GeoLocation.from_dict({"lat": "fifty", "lon": "6.9", "display_name": "X"})

    def test_missing_longitude(self):
        with pytest.raises(DecodeError):
            GeoLocation.from_dict({"lat": "50.9", "display_name": "X"})

    def test_not_a_list(self):
        with pytest.raises(DecodeError):
            geolocations_from_list({"error": "rate limited"})
