"""
Tests for the station search.
"""

from urllib.parse import parse_qs, urlparse

import pytest  # type: ignore
import responses  # type: ignore

from src.meteologix.core.exceptions import NoStationFoundError, RadiusTooSmallError
from src.meteologix.models.precision import Precision
from src.meteologix.models.station import stations_from_list


class TestStationSearch:
    """Test station search requests."""

    @pytest.mark.integration
    def test_default_radius(self, client, load_fixture):
        with responses.RequestsMock() as rsps:
            rsps.add(
                responses.GET, f"{client.base_url}/station/search/50.9833/6.9833",
                json=load_fixture("stations.json"),
            )
            stations = client.station_search_by_coordinates(50.9833, 6.9833)

            url = urlparse(rsps.calls[0].request.url)
            assert parse_qs(url.query) == {"radius": ["10"]}

        assert len(stations) == 4

    @pytest.mark.integration
    def test_within_radius(self, client, load_fixture):
        with responses.RequestsMock() as rsps:
            rsps.add(
                responses.GET, f"{client.base_url}/station/search/50.9833/6.9833",
                json=load_fixture("stations.json"),
            )
            client.station_search_by_coordinates_within_radius(50.9833, 6.9833, 25)

            url = urlparse(rsps.calls[0].request.url)
            assert parse_qs(url.query) == {"radius": ["25"]}

    @pytest.mark.parametrize("radius", [0, -5])
    def test_radius_too_small(self, client, radius):
        with responses.RequestsMock() as rsps:
            with pytest.raises(RadiusTooSmallError, match="radius too small"):
                client.station_search_by_coordinates_within_radius(50.9833, 6.9833, radius)
            with pytest.raises(RadiusTooSmallError):
                client.station_search_by_location_within_radius("Cologne", radius)
            assert len(rsps.calls) == 0

    @pytest.mark.integration
    def test_no_station_found(self, client):
        with responses.RequestsMock() as rsps:
            rsps.add(
                responses.GET, f"{client.base_url}/station/search/50.9833/6.9833",
                json=[],
            )
            with pytest.raises(NoStationFoundError, match="no station found"):
                client.station_search_by_coordinates(50.9833, 6.9833)

    @pytest.mark.integration
    def test_by_location(self, client, load_fixture):
        with responses.RequestsMock() as rsps:
            rsps.add(
                responses.GET, client.config.geocoder_url,
                json=load_fixture("nominatim_cologne.json"),
            )
            rsps.add(
                responses.GET, f"{client.base_url}/station/search/50.938361/6.959974",
                json=load_fixture("stations.json"),
            )
            stations = client.station_search_by_location("Cologne, Germany")

        assert stations[0].id == "A1DE24"


class TestStationDecoding:
    """Test decoding and ordering of station entries."""

    def test_ordered_by_distance(self, load_fixture):
        stations = stations_from_list(load_fixture("stations.json"))
        distances = [s.distance for s in stations]
        assert distances == sorted(distances)
        assert [s.id for s in stations] == ["A1DE24", "K428", "Q112", "H744"]

    def test_fields(self, load_fixture):
        stations = {s.id: s for s in stations_from_list(load_fixture("stations.json"))}

        ehrenfeld = stations["A1DE24"]
        assert ehrenfeld.name == "Koeln-Ehrenfeld"
        assert ehrenfeld.altitude == 54
        assert ehrenfeld.precision == Precision.SUPER_HIGH
        assert ehrenfeld.recently_active is True
        assert ehrenfeld.type is None

        assert stations["H744"].type == "synop"
        assert stations["H744"].precision == Precision.STANDARD
        assert stations["K428"].precision == Precision.HIGH
        assert stations["Q112"].precision == Precision.UNKNOWN
        assert stations["Q112"].altitude is None
