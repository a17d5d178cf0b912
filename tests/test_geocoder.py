import pytest
import requests

from conftest import FakeResponse, FakeSession
from tournaments.errors import GeocodeError, GeocodeNotFound, GeocodeUnavailable
from tournaments.geocoder import Geocoder
from tournaments.models import Coordinate


def _geocoder(*responses):
    session = FakeSession(*responses)
    return Geocoder(session=session), session


class TestResolve:
    def test_success(self):
        geocoder, session = _geocoder(FakeResponse([{"lat": "30.2672", "lon": "-97.7431"}]))
        assert geocoder.resolve("Austin, TX") == Coordinate(30.2672, -97.7431)

    def test_request_parameters(self):
        geocoder, session = _geocoder(FakeResponse([{"lat": "1", "lon": "2"}]))
        geocoder.resolve("  Austin, TX ")
        (call,) = session.calls
        assert call["url"] == "https://nominatim.openstreetmap.org/search"
        assert call["params"] == {
            "q": "Austin, TX",
            "format": "json",
            "limit": 1,
            "countrycodes": "us",
        }
        assert call["timeout"] > 0
        assert "User-Agent" in session.headers

    def test_blank_query_is_not_sent(self):
        geocoder, session = _geocoder()
        with pytest.raises(ValueError):
            geocoder.resolve("   ")
        assert session.calls == []

    def test_no_results(self):
        geocoder, _ = _geocoder(FakeResponse([]))
        with pytest.raises(GeocodeNotFound) as info:
            geocoder.resolve("Atlantis")
        assert info.value.query == "Atlantis"

    def test_http_error(self):
        geocoder, _ = _geocoder(FakeResponse(status_code=503))
        with pytest.raises(GeocodeUnavailable):
            geocoder.resolve("Austin")

    def test_connection_error(self):
        geocoder, _ = _geocoder(requests.ConnectionError("no route"))
        with pytest.raises(GeocodeUnavailable):
            geocoder.resolve("Austin")

    def test_malformed_json(self):
        geocoder, _ = _geocoder(FakeResponse(text="oops"))
        with pytest.raises(GeocodeUnavailable):
            geocoder.resolve("Austin")

    def test_unparseable_coordinates(self):
        geocoder, _ = _geocoder(FakeResponse([{"lat": "north", "lon": "-97"}]))
        with pytest.raises(GeocodeUnavailable):
            geocoder.resolve("Austin")

    def test_missing_coordinates(self):
        geocoder, _ = _geocoder(FakeResponse([{"display_name": "Austin"}]))
        with pytest.raises(GeocodeUnavailable):
            geocoder.resolve("Austin")

    def test_both_failures_share_a_base_class(self):
        assert issubclass(GeocodeNotFound, GeocodeError)
        assert issubclass(GeocodeUnavailable, GeocodeError)
