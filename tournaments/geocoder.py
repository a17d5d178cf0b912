"""
Geocoder Adapter: free-text place name -> coordinate, via OpenStreetMap Nominatim.

One search issues exactly one GET request, restricted to the United States and
to a single result:

    GET https://nominatim.openstreetmap.org/search
        ?q=<query>&format=json&limit=1&countrycodes=us

The reply is a JSON array; its first element carries `lat` and `lon` as
strings. An empty array means the place is unknown.

Failures are split in two so callers can log them differently, even though
the page reports both the same way:
    GeocodeNotFound   : the service answered but found nothing
    GeocodeUnavailable: network error, non-2xx status, or a malformed reply

Blank queries never reach the network. Clearing the location filter is a
session decision (see tournaments/session.py), so resolve() refuses them.
"""

import logging

import requests

from tournaments.constants import (
    GEOCODE_COUNTRY_CODES,
    GEOCODE_TIMEOUT_SECONDS,
    GEOCODE_USER_AGENT,
    NOMINATIM_URL,
)
from tournaments.errors import GeocodeNotFound, GeocodeUnavailable
from tournaments.models import Coordinate

_log = logging.getLogger(__name__)


class Geocoder:
    """
    Thin client for the Nominatim search endpoint.

    Attributes:
        url:           Search endpoint URL.
        country_codes: Comma-separated ISO country codes limiting the search.
        timeout:       Per-request timeout in seconds.
        session:       requests.Session used for the HTTP call. Tests swap in
                       a fake session to avoid the network.
    """

    def __init__(
        self,
        url: str = NOMINATIM_URL,
        country_codes: str = GEOCODE_COUNTRY_CODES,
        timeout: float = GEOCODE_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.url = url
        self.country_codes = country_codes
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": GEOCODE_USER_AGENT})

    def resolve(self, query: str) -> Coordinate:
        """
        Look up a place name.

        Args:
            query: Free-text place, e.g. "Austin, TX". Must not be blank.

        Returns:
            The coordinate of the best match.

        Raises:
            ValueError:         query is blank.
            GeocodeNotFound:    no match for the query.
            GeocodeUnavailable: request failed or the reply was unusable.
        """
        query = query.strip()
        if not query:
            raise ValueError("Geocoder query must not be blank")

        params = {
            "q": query,
            "format": "json",
            "limit": 1,
            "countrycodes": self.country_codes,
        }
        _log.debug("Geocoding %r", query)

        try:
            response = self.session.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
            results = response.json()
        except (requests.RequestException, ValueError) as exc:
            _log.warning("Geocoding service failed for %r: %s", query, exc)
            raise GeocodeUnavailable(query, f"Geocoding service unavailable: {exc}") from exc

        if not isinstance(results, list):
            _log.warning("Unexpected geocoder reply for %r: %r", query, results)
            raise GeocodeUnavailable(query, "Geocoding service sent an unexpected reply")

        if not results:
            _log.info("No geocoding result for %r", query)
            raise GeocodeNotFound(query, f"Location not found: {query}")

        first = results[0]
        try:
            coordinate = Coordinate(float(first["lat"]), float(first["lon"]))
        except (KeyError, TypeError, ValueError) as exc:
            _log.warning("Malformed geocoder result for %r: %r", query, first)
            raise GeocodeUnavailable(query, "Geocoding service sent a malformed result") from exc

        _log.info(
            "Geocoded %r to (%.4f, %.4f)", query, coordinate.latitude, coordinate.longitude
        )
        return coordinate
