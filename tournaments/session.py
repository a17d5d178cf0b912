"""
Map Session: the application state object behind one map page.

The session owns the loaded records and the FilterState and applies the page
events to them one at a time:

    Idle(year=Y, loc=None)    --select_year(Y')-->   Idle(year=Y', loc=None)
    Idle(year=Y, loc=None)    --search(q) ok----->   Located(year=Y, loc=C)
    Located(year=Y, loc=C)    --select_year(Y')-->   Located(year=Y', loc=C)
    Located(year=Y, loc=C)    --search("")------->   Idle(year=Y, loc=None)
    Located(year=Y, loc=C)    --search(q) fails-->   Located(year=Y, loc=C)

Every event returns the RenderOutput for the new state. A failed search
raises GeocodeError after leaving the state untouched; the caller shows the
error and the user can retry straight away.

Threading model:
    A session is not shared between threads. Events are applied in the order
    they are called; nothing cancels an earlier search, so when searches
    complete out of order the last one applied wins.
"""

import logging
from collections.abc import Iterable

from tournaments.constants import SEARCH_ZOOM
from tournaments.errors import GeocodeError
from tournaments.geocoder import Geocoder
from tournaments.models import (
    Coordinate,
    FilterState,
    MapView,
    RenderOutput,
    TournamentRecord,
)
from tournaments.render import render
from tournaments.years import default_year, distinct_years

_log = logging.getLogger(__name__)


class MapSession:
    """
    Filter state machine for one page session.

    Attributes:
        records:  The tournament records, immutable for the session.
        years:    Selectable years (Year Index output).
        geocoder: Adapter used by search(). Only needed for non-blank queries.
    """

    def __init__(
        self,
        records: Iterable[TournamentRecord],
        geocoder: Geocoder | None = None,
        initial_year: str | None = None,
    ) -> None:
        self.records: tuple[TournamentRecord, ...] = tuple(records)
        self.years: list[str] = distinct_years(self.records)
        self.geocoder = geocoder
        year = initial_year if initial_year is not None else default_year(self.years)
        self._state = FilterState(selected_year=year)

    # -----------------------------------------------------------------------
    # State accessors
    # -----------------------------------------------------------------------

    @property
    def filter_state(self) -> FilterState:
        return self._state

    @property
    def is_located(self) -> bool:
        """True in the Located state (a search location is active)."""
        return self._state.search_location is not None

    def current(self) -> RenderOutput:
        """Render the current state without changing it."""
        return render(self.records, self._state)

    # -----------------------------------------------------------------------
    # Events
    # -----------------------------------------------------------------------

    def select_year(self, year: str) -> RenderOutput:
        """Change the selected year. An active search location is kept."""
        self._state = FilterState(year, self._state.search_location)
        return self.current()

    def clear_location(self) -> RenderOutput:
        """Drop the search location; the view returns to the overview."""
        if self.is_located:
            _log.info("Location filter cleared")
        self._state = FilterState(self._state.selected_year, None)
        return self.current()

    def set_location(self, location: Coordinate) -> RenderOutput:
        """
        Apply a resolved search location, replacing any previous one.

        Returns the render for the new state with the view centred on the
        location at SEARCH_ZOOM.
        """
        self._state = FilterState(self._state.selected_year, location)
        output = self.current()
        view = MapView(location.latitude, location.longitude, SEARCH_ZOOM)
        return RenderOutput(output.markers, output.list_items, view)

    def search(self, query: str) -> RenderOutput:
        """
        Handle a submitted location search.

        A blank query clears the location filter without any lookup. Any other
        query is geocoded; on success the location is replaced.

        Args:
            query: Text from the location input.

        Returns:
            RenderOutput for the new state.

        Raises:
            GeocodeError: The lookup failed. The filter state is unchanged.
            RuntimeError: No geocoder was given to the session.
        """
        if not query.strip():
            return self.clear_location()

        if self.geocoder is None:
            raise RuntimeError("MapSession has no geocoder for location searches")

        try:
            location = self.geocoder.resolve(query)
        except GeocodeError as exc:
            _log.warning("Search for %r failed, keeping previous filter: %s", query, exc)
            raise

        return self.set_location(location)
