"""
Value types shared by the store, the render pipeline and the surfaces.

All types are frozen dataclasses: records are immutable after load, and a
RenderOutput is a snapshot that callers can compare for equality (two renders
of the same store and filter state produce equal outputs).
"""

from dataclasses import dataclass, field

from tournaments.constants import DEFAULT_CENTER, DEFAULT_ZOOM


@dataclass(frozen=True)
class Coordinate:
    """A point on the globe in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class TournamentRecord:
    """
    One tournament entry from the data file.

    Attributes:
        name:      Tournament name, e.g. "Spring Open".
        location:  Free-text venue or city, e.g. "Austin, TX".
        year:      Year as a string. Compared by exact string equality.
        latitude:  Venue latitude, or None when the data file has none.
        longitude: Venue longitude, or None when the data file has none.
    """

    name: str
    location: str
    year: str
    latitude: float | None = None
    longitude: float | None = None

    @property
    def has_coordinates(self) -> bool:
        """True when both latitude and longitude are present."""
        return self.latitude is not None and self.longitude is not None

    @property
    def coordinate(self) -> Coordinate | None:
        """Both coordinates as a Coordinate, or None when either is missing."""
        if not self.has_coordinates:
            return None
        return Coordinate(self.latitude, self.longitude)


@dataclass(frozen=True)
class FilterState:
    """
    The filter consulted before every render.

    Attributes:
        selected_year:   Year string chosen in the year selector ("" if none).
        search_location: Centre of the active location search, or None when
                         only the year filter applies.
    """

    selected_year: str = ""
    search_location: Coordinate | None = None


@dataclass(frozen=True)
class MapMarker:
    """A map pin. `popup` is the HTML shown when the pin is clicked."""

    latitude: float
    longitude: float
    popup: str


@dataclass(frozen=True)
class ListEntry:
    """
    One line of the tournament list.

    `on_map` is True when the same record also produced a marker. A
    placeholder entry (shown when nothing matches) carries its message in
    `name` and leaves the other fields empty.
    """

    name: str
    location: str = ""
    year: str = ""
    on_map: bool = False
    placeholder: bool = False


@dataclass(frozen=True)
class MapView:
    """Map centre and zoom level."""

    latitude: float
    longitude: float
    zoom: int


DEFAULT_VIEW = MapView(DEFAULT_CENTER[0], DEFAULT_CENTER[1], DEFAULT_ZOOM)


@dataclass(frozen=True)
class RenderOutput:
    """
    Everything the page draws for one filter state.

    Attributes:
        markers:    Pins to place, one per matching record with coordinates.
        list_items: List entries, one per matching record (or a single
                    placeholder when nothing matches).
        view:       View to move the map to, or None to leave it untouched.
    """

    markers: tuple[MapMarker, ...] = field(default_factory=tuple)
    list_items: tuple[ListEntry, ...] = field(default_factory=tuple)
    view: MapView | None = None
