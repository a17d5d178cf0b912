"""
Map and lookup constants: search radius, default view, geocoder settings.

Every tunable number and string used by the pipeline lives here so the other
modules never introduce their own magic values. The web app and the text
interface both read from this module; nothing here is mutated at runtime.
"""

# ---------------------------------------------------------------------------
# Proximity search
# ---------------------------------------------------------------------------
# The location search keeps tournaments within 30 statute miles of the
# geocoded point. Distances are computed in meters, so the radius is stored
# in meters as well.

METERS_PER_MILE: float = 1_609.344
SEARCH_RADIUS_MILES: float = 30.0
SEARCH_RADIUS_METERS: float = SEARCH_RADIUS_MILES * METERS_PER_MILE  # 48,280.32 m

# Mean Earth radius used by the haversine formula (same value Leaflet uses
# for L.LatLng.distanceTo, so the page and the API agree on distances).
EARTH_RADIUS_METERS: float = 6_371_000.0

# ---------------------------------------------------------------------------
# Map view
# ---------------------------------------------------------------------------
# The overview shows the contiguous United States. Year-only filtering always
# returns to it; a successful location search zooms in to SEARCH_ZOOM.

DEFAULT_CENTER: tuple[float, float] = (39.8283, -98.5795)
DEFAULT_ZOOM: int = 4
SEARCH_ZOOM: int = 9

# ---------------------------------------------------------------------------
# Geocoding
# ---------------------------------------------------------------------------
# Nominatim usage policy requires an identifying User-Agent and at most one
# request per second; the page issues one lookup per submitted search.

NOMINATIM_URL: str = "https://nominatim.openstreetmap.org/search"
GEOCODE_COUNTRY_CODES: str = "us"
GEOCODE_USER_AGENT: str = "chess-tournament-map/1.0"
GEOCODE_TIMEOUT_SECONDS: float = 10.0

# ---------------------------------------------------------------------------
# Display text
# ---------------------------------------------------------------------------

NO_RESULTS_MESSAGE: str = "No tournaments found for this year."
NO_RESULTS_NEARBY_MESSAGE: str = "No tournaments found within 30 miles of this location."

# ---------------------------------------------------------------------------
# Data file
# ---------------------------------------------------------------------------

DATA_FETCH_TIMEOUT_SECONDS: float = 10.0
