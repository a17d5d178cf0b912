"""Exceptions raised by the tournament map pipeline."""


class TournamentMapError(Exception):
    """Base class for every error raised by this package."""


class LoadError(TournamentMapError):
    """The tournament data could not be fetched or parsed.

    Fatal for the session: the store stays empty and nothing is retried.
    """


class GeocodeError(TournamentMapError):
    """A location search failed. The previous search location stays active."""

    def __init__(self, query: str, message: str) -> None:
        super().__init__(message)
        self.query = query


class GeocodeNotFound(GeocodeError):
    """The geocoding service returned no result for the query."""


class GeocodeUnavailable(GeocodeError):
    """The geocoding service could not be reached or sent an unusable reply."""
