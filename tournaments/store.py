"""
Tournament Store: one-shot loader for the tournament data file.

The data file is a JSON array of objects with `name`, `location`, `year` and
optional `latitude`/`longitude`. It is read exactly once per session, either
from a local path or over HTTP. Any failure raises LoadError and leaves the
store empty; there is no retry and no partial population.
"""

import json
import logging
import math
import os
from collections.abc import Iterator, Sequence
from pathlib import Path

import requests

from tournaments.constants import DATA_FETCH_TIMEOUT_SECONDS
from tournaments.errors import LoadError
from tournaments.models import TournamentRecord

_log = logging.getLogger(__name__)


def _parse_coordinate(value: object) -> float | None:
    """Return a finite JSON number as float; anything else counts as missing."""
    # bool is a subclass of int, but `true` is not a latitude.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    # json accepts NaN and Infinity literals; they cannot be placed on a map.
    if not math.isfinite(number):
        return None
    return number


def _as_text(value: object) -> str:
    if value is None:
        return ""
    return str(value)


def parse_records(data: object) -> list[TournamentRecord]:
    """
    Convert a decoded JSON document into tournament records.

    Args:
        data: The decoded JSON value. Must be a list of objects.

    Returns:
        Records in file order.

    Raises:
        LoadError: The document is not an array, or an element is not an object.
    """
    if not isinstance(data, list):
        raise LoadError(f"Expected a JSON array of tournaments, got {type(data).__name__}")

    records: list[TournamentRecord] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise LoadError(f"Tournament #{index} is not a JSON object")
        records.append(
            TournamentRecord(
                name=_as_text(item.get("name")),
                location=_as_text(item.get("location")),
                year=_as_text(item.get("year")),
                latitude=_parse_coordinate(item.get("latitude")),
                longitude=_parse_coordinate(item.get("longitude")),
            )
        )
    return records


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch_url(url: str, session: requests.Session | None) -> object:
    http = session or requests.Session()
    try:
        response = http.get(url, timeout=DATA_FETCH_TIMEOUT_SECONDS)
    except requests.RequestException as exc:
        raise LoadError(f"Could not fetch tournament data from {url}: {exc}") from exc

    if not response.ok:
        raise LoadError(f"HTTP error! Status: {response.status_code}")

    try:
        return response.json()
    except ValueError as exc:
        raise LoadError(f"Tournament data at {url} is not valid JSON: {exc}") from exc


def _read_file(path: Path) -> object:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as exc:
        raise LoadError(f"Could not read tournament data file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise LoadError(f"Tournament data file {path} is not valid JSON: {exc}") from exc


class TournamentStore:
    """
    In-memory, ordered, read-only collection of tournament records.

    The store starts empty. load() replaces the contents in one step once the
    whole document has been fetched and parsed, so a failed load never leaves
    a half-filled store behind.

    Attributes:
        load_error: Message of the last failed load, or None.
    """

    def __init__(self, records: Sequence[TournamentRecord] = ()) -> None:
        self._records: tuple[TournamentRecord, ...] = tuple(records)
        self.load_error: str | None = None

    def load(
        self,
        source: str | os.PathLike,
        session: requests.Session | None = None,
    ) -> tuple[TournamentRecord, ...]:
        """
        Fetch and parse the data file, replacing the store contents.

        Args:
            source:  Local file path, or an http(s) URL.
            session: Optional requests session used for URL sources.

        Returns:
            The loaded records.

        Raises:
            LoadError: Fetch failed, status was not 2xx, or the JSON is
                       malformed. The store is emptied and load_error is set.
        """
        source_text = os.fspath(source)
        try:
            if _is_url(source_text):
                data = _fetch_url(source_text, session)
            else:
                data = _read_file(Path(source_text))
            records = parse_records(data)
        except LoadError as exc:
            self._records = ()
            self.load_error = str(exc)
            _log.error("Could not load tournament data: %s", exc)
            raise

        self._records = tuple(records)
        self.load_error = None
        _log.info("Loaded %d tournaments from %s", len(self._records), source_text)
        return self._records

    @property
    def records(self) -> tuple[TournamentRecord, ...]:
        return self._records

    @property
    def loaded(self) -> bool:
        """True when the last load succeeded (or records were given directly)."""
        return self.load_error is None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TournamentRecord]:
        return iter(self._records)
