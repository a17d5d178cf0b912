"""
Render Pipeline: records + filter state -> markers, list entries, map view.

render() is a pure function. It reads nothing but its arguments, so the
output for a given store and FilterState is always the same, and it can be
tested without a browser or a map.

Pipeline, in order:
    1. Year filter: exact string match on `year`.
    2. Location filter (only when a search location is set): keep records
       within SEARCH_RADIUS_METERS of it. Records without coordinates drop out.
    3. Markers: one per surviving record that has both coordinates.
    4. List: one entry per surviving record, with or without coordinates.
       A record missing coordinates is listed but never pinned.
    5. Nothing survives: a single placeholder list entry and no markers.
    6. View: without a location filter the map goes back to the default
       overview on every render; with one the view is left alone (the session
       moved it when the search succeeded).
"""

from collections.abc import Iterable
from html import escape

from tournaments.constants import NO_RESULTS_MESSAGE, NO_RESULTS_NEARBY_MESSAGE
from tournaments.models import (
    DEFAULT_VIEW,
    FilterState,
    ListEntry,
    MapMarker,
    RenderOutput,
    TournamentRecord,
)
from tournaments.proximity import within_radius


def popup_html(record: TournamentRecord) -> str:
    """Popup markup for a marker: name in bold, then location and year."""
    return (
        f"<strong>{escape(record.name)}</strong><br>"
        f"{escape(record.location)}<br>"
        f"{escape(record.year)}"
    )


def filter_records(
    records: Iterable[TournamentRecord], filter_state: FilterState
) -> list[TournamentRecord]:
    """Steps 1 and 2: the records that pass the year and location filters."""
    selected = [r for r in records if r.year == filter_state.selected_year]
    center = filter_state.search_location
    if center is not None:
        selected = [r for r in selected if within_radius(r, center)]
    return selected


def render(records: Iterable[TournamentRecord], filter_state: FilterState) -> RenderOutput:
    """
    Produce everything the page draws for the given filter.

    Args:
        records:      All tournament records (the store contents).
        filter_state: Selected year and optional search location.

    Returns:
        RenderOutput with markers, list entries and the view to apply.
    """
    survivors = filter_records(records, filter_state)

    markers = tuple(
        MapMarker(r.latitude, r.longitude, popup_html(r))
        for r in survivors
        if r.has_coordinates
    )

    if survivors:
        list_items = tuple(
            ListEntry(r.name, r.location, r.year, on_map=r.has_coordinates)
            for r in survivors
        )
    else:
        message = (
            NO_RESULTS_NEARBY_MESSAGE
            if filter_state.search_location is not None
            else NO_RESULTS_MESSAGE
        )
        list_items = (ListEntry(message, placeholder=True),)

    view = DEFAULT_VIEW if filter_state.search_location is None else None

    return RenderOutput(markers=markers, list_items=list_items, view=view)
