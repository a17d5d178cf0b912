"""
Year Index: the years offered by the year selector.

Years are kept as strings throughout, exactly as they appear in the data file,
so sorting is lexicographic. For four-digit years that is also numeric order.
"""

import datetime
from collections.abc import Iterable

from tournaments.models import TournamentRecord


def distinct_years(records: Iterable[TournamentRecord]) -> list[str]:
    """
    Unique, non-empty years across all records, sorted ascending.

    Args:
        records: Tournament records in any order.

    Returns:
        Sorted list of year strings without duplicates.
    """
    return sorted({record.year for record in records if record.year})


def default_year(years: list[str], today: datetime.date | None = None) -> str:
    """
    Pick the year selected when the page first loads.

    The current calendar year wins if any tournament is in it; otherwise the
    first (earliest) available year; otherwise "" when there are no years.

    Args:
        years: Output of distinct_years().
        today: Date used as "now". Defaults to datetime.date.today().
    """
    current = str((today or datetime.date.today()).year)
    if current in years:
        return current
    return years[0] if years else ""
