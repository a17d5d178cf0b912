"""
Line-oriented text interface to the tournament map.

Drives a MapSession from stdin, one command per line, and prints the render
output as plain text. Handy for checking a data file or a location search
from a terminal or a script without starting the web app.

Commands:
    years                 list the selectable years
    year <YYYY>           select a year (an active location filter is kept)
    search <place...>     filter to tournaments within 30 miles of a place
    search                (no argument) clear the location filter
    clear                 clear the location filter
    show                  print the current list again
    quit                  exit

Output rules:
    stdout carries command output only. Logging and error details go to
    stderr, so the output can be piped without noise.

Usage:
    python -m interface.cli --data web/static/assets/tournaments_with_coords.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from tournaments.errors import GeocodeError, LoadError
from tournaments.geocoder import Geocoder
from tournaments.models import RenderOutput
from tournaments.session import MapSession
from tournaments.store import TournamentStore

_log = logging.getLogger(__name__)

_DEFAULT_DATA = (
    Path(__file__).resolve().parent.parent / "web" / "static" / "assets" / "tournaments_with_coords.json"
)


def format_output(session: MapSession, output: RenderOutput) -> list[str]:
    """
    Render output as text lines.

    The header names the year and, when a location filter is active, the
    search centre. Each list entry follows on its own line; entries without
    a map marker are flagged "(no map location)".

    Args:
        session: Session whose filter state the output belongs to.
        output:  Result of the last event.

    Returns:
        Lines to print, without trailing newlines.
    """
    state = session.filter_state
    header = f"Tournaments in {state.selected_year or '(no year)'}"
    if state.search_location is not None:
        loc = state.search_location
        header += f" near ({loc.latitude:.4f}, {loc.longitude:.4f})"
    lines = [header + f": {len(output.markers)} on map"]

    for item in output.list_items:
        if item.placeholder:
            lines.append(f"  {item.name}")
            continue
        suffix = "" if item.on_map else " (no map location)"
        lines.append(f"  {item.name}, {item.location}{suffix}")
    return lines


class CommandHandler:
    """
    Dispatches text commands to a MapSession.

    Attributes:
        session: The session being driven.
        out:     Stream receiving command output (stdout by default).
    """

    def __init__(self, session: MapSession, out: TextIO | None = None) -> None:
        self.session = session
        self.out = out or sys.stdout

    def _send(self, line: str) -> None:
        print(line, file=self.out, flush=True)

    def _show(self, output: RenderOutput) -> None:
        for line in format_output(self.session, output):
            self._send(line)

    # -----------------------------------------------------------------------
    # Command handlers
    # -----------------------------------------------------------------------

    def handle_years(self) -> None:
        if not self.session.years:
            self._send("No years available.")
            return
        self._send(" ".join(self.session.years))

    def handle_year(self, args: list[str]) -> None:
        if len(args) != 1:
            self._send("usage: year <YYYY>")
            return
        self._show(self.session.select_year(args[0]))

    def handle_search(self, args: list[str]) -> None:
        """
        Run a location search; no argument clears the location filter.

        A failed lookup prints an error line and leaves the current filter
        (and the previous search location) in place.
        """
        query = " ".join(args)
        try:
            output = self.session.search(query)
        except GeocodeError as exc:
            self._send(f"error: {exc}")
            return
        self._show(output)

    def handle_clear(self) -> None:
        self._show(self.session.clear_location())

    def handle_show(self) -> None:
        self._show(self.session.current())

    def dispatch(self, line: str) -> bool:
        """
        Execute one command line.

        Returns:
            False when the loop should stop ("quit"), True otherwise.
        """
        tokens = line.split()
        if not tokens:
            return True

        command, args = tokens[0], tokens[1:]
        if command == "quit":
            return False
        if command == "years":
            self.handle_years()
        elif command == "year":
            self.handle_year(args)
        elif command == "search":
            self.handle_search(args)
        elif command == "clear":
            self.handle_clear()
        elif command == "show":
            self.handle_show()
        else:
            _log.warning("Ignoring unknown command: %r", command)
            self._send(f"unknown command: {command}")
        return True


def run_loop(handler: CommandHandler, lines: TextIO | None = None) -> None:
    """
    Read commands until "quit" or end of input.

    Each command runs to completion before the next line is read, so the
    session sees one event at a time.
    """
    for raw_line in lines or sys.stdin:
        if not handler.dispatch(raw_line.strip()):
            break


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Browse chess tournaments by year and location")
    parser.add_argument("--data", default=_DEFAULT_DATA,
                        help="Tournament data file path or URL")
    parser.add_argument("--year", default=None,
                        help="Initial year (default: current year if present, else the first)")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
    )

    store = TournamentStore()
    try:
        store.load(args.data)
    except LoadError as exc:
        print(f"Error: Could not load tournament data: {exc}", file=sys.stderr)
        return 1

    session = MapSession(store.records, Geocoder(), initial_year=args.year)
    handler = CommandHandler(session)
    handler.handle_show()
    run_loop(handler)
    return 0


if __name__ == "__main__":
    sys.exit(main())
