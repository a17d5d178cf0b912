"""Shared fixtures: sample tournaments and a fake HTTP session."""

import json

import pytest
import requests

from tournaments.models import TournamentRecord


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.text is not None:
            return json.loads(self.text)
        return self.payload


class FakeSession:
    """Replays queued responses (or raises queued exceptions) for get()."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.headers = {}
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


SPRING_OPEN = TournamentRecord("Spring Open", "Austin, TX", "2024", 30.27, -97.74)
WINTER_CUP = TournamentRecord("Winter Cup", "Dallas, TX", "2023", 32.78, -96.80)
ROUND_ROCK = TournamentRecord("Hill Country Quads", "Round Rock, TX", "2024", 30.5083, -97.6789)
ONLINE = TournamentRecord("Online Blitz Arena", "Online", "2024")

NEW_YORK = (40.7, -74.0)
AUSTIN = (30.2672, -97.7431)


@pytest.fixture
def scenario_records():
    return [SPRING_OPEN, WINTER_CUP]


@pytest.fixture
def texas_records():
    return [SPRING_OPEN, WINTER_CUP, ROUND_ROCK, ONLINE]


@pytest.fixture
def data_file(tmp_path):
    """Write a small tournament data file and return its path."""
    path = tmp_path / "tournaments.json"
    path.write_text(json.dumps([
        {"name": "Spring Open", "location": "Austin, TX", "year": "2024",
         "latitude": 30.27, "longitude": -97.74},
        {"name": "Winter Cup", "location": "Dallas, TX", "year": "2023",
         "latitude": 32.78, "longitude": -96.80},
        {"name": "Online Blitz Arena", "location": "Online", "year": "2024"},
    ]))
    return path
