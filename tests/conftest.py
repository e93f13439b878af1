"""
Pytest fixtures for whenin tests.

Every test runs with HOME pointed at a temp dir and WHENIN_* unset, so no
real config leaks in.
"""

from datetime import datetime, timedelta, timezone

import pytest

from whenin.models import RangeCandidate, SingleCandidate
from whenin.shell import Converter
from whenin.timeparse import ParseSettings

UTC = timezone.utc
NOW = datetime(2025, 8, 20, 9, 30, tzinfo=UTC)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Empty home directory and a clean environment."""
    monkeypatch.setenv("HOME", str(tmp_path))
    for var in ("WHENIN_TZ", "WHENIN_CLOCK", "WHENIN_PREFER"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture
def now():
    """Fixed reference instant: Wed 2025-08-20 09:30 UTC."""
    return NOW


class StubParser:
    """Parser stand-in answering from a fixed text -> candidate table."""

    def __init__(self, answers):
        self.answers = answers
        self.calls = []

    def __call__(self, text, now, settings):
        self.calls.append(text)
        return self.answers.get(text)


STUB_ANSWERS = {
    "tomorrow": SingleCandidate(at=NOW + timedelta(days=1)),
    "right now": SingleCandidate(at=NOW),
    "yesterday": SingleCandidate(at=NOW - timedelta(days=1)),
    "next week": RangeCandidate(start=NOW + timedelta(days=7), end=NOW + timedelta(days=9)),
    "this week": RangeCandidate(start=NOW - timedelta(days=1), end=NOW + timedelta(hours=5)),
    "last week": RangeCandidate(start=NOW - timedelta(days=9), end=NOW - timedelta(days=7)),
}


@pytest.fixture
def stub_parser():
    return StubParser(dict(STUB_ANSWERS))


@pytest.fixture
def converter(stub_parser):
    """Converter rendering in UTC and backed by the stub parser."""
    return Converter(settings=ParseSettings(zone=UTC), parser=stub_parser)
