"""
Tests for the typer CLI.
"""
import json

import pytest
from typer.testing import CliRunner

from whenin import cli
from whenin import timeparse as tparse

from .conftest import NOW, StubParser, STUB_ANSWERS

runner = CliRunner()


@pytest.fixture
def fixed(monkeypatch):
    """Freeze the clock and swap the parser for the stub."""
    stub = StubParser(dict(STUB_ANSWERS))
    monkeypatch.setattr(tparse, "now_local", lambda zone=None: NOW)
    monkeypatch.setattr(tparse, "parse", stub)
    return stub


class TestConvertCommand:
    """Tests for `whenin convert`."""

    def test_single(self, fixed):
        result = runner.invoke(cli.app, ["--tz", "UTC", "convert", "tomorrow"])
        assert result.exit_code == 0, result.output
        assert "Time Left:" in result.output
        assert "1 days, 0 hours, 0 minutes" in result.output
        assert "Thursday, August 21, 2025 at 9:30 AM UTC" in result.output

    def test_words_are_joined(self, fixed):
        result = runner.invoke(cli.app, ["--tz", "UTC", "convert", "next", "week"])
        assert result.exit_code == 0, result.output
        assert fixed.calls == ["next week"]
        assert "Starts in 7 days, 0 hours, 0 minutes" in result.output

    def test_json(self, fixed):
        result = runner.invoke(cli.app, ["--tz", "UTC", "convert", "this week", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["type"] == "range"
        assert data["phase"] == "ongoing"
        assert data["until_label"] == "Ends in 0 days, 5 hours, 0 minutes"

    def test_24h(self, fixed):
        result = runner.invoke(cli.app, ["--tz", "UTC", "convert", "tomorrow", "--24h", "--json"])
        assert json.loads(result.output)["local_time"] == "Thursday, August 21, 2025 at 09:30 UTC"

    def test_past_is_an_error(self, fixed):
        result = runner.invoke(cli.app, ["--tz", "UTC", "convert", "yesterday"])
        assert result.exit_code == 1
        assert "The specified time is in the past." in result.output

    def test_empty(self, fixed):
        result = runner.invoke(cli.app, ["convert"])
        assert result.exit_code == 1
        assert "Please enter a date and time." in result.output
        assert fixed.calls == []

    def test_error_json(self, fixed):
        result = runner.invoke(cli.app, ["convert", "blah", "--json"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"].startswith("Couldn't understand that time")

    def test_bad_zone(self, fixed):
        result = runner.invoke(cli.app, ["--tz", "Nowhere/Special", "convert", "tomorrow"])
        assert result.exit_code == 2
        assert "unknown time zone" in result.output

    def test_zone_from_env(self, fixed, monkeypatch):
        monkeypatch.setenv("WHENIN_TZ", "America/Los_Angeles")
        result = runner.invoke(cli.app, ["convert", "tomorrow", "--json"])
        assert json.loads(result.output)["local_time"] == "Thursday, August 21, 2025 at 2:30 AM PDT"


class TestOtherCommands:
    """Tests for examples, humanize and shell."""

    def test_examples(self):
        result = runner.invoke(cli.app, ["examples"])
        assert result.exit_code == 0
        assert "Tomorrow at noon" in result.output
        assert "in 3 days time" in result.output

    def test_humanize(self):
        result = runner.invoke(cli.app, ["humanize", "90061000"])
        assert result.output.strip() == "1 days, 1 hours, 1 minutes"

    def test_humanize_negative(self):
        result = runner.invoke(cli.app, ["humanize", "--", "-60000"])
        assert result.output.strip() == "-0 days, 0 hours, 1 minutes"

    def test_shell_session(self, fixed, isolated_home):
        (isolated_home / ".whenin.yml").write_text(
            "default_input: tomorrow\nexamples: [next week, yesterday]\n"
        )
        result = runner.invoke(cli.app, ["--tz", "UTC", "shell"], input="2\n\n:examples\n:q\n")
        assert result.exit_code == 0, result.output
        # first-load conversion, then example #2, then an empty submit
        assert fixed.calls == ["tomorrow", "yesterday"]
        assert "1 days, 0 hours, 0 minutes" in result.output
        assert "The specified time is in the past." in result.output
        assert "Please enter a date and time." in result.output
        assert "You could try..." in result.output

    def test_shell_ends_on_eof(self, fixed):
        result = runner.invoke(cli.app, ["--tz", "UTC", "shell"], input="")
        assert result.exit_code == 0
