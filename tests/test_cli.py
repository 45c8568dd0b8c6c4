"""
CLI tests using Typer's CliRunner.
"""

import pytest
from typer.testing import CliRunner

from airline_tycoon.main import app


@pytest.fixture
def runner():
    return CliRunner()


class TestCatalogCommands:
    """Test the read-only listing commands."""

    def test_planes(self, runner):
        result = runner.invoke(app, ["planes"])
        assert result.exit_code == 0
        assert "e175" in result.output
        assert "Aircraft Catalog" in result.output

    def test_airports_search(self, runner):
        result = runner.invoke(app, ["airports", "--search", "new york"])
        assert result.exit_code == 0
        assert "JFK" in result.output
        assert "LHR" not in result.output

    def test_airports_no_match(self, runner):
        result = runner.invoke(app, ["airports", "--search", "atlantis"])
        assert result.exit_code == 0
        assert "No airports match" in result.output


class TestQuote:
    """Test route quotes."""

    def test_quote_known_route(self, runner):
        result = runner.invoke(app, ["quote", "jfk", "lax"])
        assert result.exit_code == 0
        assert "nm" in result.output
        assert "$" in result.output

    def test_quote_unknown_airport(self, runner):
        result = runner.invoke(app, ["quote", "XXX", "LAX"])
        assert result.exit_code == 1
        assert "Unknown airport code" in result.output

    @pytest.mark.parametrize("speed", ["0", "-450"])
    def test_quote_rejects_non_positive_speed(self, runner, speed):
        result = runner.invoke(app, ["quote", "JFK", "LAX", f"--speed={speed}"])
        assert result.exit_code == 2
        assert not isinstance(result.exception, ValueError)


class TestSimulate:
    """Test the headless demo run."""

    def test_simulate_one_day(self, runner):
        result = runner.invoke(app, ["simulate", "--days", "1"])
        assert result.exit_code == 0
        assert "Daily Financials" in result.output
        assert "TY100" in result.output

    def test_simulate_rejects_paused(self, runner):
        result = runner.invoke(app, ["simulate", "--speed", "paused"])
        assert result.exit_code == 1

    def test_simulate_unknown_model(self, runner):
        result = runner.invoke(app, ["simulate", "--model", "concorde"])
        assert result.exit_code == 1
        assert "Could not purchase" in result.output
