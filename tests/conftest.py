"""
Shared fixtures for the airline tycoon test suite.
Run with: uv run pytest -v
"""

import pytest

from airline_tycoon.models import TicketPricingModel
from airline_tycoon.services import (
    AirportDirectory,
    BookingEngine,
    CompanyLedger,
    FleetRegistry,
    FlightLedger,
    Simulation,
)
from airline_tycoon.utils.config import TycoonConfig, reset_config

TYCOON_ENV_VARS = [
    "TYCOON_COMPANY_NAME",
    "TYCOON_STARTING_CASH",
    "TYCOON_TICK_INTERVAL_SECONDS",
    "TYCOON_DEFAULT_SPEED",
    "TYCOON_HISTORY_DAYS",
    "TYCOON_DEBUG",
    "TYCOON_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate every test from TYCOON_* variables and the cached config."""
    for name in TYCOON_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def airports():
    directory = AirportDirectory()
    directory.load()
    return directory


@pytest.fixture
def company():
    return CompanyLedger(name="Test Air", starting_cash=10_000_000)


@pytest.fixture
def fleet(company):
    return FleetRegistry(company)


@pytest.fixture
def flights(airports, fleet, company):
    return FlightLedger(airports, fleet, company)


@pytest.fixture
def bookings(flights, airports, fleet):
    return BookingEngine(flights, airports, fleet)


@pytest.fixture
def plane(fleet):
    """An E175 parked at JFK ($2.5M, 64 economy / 12 business / 0 first)."""
    return fleet.purchase("e175", "N12345", "JFK")


@pytest.fixture
def fair_pricing():
    """Fair fares for JFK-BOS (about 162 nm)."""
    return TicketPricingModel(economy=69, business=207, first_class=405)


@pytest.fixture
def simulation():
    return Simulation.create(TycoonConfig(company_name="Test Air", starting_cash=10_000_000))
