"""
Simulation services for the airline tycoon engine.

This module contains the stateful components (airport directory, fleet,
flights, bookings, company ledger and game clock) and the context object
that wires them together.
"""

from .airport_directory import AirportDirectory, UnknownAirportError
from .company_ledger import CompanyLedger
from .fleet_registry import FleetRegistry
from .flight_ledger import FlightLedger
from .booking_engine import BookingEngine
from .game_clock import GameClock
from .simulation import Simulation

__all__ = [
    'AirportDirectory',
    'UnknownAirportError',
    'CompanyLedger',
    'FleetRegistry',
    'FlightLedger',
    'BookingEngine',
    'GameClock',
    'Simulation',
]
