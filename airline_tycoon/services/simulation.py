"""
Simulation context wiring the engine components together.

Each component owns its own state; collaborators receive explicit handles
here instead of reaching for module-level stores.
"""

import logging
from typing import Optional

from ..models.enums import GameSpeed
from ..utils.config import TycoonConfig, get_config
from .airport_directory import AirportDirectory
from .booking_engine import BookingEngine
from .company_ledger import CompanyLedger
from .fleet_registry import FleetRegistry
from .flight_ledger import FlightLedger
from .game_clock import GameClock

logger = logging.getLogger(__name__)


class Simulation:
    """
    One airline game: airports, company, fleet, flights, bookings and clock.

    The clock runs the flight ledger, booking engine and company ledger,
    in that order, on every tick.
    """

    def __init__(
        self,
        airports: AirportDirectory,
        company: CompanyLedger,
        fleet: FleetRegistry,
        tick_interval_seconds: float = 0.1,
        speed: GameSpeed = GameSpeed.PAUSED,
    ):
        self.airports = airports
        self.company = company
        self.fleet = fleet
        self.flights = FlightLedger(airports, fleet, company)
        self.bookings = BookingEngine(self.flights, airports, fleet)
        self.clock = GameClock(
            handlers=[
                self.flights.process_tick,
                self.bookings.process_tick,
                self.company.process_tick,
            ],
            tick_interval_seconds=tick_interval_seconds,
            speed=speed,
        )

    @classmethod
    def create(cls, config: Optional[TycoonConfig] = None) -> "Simulation":
        """
        Build a simulation from the bundled reference tables.

        Args:
            config: Engine configuration; defaults to the global config

        Returns:
            Simulation: A fresh game at minute 0
        """
        config = config or get_config()
        company = CompanyLedger(
            name=config.company_name,
            starting_cash=config.starting_cash,
            history_days=config.history_days,
        )
        airports = AirportDirectory()
        airports.load()
        fleet = FleetRegistry(company)
        simulation = cls(
            airports=airports,
            company=company,
            fleet=fleet,
            tick_interval_seconds=config.tick_interval_seconds,
            speed=GameSpeed(config.default_speed),
        )
        logger.info(
            f"Simulation created for '{config.company_name}' with "
            f"{len(airports)} airports and {len(fleet.list_models())} aircraft models"
        )
        return simulation
