"""
Aggregate booking engine.

Each tick, every still-scheduled flight sells seats at a rate driven by
route demand, fare competitiveness against the fair price, and time left
until departure. Individual travelers are not modelled.
"""

import logging
from typing import Dict

from ..models.enums import FlightStatus, SeatClass
from ..models.game import MINUTES_PER_DAY
from ..utils.pricing import booking_rate, fair_price
from .airport_directory import AirportDirectory
from .fleet_registry import FleetRegistry
from .flight_ledger import FlightLedger

logger = logging.getLogger(__name__)


class BookingEngine:
    """Converts price, demand and time into incremental seat sales."""

    def __init__(self, flights: FlightLedger, airports: AirportDirectory, fleet: FleetRegistry):
        self.flights = flights
        self.airports = airports
        self.fleet = fleet

    def process_tick(self, total_minutes: float) -> Dict[str, int]:
        """
        Sell seats on every scheduled flight.

        Args:
            total_minutes: Current simulated time

        Returns:
            Dict[str, int]: Seats added this tick per flight id (flights with
            no new bookings are omitted)
        """
        sold: Dict[str, int] = {}
        for flight in self.flights.scheduled_flights():
            if self.fleet.get_plane(flight.plane_id) is None:
                continue

            days_until_departure = max(0.0, (flight.departure_time - total_minutes) / MINUTES_PER_DAY)
            added = 0
            for seat_class in SeatClass:
                demand = self.airports.route_demand(
                    flight.departure_airport_code, flight.arrival_airport_code, seat_class
                )
                rate = booking_rate(
                    price=flight.ticket_pricing.get(seat_class),
                    fair=fair_price(flight.distance_nm, seat_class),
                    days_until_departure=days_until_departure,
                    demand=demand,
                )
                added += self.flights.add_bookings(flight.id, seat_class, rate)

            if added:
                sold[flight.id] = added
                logger.debug(
                    f"Flight {flight.flight_number}: +{added} seats "
                    f"({flight.passengers.total} booked, {days_until_departure:.2f} days out)"
                )
        return sold

    def quote(self, from_code: str, to_code: str) -> Dict[SeatClass, int]:
        """Fair price per cabin class for a route."""
        distance = self.airports.distance_nm(from_code, to_code)
        return {seat_class: fair_price(distance, seat_class) for seat_class in SeatClass}
