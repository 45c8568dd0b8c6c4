"""
Flight ledger and lifecycle state machine.

This module owns concrete flights and recurring schedules, and implements:
- Flight creation with a settled cost basis (operating cost + landing fees)
- The per-tick lifecycle: scheduled -> in-flight -> arrived, or scheduled -> cancelled
- Exactly-once-per-day instantiation of recurring schedules
- Seat booking with per-class capacity clamping
"""

import heapq
import logging
import uuid
from typing import Dict, Iterable, List, Optional

from ..models.enums import FlightStatus, PlaneStatus, SeatClass
from ..models.flight import FlightModel, FlightScheduleModel
from ..models.game import MINUTES_PER_DAY, MINUTES_PER_HOUR, day_index
from ..models.seat import TicketPricingModel
from .airport_directory import AirportDirectory
from .company_ledger import CompanyLedger
from .fleet_registry import FleetRegistry

logger = logging.getLogger(__name__)

# Shortest block time; keeps arrival strictly after departure for zero-distance routes
MIN_BLOCK_MINUTES = 1

_ARRIVAL = 0
_DEPARTURE = 1


class FlightLedger:
    """
    Owns all flights and schedules and drives their lifecycle.

    Every transition re-checks the flight's status before acting, so
    processing the same simulated time twice never charges a cost or
    credits revenue a second time.
    """

    def __init__(self, airports: AirportDirectory, fleet: FleetRegistry, company: CompanyLedger):
        """
        Initialize flight ledger.

        Args:
            airports: Directory used for distances, durations and landing fees
            fleet: Registry holding the operating planes
            company: Ledger charged on departure and credited on arrival
        """
        self.airports = airports
        self.fleet = fleet
        self.company = company
        self._flights: Dict[str, FlightModel] = {}
        self._schedules: Dict[str, FlightScheduleModel] = {}
        self._last_schedule_day: Optional[int] = None

    # Flight commands

    def create_flight(
        self,
        flight_number: str,
        departure_airport_code: str,
        arrival_airport_code: str,
        plane_id: str,
        departure_time: float,
        ticket_pricing: TicketPricingModel,
    ) -> Optional[FlightModel]:
        """
        Create a scheduled flight.

        Args:
            flight_number: Public flight number
            departure_airport_code: Origin airport
            arrival_airport_code: Destination airport
            plane_id: Operating plane
            departure_time: Absolute simulated departure minute
            ticket_pricing: Fares, copied into the flight

        Returns:
            Optional[FlightModel]: The new flight, or None if the plane or
            its model cannot be resolved
        """
        model = self.fleet.model_for_plane(plane_id)
        if model is None:
            logger.warning(f"Flight {flight_number} not created: unknown plane '{plane_id}'")
            return None

        distance = self.airports.distance_nm(departure_airport_code, arrival_airport_code)
        duration = max(
            MIN_BLOCK_MINUTES,
            self.airports.duration_minutes(departure_airport_code, arrival_airport_code, model.speed),
        )

        landing_fees = 0.0
        for code in (departure_airport_code, arrival_airport_code):
            airport = self.airports.get(code)
            if airport is not None:
                landing_fees += airport.landing_fee

        flight = FlightModel(
            id=str(uuid.uuid4()),
            flight_number=flight_number,
            departure_airport_code=departure_airport_code,
            arrival_airport_code=arrival_airport_code,
            plane_id=plane_id,
            departure_time=departure_time,
            arrival_time=departure_time + duration,
            ticket_pricing=ticket_pricing.model_copy(),
            cost=distance * model.operating_cost_per_nm + landing_fees,
            distance_nm=distance,
        )
        self._flights[flight.id] = flight
        logger.info(
            f"Flight {flight_number} created: {departure_airport_code}->{arrival_airport_code} "
            f"{distance:.0f}nm, departs at minute {departure_time:.0f}"
        )
        return flight

    def cancel_flight(self, flight_id: str) -> bool:
        """
        Cancel a flight that has not departed yet.

        Returns:
            bool: True if the flight was cancelled; False (no-op) otherwise
        """
        flight = self._flights.get(flight_id)
        if flight is None or flight.status != FlightStatus.SCHEDULED:
            return False

        flight.status = FlightStatus.CANCELLED
        plane = self.fleet.get_plane(flight.plane_id)
        # Leave the plane alone if it is busy flying another leg
        if plane is not None and plane.current_flight_id is None:
            self.fleet.set_status(flight.plane_id, PlaneStatus.AVAILABLE)
        logger.info(f"Flight {flight.flight_number} cancelled")
        return True

    def add_bookings(self, flight_id: str, seat_class: SeatClass, seats: int) -> int:
        """
        Add booked seats to a scheduled flight, clamped to plane capacity.

        Returns:
            int: Seats actually added
        """
        flight = self._flights.get(flight_id)
        if flight is None or flight.status != FlightStatus.SCHEDULED or seats <= 0:
            return 0
        plane = self.fleet.get_plane(flight.plane_id)
        if plane is None:
            return 0

        booked = flight.passengers.get(seat_class)
        added = max(0, min(seats, plane.seats.get(seat_class) - booked))
        if added:
            flight.passengers.set(seat_class, booked + added)
        return added

    # Schedule commands

    def create_schedule(
        self,
        flight_number: str,
        departure_airport_code: str,
        arrival_airport_code: str,
        plane_id: str,
        departure_time_of_day: int,
        days_of_week: Iterable[int],
        ticket_pricing: TicketPricingModel,
    ) -> FlightScheduleModel:
        schedule = FlightScheduleModel(
            id=str(uuid.uuid4()),
            flight_number=flight_number,
            departure_airport_code=departure_airport_code,
            arrival_airport_code=arrival_airport_code,
            plane_id=plane_id,
            departure_time_of_day=departure_time_of_day,
            days_of_week=list(days_of_week),
            ticket_pricing=ticket_pricing.model_copy(),
        )
        self._schedules[schedule.id] = schedule
        logger.info(
            f"Schedule {flight_number} created: {departure_airport_code}->{arrival_airport_code} "
            f"days={schedule.days_of_week}"
        )
        return schedule

    def set_schedule_enabled(self, schedule_id: str, enabled: bool) -> bool:
        schedule = self._schedules.get(schedule_id)
        if schedule is None:
            return False
        schedule.enabled = enabled
        return True

    def remove_schedule(self, schedule_id: str) -> bool:
        """Delete a schedule; flights it already generated are kept."""
        return self._schedules.pop(schedule_id, None) is not None

    # Queries

    def get_flight(self, flight_id: str) -> Optional[FlightModel]:
        return self._flights.get(flight_id)

    def list_flights(self) -> List[FlightModel]:
        return list(self._flights.values())

    def _with_status(self, *statuses: FlightStatus) -> List[FlightModel]:
        return [f for f in self._flights.values() if f.status in statuses]

    def active_flights(self) -> List[FlightModel]:
        return self._with_status(FlightStatus.SCHEDULED, FlightStatus.IN_FLIGHT)

    def scheduled_flights(self) -> List[FlightModel]:
        return self._with_status(FlightStatus.SCHEDULED)

    def in_flight_flights(self) -> List[FlightModel]:
        return self._with_status(FlightStatus.IN_FLIGHT)

    def completed_flights(self) -> List[FlightModel]:
        return self._with_status(FlightStatus.ARRIVED)

    def get_schedule(self, schedule_id: str) -> Optional[FlightScheduleModel]:
        return self._schedules.get(schedule_id)

    def list_schedules(self) -> List[FlightScheduleModel]:
        return list(self._schedules.values())

    # Tick processing

    def process_tick(self, total_minutes: float) -> None:
        """
        Run due departures and arrivals in time order, then instantiate
        schedules for any new day.

        A flight that departs and also reaches its arrival time within the
        same tick lands before any later departure, so its plane can take
        the next leg.

        Args:
            total_minutes: Current simulated time
        """
        # Due transitions run in event-time order; ties break arrival first,
        # then creation order
        events = []
        for seq, flight in enumerate(self._flights.values()):
            if flight.status == FlightStatus.SCHEDULED and total_minutes >= flight.departure_time:
                heapq.heappush(events, (flight.departure_time, _DEPARTURE, seq, flight))
            elif flight.status == FlightStatus.IN_FLIGHT and total_minutes >= flight.arrival_time:
                heapq.heappush(events, (flight.arrival_time, _ARRIVAL, seq, flight))

        while events:
            _, kind, seq, flight = heapq.heappop(events)
            if kind == _DEPARTURE:
                if flight.status != FlightStatus.SCHEDULED:
                    continue
                self._depart(flight)
                if flight.status == FlightStatus.IN_FLIGHT and total_minutes >= flight.arrival_time:
                    heapq.heappush(events, (flight.arrival_time, _ARRIVAL, seq, flight))
            elif flight.status == FlightStatus.IN_FLIGHT:
                self._arrive(flight)

        self._instantiate_schedules(total_minutes)

    def _depart(self, flight: FlightModel) -> None:
        plane = self.fleet.get_plane(flight.plane_id)
        if plane is not None and plane.current_flight_id not in (None, flight.id):
            flight.status = FlightStatus.CANCELLED
            logger.warning(
                f"Flight {flight.flight_number} cancelled at departure: "
                f"plane {plane.registration} is still flying another leg"
            )
            return

        flight.status = FlightStatus.IN_FLIGHT
        if plane is not None:
            self.fleet.set_status(plane.id, PlaneStatus.IN_FLIGHT)
            self.fleet.assign_flight(plane.id, flight.id)
        self.company.add_expense(flight.cost)
        logger.info(
            f"Flight {flight.flight_number} departed {flight.departure_airport_code} "
            f"with {flight.passengers.total} passengers"
        )

    def _arrive(self, flight: FlightModel) -> None:
        flight.status = FlightStatus.ARRIVED
        plane = self.fleet.get_plane(flight.plane_id)
        if plane is not None:
            self.fleet.set_status(plane.id, PlaneStatus.AVAILABLE)
            self.fleet.update_location(plane.id, flight.arrival_airport_code)
            self.fleet.assign_flight(plane.id, None)
            self.fleet.add_flight_hours(plane.id, flight.duration_minutes / MINUTES_PER_HOUR)

        flight.revenue = flight.ticket_revenue()
        self.company.add_revenue(flight.revenue)
        logger.info(
            f"Flight {flight.flight_number} arrived at {flight.arrival_airport_code}, "
            f"revenue {flight.revenue:.0f}"
        )

    def _instantiate_schedules(self, total_minutes: float) -> None:
        current_day = day_index(total_minutes)
        if self._last_schedule_day is None:
            new_days = [current_day]
        else:
            new_days = range(self._last_schedule_day + 1, current_day + 1)

        for day in new_days:
            for schedule in list(self._schedules.values()):
                if not schedule.runs_on(day):
                    continue
                self.create_flight(
                    flight_number=schedule.flight_number,
                    departure_airport_code=schedule.departure_airport_code,
                    arrival_airport_code=schedule.arrival_airport_code,
                    plane_id=schedule.plane_id,
                    departure_time=day * MINUTES_PER_DAY + schedule.departure_time_of_day,
                    ticket_pricing=schedule.ticket_pricing,
                )

        if self._last_schedule_day is None or current_day > self._last_schedule_day:
            self._last_schedule_day = current_day
