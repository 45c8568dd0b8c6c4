"""
Flight-related Pydantic models for the airline tycoon simulation.

This module contains concrete flights and the recurring weekly schedules
that stamp them out, with field constraints matching the lifecycle rules.
"""

from typing import List
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

from .enums import FlightStatus, SeatClass
from .seat import SeatCountModel, TicketPricingModel


class FlightModel(BaseModel):
    """
    A single concrete flight.

    Times are absolute simulated minutes. ``cost`` is the settled cost
    (operating cost plus both landing fees) fixed when the flight is created;
    ``revenue`` stays zero until arrival.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    flight_number: str = Field(..., description="Flight number (e.g. 'TY100')")
    departure_airport_code: str = Field(..., description="Departure airport code")
    arrival_airport_code: str = Field(..., description="Arrival airport code")
    plane_id: str = Field(..., description="Operating plane")
    departure_time: float = Field(..., ge=0.0, description="Scheduled departure minute")
    arrival_time: float = Field(..., ge=0.0, description="Scheduled arrival minute")
    ticket_pricing: TicketPricingModel = Field(..., description="Fares snapshot")
    passengers: SeatCountModel = Field(default_factory=SeatCountModel, description="Booked seats per class")
    status: FlightStatus = Field(default=FlightStatus.SCHEDULED, description="Lifecycle status")
    revenue: float = Field(default=0.0, ge=0.0, description="Revenue credited on arrival")
    cost: float = Field(default=0.0, ge=0.0, description="Settled cost charged on departure")
    distance_nm: float = Field(default=0.0, ge=0.0, description="Great-circle distance")

    @model_validator(mode="after")
    def check_arrival_after_departure(self) -> "FlightModel":
        if self.arrival_time <= self.departure_time:
            raise ValueError("arrival_time must be later than departure_time")
        return self

    @property
    def duration_minutes(self) -> float:
        return self.arrival_time - self.departure_time

    def ticket_revenue(self) -> float:
        """Revenue from booked seats at the posted fares."""
        return sum(
            self.passengers.get(seat_class) * self.ticket_pricing.get(seat_class)
            for seat_class in SeatClass
        )


class FlightScheduleModel(BaseModel):
    """
    Recurring weekly timetable entry.

    On every enabled weekday, one concrete flight departs at
    ``departure_time_of_day`` minutes after midnight.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    flight_number: str = Field(..., description="Flight number given to every generated flight")
    departure_airport_code: str = Field(..., description="Departure airport code")
    arrival_airport_code: str = Field(..., description="Arrival airport code")
    plane_id: str = Field(..., description="Operating plane")
    departure_time_of_day: int = Field(..., ge=0, lt=1440, description="Minutes after midnight")
    days_of_week: List[int] = Field(..., description="Active weekdays (day index modulo 7)")
    ticket_pricing: TicketPricingModel = Field(..., description="Fares template")
    enabled: bool = Field(default=True, description="Whether the schedule generates flights")

    @field_validator("days_of_week")
    @classmethod
    def validate_days_of_week(cls, v: List[int]) -> List[int]:
        """Weekdays must be in 0..6; duplicates are collapsed."""
        for day in v:
            if not 0 <= day <= 6:
                raise ValueError(f"Day of week must be between 0 and 6, got {day}")
        return sorted(set(v))

    def runs_on(self, day_index: int) -> bool:
        return self.enabled and (day_index % 7) in self.days_of_week
