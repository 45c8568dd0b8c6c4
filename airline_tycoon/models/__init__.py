"""
Airline tycoon Pydantic models package.

This package contains all Pydantic v2 models used throughout the simulation
engine for data validation, serialization, and type safety.
"""

# Enums
from .enums import (
    FlightStatus,
    PlaneStatus,
    SeatClass,
    GameSpeed,
)

# Reference data models
from .airport import (
    OperatingHoursModel,
    AirportDemandModel,
    AirportModel,
)

from .seat import (
    SeatCountModel,
    TicketPricingModel,
)

from .plane import (
    AircraftModel,
    OwnedPlaneModel,
)

# Flight lifecycle models
from .flight import (
    FlightModel,
    FlightScheduleModel,
)

from .company import (
    FinancialRecordModel,
    CompanyModel,
)

from .game import (
    MINUTES_PER_DAY,
    SPEED_MULTIPLIERS,
    GameTimeModel,
    day_index,
)

__all__ = [
    # Enums
    "FlightStatus",
    "PlaneStatus",
    "SeatClass",
    "GameSpeed",

    # Reference models
    "OperatingHoursModel",
    "AirportDemandModel",
    "AirportModel",
    "AircraftModel",

    # Fleet and flight models
    "SeatCountModel",
    "TicketPricingModel",
    "OwnedPlaneModel",
    "FlightModel",
    "FlightScheduleModel",

    # Company models
    "FinancialRecordModel",
    "CompanyModel",

    # Game time
    "MINUTES_PER_DAY",
    "SPEED_MULTIPLIERS",
    "GameTimeModel",
    "day_index",
]
