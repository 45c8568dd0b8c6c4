"""
Enums for the airline tycoon simulation.

This module contains all enumeration types used throughout the engine
for consistent data validation and type safety.
"""

from enum import Enum, IntEnum


class FlightStatus(str, Enum):
    """Flight lifecycle states. Transitions only move forward."""
    SCHEDULED = "scheduled"
    IN_FLIGHT = "in-flight"
    ARRIVED = "arrived"
    CANCELLED = "cancelled"


class PlaneStatus(str, Enum):
    """Operational status of an owned aircraft."""
    AVAILABLE = "available"
    IN_FLIGHT = "in-flight"
    MAINTENANCE = "maintenance"


class SeatClass(str, Enum):
    """Cabin classes. Values double as field names on seat/pricing models."""
    ECONOMY = "economy"
    BUSINESS = "business"
    FIRST_CLASS = "first_class"


class GameSpeed(IntEnum):
    """Game clock speed selector."""
    PAUSED = 0
    SLOW = 1
    NORMAL = 2
    FAST = 3
