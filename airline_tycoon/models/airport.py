"""
Airport-related Pydantic models for the airline tycoon simulation.

Airports are immutable reference data; their demand figures feed the
booking engine but are never decremented by bookings.
"""

from pydantic import BaseModel, Field, ConfigDict

from .enums import SeatClass


class OperatingHoursModel(BaseModel):
    """Airport opening window in hours of the day."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    open: int = Field(..., ge=0, le=24, description="Opening hour")
    close: int = Field(..., ge=0, le=24, description="Closing hour")


class AirportDemandModel(BaseModel):
    """
    Daily passenger demand potential at an airport.

    Each traveler segment maps onto one cabin class: leisure travelers
    fly economy, business travelers fly business, and first-class demand
    fills first class.
    """
    model_config = ConfigDict(from_attributes=True, frozen=True)

    business: int = Field(..., ge=0, description="Daily business travelers")
    leisure: int = Field(..., ge=0, description="Daily leisure travelers")
    first_class: int = Field(..., ge=0, description="Daily first-class travelers")

    @property
    def total(self) -> int:
        return self.business + self.leisure + self.first_class

    def for_seat_class(self, seat_class: SeatClass) -> int:
        """Return the demand segment that books the given cabin class."""
        if seat_class == SeatClass.ECONOMY:
            return self.leisure
        if seat_class == SeatClass.BUSINESS:
            return self.business
        return self.first_class


class AirportModel(BaseModel):
    """Airport reference record."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    code: str = Field(..., min_length=3, max_length=4, description="IATA airport code")
    name: str = Field(..., description="Airport name")
    city: str = Field(..., description="City served")
    country: str = Field(..., description="Country")
    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    lng: float = Field(..., ge=-180.0, le=180.0, description="Longitude in degrees")
    operating_hours: OperatingHoursModel = Field(
        default_factory=lambda: OperatingHoursModel(open=0, close=24),
        description="Operating hours",
    )
    demand: AirportDemandModel = Field(..., description="Daily demand by traveler segment")
    runway_length: int = Field(..., ge=0, description="Longest runway in feet")
    landing_fee: float = Field(..., ge=0.0, description="Fee charged per landing")
