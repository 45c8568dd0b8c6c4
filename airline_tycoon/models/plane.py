"""
Aircraft catalog and owned-fleet Pydantic models.
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .enums import PlaneStatus
from .seat import SeatCountModel


class AircraftModel(BaseModel):
    """
    Purchasable aircraft type from the static catalog.

    Range and minimum runway length are carried as data only; no route or
    purchase is rejected because of them.
    """
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str = Field(..., description="Catalog identifier (e.g. 'e175')")
    manufacturer: str = Field(..., description="Aircraft manufacturer")
    name: str = Field(..., description="Model name")
    range: int = Field(..., gt=0, description="Maximum range in nautical miles")
    speed: int = Field(..., gt=0, description="Cruise speed in knots")
    default_seats: SeatCountModel = Field(..., description="Factory seat layout")
    min_runway_length: int = Field(..., ge=0, description="Minimum runway length in feet")
    purchase_price: float = Field(..., gt=0.0, description="Purchase price")
    operating_cost_per_nm: float = Field(..., ge=0.0, description="Operating cost per nautical mile")
    fuel_per_hour: float = Field(..., ge=0.0, description="Fuel burn per hour")

    @property
    def display_name(self) -> str:
        return f"{self.manufacturer} {self.name}"


class OwnedPlaneModel(BaseModel):
    """An aircraft in the company's fleet."""
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Unique plane identifier")
    model_id: str = Field(..., description="Catalog model identifier")
    registration: str = Field(..., description="Tail number")
    seats: SeatCountModel = Field(..., description="Current seat layout")
    status: PlaneStatus = Field(default=PlaneStatus.AVAILABLE, description="Operational status")
    total_flight_hours: float = Field(default=0.0, ge=0.0, description="Cumulative flight hours")
    current_flight_id: Optional[str] = Field(None, description="Flight currently being flown")
    current_airport_code: str = Field(..., description="Airport where the plane is parked or last landed")
