"""
Per-cabin-class seat and pricing models.

Seat layouts, booked passenger counts and ticket prices all carry one
value per cabin class, keyed by ``SeatClass`` values.
"""

from typing import Dict
from pydantic import BaseModel, Field, ConfigDict

from .enums import SeatClass


class SeatCountModel(BaseModel):
    """Seat counts per cabin class (used for layouts and booked seats)."""
    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    economy: int = Field(default=0, ge=0, description="Economy seats")
    business: int = Field(default=0, ge=0, description="Business seats")
    first_class: int = Field(default=0, ge=0, description="First-class seats")

    def get(self, seat_class: SeatClass) -> int:
        return getattr(self, seat_class.value)

    def set(self, seat_class: SeatClass, value: int) -> None:
        setattr(self, seat_class.value, value)

    @property
    def total(self) -> int:
        return self.economy + self.business + self.first_class

    def as_dict(self) -> Dict[SeatClass, int]:
        return {seat_class: self.get(seat_class) for seat_class in SeatClass}


class TicketPricingModel(BaseModel):
    """
    Operator-set ticket prices per cabin class.

    Pricing is copied into each flight at creation time; later edits to a
    schedule's template do not reach flights that already exist.
    """
    model_config = ConfigDict(from_attributes=True)

    economy: float = Field(..., ge=0.0, description="Economy fare")
    business: float = Field(..., ge=0.0, description="Business fare")
    first_class: float = Field(..., ge=0.0, description="First-class fare")

    def get(self, seat_class: SeatClass) -> float:
        return getattr(self, seat_class.value)
