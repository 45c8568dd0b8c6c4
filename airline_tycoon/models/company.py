"""
Company and financial history models.
"""

from typing import List
from pydantic import BaseModel, Field, ConfigDict


class FinancialRecordModel(BaseModel):
    """Totals for one completed simulated day."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    date: int = Field(..., ge=0, description="Zero-based day index")
    revenue: float = Field(..., description="Revenue booked during the day")
    expenses: float = Field(..., description="Expenses booked during the day")
    profit: float = Field(..., description="Revenue minus expenses")


class CompanyModel(BaseModel):
    """
    The player's airline.

    Cash has no floor: purchases are gated by an affordability check, but
    flight costs are charged unconditionally.
    """
    model_config = ConfigDict(from_attributes=True)

    name: str = Field(default="", description="Company name")
    cash: float = Field(..., description="Cash balance")
    total_revenue: float = Field(default=0.0, ge=0.0, description="Lifetime revenue")
    total_expenses: float = Field(default=0.0, ge=0.0, description="Lifetime expenses")
    financial_history: List[FinancialRecordModel] = Field(
        default_factory=list, description="Most recent daily records, oldest first"
    )
    founded_date: float = Field(default=0.0, ge=0.0, description="Simulated minute of founding")
