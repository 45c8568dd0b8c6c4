"""
Game time projection model.

Total elapsed simulated minutes is the only stored quantity; every other
field here is derived from it.
"""

from pydantic import BaseModel, Field, ConfigDict

from .enums import GameSpeed

MINUTES_PER_DAY = 1440
MINUTES_PER_HOUR = 60

# Simulated minutes added per real-time step
SPEED_MULTIPLIERS = {
    GameSpeed.PAUSED: 0.0,
    GameSpeed.SLOW: 0.1,
    GameSpeed.NORMAL: 1.0,
    GameSpeed.FAST: 6.0,
}


def day_index(total_minutes: float) -> int:
    """Zero-based simulated day containing ``total_minutes``."""
    return int(total_minutes // MINUTES_PER_DAY)


class GameTimeModel(BaseModel):
    """Display projection of the game clock (``day`` is 1-indexed)."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    total_minutes: float = Field(..., ge=0.0, description="Elapsed simulated minutes")
    day: int = Field(..., ge=1, description="Current day, starting at 1")
    hour: int = Field(..., ge=0, lt=24, description="Hour of day")
    minute: int = Field(..., ge=0, lt=60, description="Minute of hour")

    @classmethod
    def from_minutes(cls, total_minutes: float) -> "GameTimeModel":
        return cls(
            total_minutes=total_minutes,
            day=day_index(total_minutes) + 1,
            hour=int((total_minutes % MINUTES_PER_DAY) // MINUTES_PER_HOUR),
            minute=int(total_minutes % MINUTES_PER_HOUR),
        )
