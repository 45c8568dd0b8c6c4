"""Static reference tables loaded once at startup."""

from .airports import AIRPORTS
from .planes import AIRCRAFT_MODELS

__all__ = ["AIRPORTS", "AIRCRAFT_MODELS"]
