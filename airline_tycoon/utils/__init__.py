"""
Utility helpers for the airline tycoon engine: geo math, pricing formulas,
display formatting and configuration.
"""

from .geo import distance_nm, duration_minutes, interpolate
from .pricing import fair_price, booking_rate
from .format import format_currency, format_game_time, format_duration
from .config import TycoonConfig, load_config, get_config, reset_config

__all__ = [
    'distance_nm',
    'duration_minutes',
    'interpolate',
    'fair_price',
    'booking_rate',
    'format_currency',
    'format_game_time',
    'format_duration',
    'TycoonConfig',
    'load_config',
    'get_config',
    'reset_config',
]
