"""Display formatting helpers for currency and game time."""

from ..models.game import MINUTES_PER_DAY, MINUTES_PER_HOUR


def format_currency(amount: float) -> str:
    """Format as whole US dollars, e.g. ``$1,234,567`` or ``-$500``."""
    rounded = int(round(amount))
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,}"


def format_game_time(total_minutes: float) -> str:
    day = int(total_minutes // MINUTES_PER_DAY) + 1
    hour = int((total_minutes % MINUTES_PER_DAY) // MINUTES_PER_HOUR)
    minute = int(total_minutes % MINUTES_PER_HOUR)
    return f"Day {day} {hour:02d}:{minute:02d}"


def format_duration(minutes: float) -> str:
    hours = int(minutes // MINUTES_PER_HOUR)
    mins = int(minutes % MINUTES_PER_HOUR)
    if hours == 0:
        return f"{mins}m"
    return f"{hours}h {mins}m"
