"""
Fare and booking-rate formulas.

``fair_price`` gives the market reference fare for a distance and cabin
class. ``booking_rate`` converts a posted fare, time to departure and
route demand into the number of seats sold in one tick.
"""

import math

from ..models.enums import SeatClass

RATE_PER_NM = {
    SeatClass.ECONOMY: 0.12,
    SeatClass.BUSINESS: 0.35,
    SeatClass.FIRST_CLASS: 0.65,
}

FIXED_FEE = {
    SeatClass.ECONOMY: 50,
    SeatClass.BUSINESS: 150,
    SeatClass.FIRST_CLASS: 300,
}

MAX_PRICE_FACTOR = 2.0
MIN_TIME_FACTOR = 0.1
BOOKING_WINDOW_DAYS = 30
# Fraction of daily demand converted into bookings per tick
CONVERSION_PER_TICK = 0.05


def fair_price(distance: float, seat_class: SeatClass) -> int:
    """
    Reference fare for a route length and cabin class.

    Args:
        distance: Route distance in nautical miles
        seat_class: Cabin class

    Returns:
        int: Fare rounded to the nearest whole currency unit (halves round up)
    """
    value = distance * RATE_PER_NM[seat_class] + FIXED_FEE[seat_class]
    return math.floor(value + 0.5)


def booking_rate(price: float, fair: float, days_until_departure: float, demand: float) -> int:
    """
    Seats sold in one tick.

    Fares below the fair price accelerate bookings super-linearly (capped at
    2x); bookings are sparse far from departure and intensify as it nears.

    Args:
        price: Posted fare (floored at 1 for the ratio)
        fair: Fair price for the same class and distance
        days_until_departure: Fractional days remaining, non-negative
        demand: Daily demand potential for the class

    Returns:
        int: Whole seats, 0 when demand is 0 or the product is below 1
    """
    price_ratio = fair / max(price, 1)
    price_factor = min(price_ratio ** 1.5, MAX_PRICE_FACTOR)
    time_factor = max(MIN_TIME_FACTOR, 1 - days_until_departure / BOOKING_WINDOW_DAYS)
    return math.floor(demand * price_factor * time_factor * CONVERSION_PER_TICK)
