"""
Pricing kernel tests: fair price and booking rate formulas.
"""

import pytest

from airline_tycoon.models import SeatClass
from airline_tycoon.utils.pricing import booking_rate, fair_price


class TestFairPrice:
    """Test fair price per cabin class."""

    @pytest.mark.parametrize("seat_class,expected", [
        (SeatClass.ECONOMY, 170),       # 1000 * 0.12 + 50
        (SeatClass.BUSINESS, 500),      # 1000 * 0.35 + 150
        (SeatClass.FIRST_CLASS, 950),   # 1000 * 0.65 + 300
    ])
    def test_1000nm(self, seat_class, expected):
        assert fair_price(1000, seat_class) == expected

    def test_zero_distance_is_fixed_fee(self):
        assert fair_price(0, SeatClass.ECONOMY) == 50

    def test_rounds_to_nearest(self):
        """2145 nm economy is 307.4 -> 307; business 900.75 -> 901."""
        assert fair_price(2145, SeatClass.ECONOMY) == 307
        assert fair_price(2145, SeatClass.BUSINESS) == 901

    def test_returns_int(self):
        assert isinstance(fair_price(2144.6, SeatClass.BUSINESS), int)


class TestBookingRate:
    """Test booking rate elasticity."""

    def test_positive_at_fair_price(self):
        """Price equal to fair with demand books seats."""
        assert booking_rate(170, 170, 5, 300) > 0

    def test_exact_value_at_fair_price(self):
        """300 * 1.0 * (1 - 5/30) * 0.05 = 12.5 -> 12."""
        assert booking_rate(170, 170, 5, 300) == 12

    def test_cheaper_books_faster(self):
        """Cheaper-than-fair books faster than pricier-than-fair."""
        assert booking_rate(100, 170, 5, 300) > booking_rate(300, 170, 5, 300)

    def test_zero_demand(self):
        assert booking_rate(170, 170, 5, 0) == 0
        assert booking_rate(1, 170, 0, 0) == 0

    def test_price_factor_capped(self):
        """A near-zero price doubles bookings at most."""
        assert booking_rate(0, 170, 0, 300) == booking_rate(1, 1000, 0, 300) == 30

    def test_zero_price_is_guarded(self):
        """Zero or negative prices are floored at 1 instead of dividing by zero."""
        assert booking_rate(0, 170, 5, 300) == booking_rate(1, 170, 5, 300)
        assert booking_rate(-50, 170, 5, 300) == booking_rate(1, 170, 5, 300)

    def test_time_factor_floor(self):
        """Far from departure the time factor bottoms out at 0.1."""
        assert booking_rate(170, 170, 60, 300) == booking_rate(170, 170, 27, 300) == 1

    def test_nearer_departure_books_more(self):
        assert booking_rate(170, 170, 1, 300) > booking_rate(170, 170, 20, 300)

    def test_small_product_rounds_to_zero(self):
        """Products below one seat yield nothing."""
        assert booking_rate(170, 170, 0, 10) == 0
