"""
Booking engine tests: aggregate seat sales driven by price, demand and time.
"""

from airline_tycoon.models import FlightStatus, SeatClass, TicketPricingModel
from airline_tycoon.utils.pricing import fair_price


class TestBookingEngine:
    """Test per-tick booking behaviour."""

    def test_scheduled_flight_sells_seats(self, flights, bookings, plane, fair_pricing):
        flight = flights.create_flight("TY100", "JFK", "BOS", plane.id, 600, fair_pricing)

        sold = bookings.process_tick(0)

        assert sold[flight.id] == flight.passengers.total
        assert flight.passengers.economy > 0
        assert flight.passengers.business > 0
        assert flight.passengers.first_class == 0   # E175 has no first class

    def test_never_exceeds_capacity(self, flights, bookings, plane, fair_pricing):
        flight = flights.create_flight("TY100", "JFK", "BOS", plane.id, 600, fair_pricing)

        for minute in range(0, 100):
            bookings.process_tick(minute)

        assert flight.passengers.economy == plane.seats.economy
        assert flight.passengers.business == plane.seats.business
        assert flight.passengers.first_class == 0
        assert bookings.process_tick(100) == {}

    def test_urgency_books_faster(self, flights, bookings, fleet, plane, fair_pricing):
        other = fleet.purchase("e175", "N2", "JFK")
        far = flights.create_flight("TY1", "JFK", "BOS", plane.id, 29 * 1440, fair_pricing)
        near = flights.create_flight("TY2", "JFK", "BOS", other.id, 60, fair_pricing)

        bookings.process_tick(0)

        assert near.passengers.economy > far.passengers.economy > 0

    def test_cheaper_fares_book_faster(self, flights, bookings, fleet, plane):
        other = fleet.purchase("e175", "N2", "JFK")
        cheap = flights.create_flight(
            "TY1", "JFK", "BOS", plane.id, 5 * 1440,
            TicketPricingModel(economy=40, business=120, first_class=300),
        )
        pricey = flights.create_flight(
            "TY2", "JFK", "BOS", other.id, 5 * 1440,
            TicketPricingModel(economy=140, business=420, first_class=900),
        )

        bookings.process_tick(0)

        assert cheap.passengers.economy > pricey.passengers.economy
        assert cheap.passengers.business >= pricey.passengers.business

    def test_departed_flights_not_booked(self, flights, bookings, plane, fair_pricing):
        flight = flights.create_flight("TY100", "JFK", "BOS", plane.id, 60, fair_pricing)
        flights.process_tick(60)
        assert flight.status == FlightStatus.IN_FLIGHT

        assert bookings.process_tick(60) == {}
        assert flight.passengers.total == 0

    def test_past_departure_clamps_days(self, flights, bookings, plane, fair_pricing):
        """Days until departure never goes negative while still scheduled."""
        flight = flights.create_flight("TY100", "JFK", "BOS", plane.id, 60, fair_pricing)
        bookings.process_tick(120)
        assert flight.passengers.economy == min(plane.seats.economy, 29)

    def test_unknown_airports_have_no_demand(self, flights, bookings, plane, fair_pricing):
        flight = flights.create_flight("TY9", "XXX", "YYY", plane.id, 600, fair_pricing)
        assert bookings.process_tick(0) == {}
        assert flight.passengers.total == 0

    def test_quote(self, bookings, airports):
        distance = airports.distance_nm("JFK", "LAX")
        quote = bookings.quote("JFK", "LAX")
        assert quote[SeatClass.ECONOMY] == fair_price(distance, SeatClass.ECONOMY)
        assert quote[SeatClass.ECONOMY] < quote[SeatClass.BUSINESS] < quote[SeatClass.FIRST_CLASS]
