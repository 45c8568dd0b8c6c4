"""
Fleet registry tests: catalog, purchasing and plane mutators.
"""

from airline_tycoon.models import PlaneStatus, SeatClass
from airline_tycoon.services import FleetRegistry


class TestCatalog:
    """Test the aircraft catalog."""

    def test_loads_catalog(self, fleet):
        assert len(fleet.list_models()) >= 8
        assert fleet.get_model("e175").purchase_price == 2_500_000
        assert fleet.get_model("b777-200er") is not None

    def test_unknown_model(self, fleet):
        assert fleet.get_model("concorde") is None


class TestPurchase:
    """Test plane purchasing."""

    def test_purchase_plane(self, fleet, company):
        plane = fleet.purchase("e175", "N12345", "JFK")

        assert plane is not None
        assert plane.registration == "N12345"
        assert plane.current_airport_code == "JFK"
        assert plane.status == PlaneStatus.AVAILABLE
        assert plane.total_flight_hours == 0
        assert plane.current_flight_id is None
        assert company.cash == 10_000_000 - 2_500_000
        assert company.company.total_expenses == 2_500_000
        assert len(fleet.list_fleet()) == 1

    def test_insufficient_funds(self, fleet, company):
        """Nothing is charged or added when cash is short."""
        company.company.cash = 100
        plane = fleet.purchase("b777-200er", "N99999", "JFK")

        assert plane is None
        assert len(fleet) == 0
        assert company.cash == 100

    def test_exact_cash_is_enough(self, fleet, company):
        """Only strictly-less cash blocks a purchase."""
        company.company.cash = 2_500_000
        assert fleet.purchase("e175", "N1", "JFK") is not None
        assert company.cash == 0

    def test_unknown_model_charges_nothing(self, fleet, company):
        assert fleet.purchase("concorde", "G-BOAC", "LHR") is None
        assert company.cash == 10_000_000
        assert len(fleet) == 0

    def test_seats_copied_from_model(self, fleet):
        """A plane's layout is independent of the catalog after purchase."""
        plane = fleet.purchase("e175", "N1", "JFK")
        plane.seats.set(SeatClass.ECONOMY, 70)

        assert fleet.get_model("e175").default_seats.economy == 64
        assert fleet.purchase("e175", "N2", "JFK").seats.economy == 64


class TestMutators:
    """Test direct plane mutators and fleet queries."""

    def test_set_status(self, fleet, plane):
        fleet.set_status(plane.id, PlaneStatus.IN_FLIGHT)
        assert fleet.get_plane(plane.id).status == PlaneStatus.IN_FLIGHT

    def test_update_location(self, fleet, plane):
        fleet.update_location(plane.id, "LAX")
        assert fleet.get_plane(plane.id).current_airport_code == "LAX"

    def test_mutators_ignore_unknown_plane(self, fleet):
        fleet.set_status("missing", PlaneStatus.MAINTENANCE)
        fleet.update_location("missing", "LAX")
        fleet.assign_flight("missing", "f1")
        fleet.add_flight_hours("missing", 1.5)
        assert len(fleet) == 0

    def test_available_and_at_airport(self, fleet, plane):
        other = fleet.purchase("e175", "N2", "LAX")
        fleet.set_status(other.id, PlaneStatus.MAINTENANCE)

        assert [p.id for p in fleet.available_planes()] == [plane.id]
        assert [p.id for p in fleet.planes_at_airport("JFK")] == [plane.id]
        assert fleet.planes_at_airport("LAX") == []

    def test_model_for_plane(self, fleet, plane):
        assert fleet.model_for_plane(plane.id).id == "e175"
        assert fleet.model_for_plane("missing") is None

    def test_custom_catalog(self, company):
        fleet = FleetRegistry(company, catalog=[{
            "id": "toy",
            "manufacturer": "Acme",
            "name": "Toy",
            "range": 500,
            "speed": 200,
            "default_seats": {"economy": 10},
            "min_runway_length": 2000,
            "purchase_price": 1000,
            "operating_cost_per_nm": 1.0,
            "fuel_per_hour": 10,
        }])
        assert [m.id for m in fleet.list_models()] == ["toy"]
