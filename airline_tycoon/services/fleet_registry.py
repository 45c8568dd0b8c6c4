"""
Fleet registry: aircraft catalog and the owned-plane ledger.

This module implements plane purchasing and the plane mutators used by the
flight lifecycle. Mutators perform no transition validation; the flight
ledger is their only caller during normal operation.
"""

import logging
import uuid
from typing import Any, Dict, Iterable, List, Optional, Union

from ..data.planes import AIRCRAFT_MODELS
from ..models.enums import PlaneStatus
from ..models.plane import AircraftModel, OwnedPlaneModel
from .company_ledger import CompanyLedger

logger = logging.getLogger(__name__)


class FleetRegistry:
    """
    Aircraft catalog plus the company's owned fleet.

    Features:
    - Static catalog of purchasable models
    - Purchases gated on company cash (no partial effects on failure)
    - Fleet queries: all planes, available planes, planes parked at an airport
    """

    def __init__(
        self,
        company: CompanyLedger,
        catalog: Optional[Iterable[Union[AircraftModel, Dict[str, Any]]]] = None,
    ):
        """
        Initialize fleet registry.

        Args:
            company: Ledger charged for purchases
            catalog: Aircraft models; defaults to the bundled catalog
        """
        self.company = company
        self._catalog: Dict[str, AircraftModel] = {}
        self._fleet: Dict[str, OwnedPlaneModel] = {}
        self.load_catalog(catalog)

    def load_catalog(self, catalog: Optional[Iterable[Union[AircraftModel, Dict[str, Any]]]] = None) -> None:
        records = AIRCRAFT_MODELS if catalog is None else catalog
        models: Dict[str, AircraftModel] = {}
        for record in records:
            model = record if isinstance(record, AircraftModel) else AircraftModel.model_validate(record)
            models[model.id] = model
        self._catalog = models

    # Catalog queries

    def list_models(self) -> List[AircraftModel]:
        return list(self._catalog.values())

    def get_model(self, model_id: str) -> Optional[AircraftModel]:
        return self._catalog.get(model_id)

    def model_for_plane(self, plane_id: str) -> Optional[AircraftModel]:
        plane = self._fleet.get(plane_id)
        return self._catalog.get(plane.model_id) if plane else None

    # Fleet queries

    def get_plane(self, plane_id: str) -> Optional[OwnedPlaneModel]:
        return self._fleet.get(plane_id)

    def list_fleet(self) -> List[OwnedPlaneModel]:
        return list(self._fleet.values())

    def available_planes(self) -> List[OwnedPlaneModel]:
        return [p for p in self._fleet.values() if p.status == PlaneStatus.AVAILABLE]

    def planes_at_airport(self, code: str) -> List[OwnedPlaneModel]:
        """Available planes parked at ``code``."""
        return [
            p for p in self._fleet.values()
            if p.current_airport_code == code and p.status == PlaneStatus.AVAILABLE
        ]

    def __len__(self) -> int:
        return len(self._fleet)

    # Commands

    def purchase(self, model_id: str, registration: str, airport_code: str) -> Optional[OwnedPlaneModel]:
        """
        Buy a new plane and park it at ``airport_code``.

        Args:
            model_id: Catalog model identifier
            registration: Tail number for the new plane
            airport_code: Delivery airport

        Returns:
            Optional[OwnedPlaneModel]: The new plane, or None if the model is
            unknown or the company cannot afford it (nothing is charged)
        """
        model = self._catalog.get(model_id)
        if model is None:
            logger.warning(f"Purchase rejected: unknown aircraft model '{model_id}'")
            return None

        if not self.company.can_afford(model.purchase_price):
            logger.warning(
                f"Purchase rejected: {model.display_name} costs {model.purchase_price:.0f}, "
                f"cash is {self.company.cash:.0f}"
            )
            return None

        plane = OwnedPlaneModel(
            id=str(uuid.uuid4()),
            model_id=model.id,
            registration=registration,
            seats=model.default_seats.model_copy(),
            current_airport_code=airport_code,
        )

        self.company.deduct_cash(model.purchase_price)
        self._fleet[plane.id] = plane
        logger.info(f"Purchased {model.display_name} {registration} at {airport_code}")
        return plane

    def set_status(self, plane_id: str, status: PlaneStatus) -> None:
        plane = self._fleet.get(plane_id)
        if plane:
            plane.status = status

    def update_location(self, plane_id: str, code: str) -> None:
        plane = self._fleet.get(plane_id)
        if plane:
            plane.current_airport_code = code

    def assign_flight(self, plane_id: str, flight_id: Optional[str]) -> None:
        """Bind (or with None, unbind) the plane's current flight."""
        plane = self._fleet.get(plane_id)
        if plane:
            plane.current_flight_id = flight_id

    def add_flight_hours(self, plane_id: str, hours: float) -> None:
        plane = self._fleet.get(plane_id)
        if plane:
            plane.total_flight_hours += hours
