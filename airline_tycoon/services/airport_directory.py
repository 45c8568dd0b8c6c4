"""
Airport directory: immutable airport catalog, search and route geometry.

Distance and duration lookups are used by both display code and simulation
math, so an unknown airport code resolves to a zero distance at this
boundary instead of raising.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from ..data.airports import AIRPORTS
from ..models.airport import AirportModel
from ..models.enums import SeatClass
from ..utils import geo

logger = logging.getLogger(__name__)


class UnknownAirportError(KeyError):
    """Raised when an airport code is not in the directory."""

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Unknown airport code: {self.code}"


class AirportDirectory:
    """
    Read-only airport catalog keyed by code.

    Features:
    - Lookup by code and case-insensitive search over code, name and city
    - Demand ranking (stable, highest combined demand first)
    - Route distance/duration via the geo kernel
    - Route demand per cabin class, averaged over both endpoints
    """

    def __init__(self, airports: Optional[Iterable[Union[AirportModel, Dict[str, Any]]]] = None):
        self._airports: Dict[str, AirportModel] = {}
        if airports is not None:
            self.load(airports)

    def load(self, airports: Optional[Iterable[Union[AirportModel, Dict[str, Any]]]] = None) -> None:
        """
        Replace the catalog wholesale.

        Args:
            airports: Airport records or dicts; defaults to the bundled table
        """
        records = AIRPORTS if airports is None else airports
        catalog: Dict[str, AirportModel] = {}
        for record in records:
            airport = record if isinstance(record, AirportModel) else AirportModel.model_validate(record)
            catalog[airport.code] = airport
        self._airports = catalog
        logger.info(f"Airport directory loaded with {len(catalog)} airports")

    def __len__(self) -> int:
        return len(self._airports)

    def __contains__(self, code: str) -> bool:
        return code in self._airports

    def list(self) -> List[AirportModel]:
        return list(self._airports.values())

    def get(self, code: str) -> Optional[AirportModel]:
        return self._airports.get(code)

    def require(self, code: str) -> AirportModel:
        """
        Look up an airport, raising if the code is unknown.

        Raises:
            UnknownAirportError: If no airport has this code
        """
        airport = self._airports.get(code)
        if airport is None:
            raise UnknownAirportError(code)
        return airport

    def search(self, query: str) -> List[AirportModel]:
        q = query.lower()
        return [
            airport for airport in self._airports.values()
            if q in airport.code.lower() or q in airport.name.lower() or q in airport.city.lower()
        ]

    def sorted_by_demand(self) -> List[AirportModel]:
        # sorted() is stable, so ties keep directory order
        return sorted(self._airports.values(), key=lambda a: a.demand.total, reverse=True)

    def distance_nm(self, from_code: str, to_code: str) -> float:
        """
        Great-circle distance between two airports.

        Returns:
            float: Distance in nautical miles, or 0.0 if either code is unknown
        """
        try:
            origin = self.require(from_code)
            destination = self.require(to_code)
        except UnknownAirportError as e:
            logger.debug(f"Distance fallback to 0: {e}")
            return 0.0
        return geo.distance_nm(origin.lat, origin.lng, destination.lat, destination.lng)

    def duration_minutes(self, from_code: str, to_code: str, speed_knots: float) -> int:
        """Block time in whole minutes at ``speed_knots`` (0 for unknown codes)."""
        return geo.duration_minutes(self.distance_nm(from_code, to_code), speed_knots)

    def route_demand(self, from_code: str, to_code: str, seat_class: SeatClass) -> float:
        """
        Average daily demand for a cabin class across both route endpoints.

        Unknown endpoints contribute zero demand.
        """
        total = 0
        for code in (from_code, to_code):
            airport = self._airports.get(code)
            if airport is not None:
                total += airport.demand.for_seat_class(seat_class)
        return total / 2
