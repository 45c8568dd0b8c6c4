"""
Bundled aircraft catalog.

Prices are list prices in game currency; operating cost is per nautical
mile flown and excludes landing fees.
"""

from typing import Any, Dict, List

AIRCRAFT_MODELS: List[Dict[str, Any]] = [
    {
        "id": "e175",
        "manufacturer": "Embraer",
        "name": "E175",
        "range": 2200,
        "speed": 450,
        "default_seats": {"economy": 64, "business": 12, "first_class": 0},
        "min_runway_length": 7000,
        "purchase_price": 2_500_000,
        "operating_cost_per_nm": 6.5,
        "fuel_per_hour": 420,
    },
    {
        "id": "crj900",
        "manufacturer": "Bombardier",
        "name": "CRJ900",
        "range": 1550,
        "speed": 447,
        "default_seats": {"economy": 64, "business": 12, "first_class": 0},
        "min_runway_length": 6800,
        "purchase_price": 2_200_000,
        "operating_cost_per_nm": 6.0,
        "fuel_per_hour": 400,
    },
    {
        "id": "a220-300",
        "manufacturer": "Airbus",
        "name": "A220-300",
        "range": 3400,
        "speed": 470,
        "default_seats": {"economy": 118, "business": 12, "first_class": 0},
        "min_runway_length": 6300,
        "purchase_price": 4_800_000,
        "operating_cost_per_nm": 8.5,
        "fuel_per_hour": 580,
    },
    {
        "id": "b737-800",
        "manufacturer": "Boeing",
        "name": "737-800",
        "range": 2935,
        "speed": 453,
        "default_seats": {"economy": 150, "business": 16, "first_class": 0},
        "min_runway_length": 7600,
        "purchase_price": 6_000_000,
        "operating_cost_per_nm": 10.0,
        "fuel_per_hour": 750,
    },
    {
        "id": "a320neo",
        "manufacturer": "Airbus",
        "name": "A320neo",
        "range": 3400,
        "speed": 450,
        "default_seats": {"economy": 150, "business": 12, "first_class": 0},
        "min_runway_length": 6900,
        "purchase_price": 6_500_000,
        "operating_cost_per_nm": 9.5,
        "fuel_per_hour": 700,
    },
    {
        "id": "b787-9",
        "manufacturer": "Boeing",
        "name": "787-9 Dreamliner",
        "range": 7530,
        "speed": 488,
        "default_seats": {"economy": 220, "business": 48, "first_class": 8},
        "min_runway_length": 9300,
        "purchase_price": 14_500_000,
        "operating_cost_per_nm": 18.0,
        "fuel_per_hour": 1500,
    },
    {
        "id": "a350-900",
        "manufacturer": "Airbus",
        "name": "A350-900",
        "range": 8100,
        "speed": 488,
        "default_seats": {"economy": 240, "business": 42, "first_class": 8},
        "min_runway_length": 8800,
        "purchase_price": 15_500_000,
        "operating_cost_per_nm": 19.0,
        "fuel_per_hour": 1600,
    },
    {
        "id": "b777-200er",
        "manufacturer": "Boeing",
        "name": "777-200ER",
        "range": 7065,
        "speed": 490,
        "default_seats": {"economy": 260, "business": 42, "first_class": 12},
        "min_runway_length": 9900,
        "purchase_price": 16_000_000,
        "operating_cost_per_nm": 22.0,
        "fuel_per_hour": 1900,
    },
    {
        "id": "a380-800",
        "manufacturer": "Airbus",
        "name": "A380-800",
        "range": 8000,
        "speed": 488,
        "default_seats": {"economy": 400, "business": 76, "first_class": 14},
        "min_runway_length": 9800,
        "purchase_price": 28_000_000,
        "operating_cost_per_nm": 34.0,
        "fuel_per_hour": 3000,
    },
]
