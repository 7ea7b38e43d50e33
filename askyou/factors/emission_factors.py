from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

# ------------------------------------------------------------
# Fixed emission factors (kg CO2 per unit)
# ------------------------------------------------------------
ELECTRICITY_PROVIDER = "electricity-provider"
FLIGHT_HAUL_CLASS = "flight-haul-class"
CAR_FUEL_TYPE = "car-fuel-type"
COMMUTE_MODE = "commute-mode"

# US grid average 0.81 lb/kWh, converted to kg
LB_TO_KG = 0.453592
OTHER_PROVIDER = "Other"

_FACTORS: Dict[str, Dict[str, float]] = {
    # kg CO2 / kWh
    ELECTRICITY_PROVIDER: {
        "HK Electric": 0.66,
        "CLP": 0.37,
        OTHER_PROVIDER: 0.81 * LB_TO_KG,
    },
    # kg CO2 / passenger-km
    FLIGHT_HAUL_CLASS: {
        "short_haul": 0.156,   # < 500 km
        "medium_haul": 0.131,  # 500-3700 km
        "long_haul": 0.115,    # > 3700 km
    },
    # kg CO2 / litre
    CAR_FUEL_TYPE: {
        "gasoline": 2.34,
        "diesel": 2.68,
        "hybrid": 1.32,
    },
    # kg CO2 / km (car rows are per vehicle, divided by occupants)
    COMMUTE_MODE: {
        "car_gasoline": 0.192,
        "car_diesel": 0.171,
        "car_hybrid": 0.120,
        "public_transport": 0.04,
        "walking_cycling": 0.0,
    },
}

UNITS: Mapping[str, str] = MappingProxyType({
    ELECTRICITY_PROVIDER: "kg CO₂/kWh",
    FLIGHT_HAUL_CLASS: "kg CO₂/km",
    CAR_FUEL_TYPE: "kg CO₂/L",
    COMMUTE_MODE: "kg CO₂/km",
})


class UnknownEmissionFactor(KeyError):
    """Raised for a (category, subtype) pair that has no factor."""

    def __init__(self, category: str, subtype: str):
        super().__init__(f"{category}:{subtype}")
        self.category = category
        self.subtype = subtype

    def __str__(self) -> str:
        return f"No emission factor for {self.category!r} / {self.subtype!r}"


class EmissionFactorTable:
    """Read-only (category, subtype) -> factor lookup."""

    def __init__(self, factors: Mapping[str, Mapping[str, float]]):
        self._factors = MappingProxyType(
            {cat: MappingProxyType(dict(rows)) for cat, rows in factors.items()}
        )

    def categories(self) -> Tuple[str, ...]:
        return tuple(self._factors)

    def subtypes(self, category: str) -> Tuple[str, ...]:
        rows = self._factors.get(category)
        if rows is None:
            raise UnknownEmissionFactor(category, "*")
        return tuple(rows)

    def lookup(self, category: str, subtype: str) -> float:
        rows = self._factors.get(category)
        if rows is None or subtype not in rows:
            raise UnknownEmissionFactor(category, subtype)
        return rows[subtype]

    def has(self, category: str, subtype: str) -> bool:
        return subtype in self._factors.get(category, {})

    def unit(self, category: str) -> str:
        return UNITS.get(category, "")

    def as_rows(self) -> list[dict]:
        """Flat listing, used for the factor table shown on the demo page."""
        return [
            {"category": cat, "subtype": sub, "factor": val, "unit": self.unit(cat)}
            for cat, rows in self._factors.items()
            for sub, val in rows.items()
        ]


FACTORS = EmissionFactorTable(_FACTORS)


def electricity_factor(provider: str) -> float:
    """Provider factor; only the literal ``Other`` option uses the fallback row."""
    return FACTORS.lookup(ELECTRICITY_PROVIDER, provider)
