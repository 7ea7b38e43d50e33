import pytest

from askyou.engine.questions import FLIGHT_TYPES, FUEL_TYPES, PROVIDERS
from askyou.factors.emission_factors import (
    CAR_FUEL_TYPE,
    COMMUTE_MODE,
    ELECTRICITY_PROVIDER,
    FACTORS,
    FLIGHT_HAUL_CLASS,
    UnknownEmissionFactor,
    electricity_factor,
)


def test_fixed_factor_values():
    assert electricity_factor("HK Electric") == 0.66
    assert electricity_factor("CLP") == 0.37
    assert electricity_factor("Other") == pytest.approx(0.81 * 0.453592)
    assert FACTORS.lookup(FLIGHT_HAUL_CLASS, "short_haul") == 0.156
    assert FACTORS.lookup(FLIGHT_HAUL_CLASS, "medium_haul") == 0.131
    assert FACTORS.lookup(FLIGHT_HAUL_CLASS, "long_haul") == 0.115
    assert FACTORS.lookup(COMMUTE_MODE, "public_transport") == 0.04
    assert FACTORS.lookup(COMMUTE_MODE, "walking_cycling") == 0.0


def test_every_option_has_a_factor():
    for provider in PROVIDERS:
        assert FACTORS.has(ELECTRICITY_PROVIDER, provider)
    for haul in FLIGHT_TYPES.values():
        assert FACTORS.has(FLIGHT_HAUL_CLASS, haul)
    for fuel in FUEL_TYPES:
        assert FACTORS.has(CAR_FUEL_TYPE, fuel.lower())
        assert FACTORS.has(COMMUTE_MODE, f"car_{fuel.lower()}")


def test_unknown_subtype_fails_instead_of_defaulting():
    with pytest.raises(UnknownEmissionFactor):
        electricity_factor("Some Utility")
    with pytest.raises(KeyError):
        FACTORS.lookup(CAR_FUEL_TYPE, "electric")
    with pytest.raises(UnknownEmissionFactor):
        FACTORS.subtypes("no-such-category")


def test_table_is_read_only():
    with pytest.raises(TypeError):
        FACTORS._factors[ELECTRICITY_PROVIDER]["CLP"] = 0.0
    rows = FACTORS.as_rows()
    assert {"category": ELECTRICITY_PROVIDER, "subtype": "CLP", "factor": 0.37, "unit": "kg CO₂/kWh"} in rows
