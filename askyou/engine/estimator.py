from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from askyou.engine.questions import (
    AIRPLANE,
    CAR,
    COMMUTE_MODES,
    FLIGHT_TYPES,
    OCCUPANTS,
    TRIP_FREQUENCY,
    ScenarioDefinition,
    UnknownScenario,
    get_scenario,
)
from askyou.factors.emission_factors import (
    CAR_FUEL_TYPE,
    COMMUTE_MODE,
    ELECTRICITY_PROVIDER,
    FACTORS,
    FLIGHT_HAUL_CLASS,
    UnknownEmissionFactor,
)

ESTIMATOR_VERSION = "1.0.0"

log = logging.getLogger(__name__)

Answers = Mapping[str, str]


@dataclass(frozen=True)
class Quantity:
    name: str
    value: float
    unit: str


@dataclass(frozen=True)
class EstimationResult:
    scenario_id: str
    emissions_kg: float
    unit: str = "kg CO₂"
    period: str = ""
    details: Tuple[Quantity, ...] = ()

    def detail(self, name: str) -> Optional[float]:
        for q in self.details:
            if q.name == name:
                return q.value
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scenario_id": self.scenario_id,
            "emissions_kg": self.emissions_kg,
            "unit": self.unit,
            "period": self.period,
            "details": {q.name: {"value": q.value, "unit": q.unit} for q in self.details},
        }


@dataclass(frozen=True)
class Incomplete:
    """Required input missing, unparseable or out of bounds."""

    scenario_id: str
    reason: str
    question_id: Optional[str] = None


Estimate = Union[EstimationResult, Incomplete]


class IncompleteInput(Exception):
    def __init__(self, reason: str, question_id: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.question_id = question_id


def _norm(s: Any) -> str:
    return str(s or "").strip().lower().replace(" ", "_")


# ----------------------------
# Answer parsing
# ----------------------------
def _raw(answers: Answers, qid: str) -> str:
    return str(answers.get(qid) or "").strip()


def _has(answers: Answers, qid: str) -> bool:
    return _raw(answers, qid) != ""


def _choice(scenario: ScenarioDefinition, answers: Answers, qid: str) -> str:
    value = _raw(answers, qid)
    if not value:
        raise IncompleteInput("missing answer", qid)
    if value not in scenario.question(qid).options:
        raise IncompleteInput(f"unknown option {value!r}", qid)
    return value


def _number(scenario: ScenarioDefinition, answers: Answers, qid: str) -> float:
    raw = _raw(answers, qid)
    if not raw:
        raise IncompleteInput("missing answer", qid)
    # float() accepts "1_000"; form input does not
    if "_" in raw:
        raise IncompleteInput(f"not a number: {raw!r}", qid)
    try:
        x = float(raw)
    except ValueError:
        raise IncompleteInput(f"not a number: {raw!r}", qid) from None
    if not math.isfinite(x):
        raise IncompleteInput("not a finite number", qid)

    spec = scenario.question(qid)
    if spec.min_value is not None:
        if x < spec.min_value or (spec.min_exclusive and x == spec.min_value):
            raise IncompleteInput(f"below lower bound {spec.min_value}", qid)
    if spec.max_value is not None and x > spec.max_value:
        raise IncompleteInput(f"above upper bound {spec.max_value}", qid)
    return x


def _factor(category: str, subtype: str, qid: str) -> float:
    try:
        return FACTORS.lookup(category, subtype)
    except UnknownEmissionFactor as e:
        raise IncompleteInput(str(e), qid) from None


# ----------------------------
# Scenarios
# ----------------------------
def _business_trip(s: ScenarioDefinition, answers: Answers) -> EstimationResult:
    mode = _choice(s, answers, "transport_mode")
    multiplier = TRIP_FREQUENCY[_choice(s, answers, "trip_frequency")]

    if mode == AIRPLANE:
        haul = FLIGHT_TYPES[_choice(s, answers, "flight_type")]
        distance = _number(s, answers, "flight_distance_km")
        factor = _factor(FLIGHT_HAUL_CLASS, haul, "flight_type")
        emissions = distance * factor
        details = [
            Quantity("distance_km", distance * multiplier, "km"),
            Quantity("emission_factor", factor, FACTORS.unit(FLIGHT_HAUL_CLASS)),
        ]
    elif mode == CAR:
        fuel = _norm(_choice(s, answers, "car_fuel_type"))
        distance = _number(s, answers, "car_distance_km")
        efficiency = _number(s, answers, "fuel_efficiency_km_per_l")
        occupants = OCCUPANTS[_choice(s, answers, "occupants")]
        factor = _factor(CAR_FUEL_TYPE, fuel, "car_fuel_type")

        fuel_per_person = (distance / efficiency) / occupants
        emissions = fuel_per_person * factor
        details = [
            Quantity("distance_km", distance * multiplier, "km"),
            Quantity("fuel_used_l", fuel_per_person * multiplier, "L"),
            Quantity("emission_factor", factor, FACTORS.unit(CAR_FUEL_TYPE)),
        ]
    else:
        raise IncompleteInput(f"unsupported mode {mode!r}", "transport_mode")

    details.append(Quantity("annual_multiplier", float(multiplier), "x"))
    return EstimationResult(
        scenario_id=s.id,
        emissions_kg=emissions * multiplier,
        period="per year" if multiplier > 1 else "per trip",
        details=tuple(details),
    )


def _electricity(s: ScenarioDefinition, answers: Answers) -> EstimationResult:
    provider = _choice(s, answers, "provider")
    factor = _factor(ELECTRICITY_PROVIDER, provider, "provider")

    metered = _number(s, answers, "metered_consumption_kwh") if _has(answers, "metered_consumption_kwh") else 0.0
    building_kwh: Optional[float] = None

    if metered > 0:
        org_kwh = metered
        # building total only feeds the building_emissions_kg detail here
        try:
            building_kwh = _number(s, answers, "building_consumption_kwh")
        except IncompleteInput:
            building_kwh = None
    else:
        total_area = _number(s, answers, "building_area_m2")
        occupied = _number(s, answers, "occupied_area_m2")
        building_kwh = _number(s, answers, "building_consumption_kwh")
        if occupied > total_area:
            raise IncompleteInput("occupied area exceeds building area", "occupied_area_m2")
        org_kwh = building_kwh * (occupied / total_area)

    details = [
        Quantity("organization_usage_kwh", org_kwh, "kWh"),
        Quantity("emission_factor", factor, FACTORS.unit(ELECTRICITY_PROVIDER)),
    ]
    if building_kwh is not None:
        details.append(Quantity("building_emissions_kg", building_kwh * factor, "kg CO₂"))

    return EstimationResult(
        scenario_id=s.id,
        emissions_kg=org_kwh * factor,
        period="3 months",
        details=tuple(details),
    )


def _commuting(s: ScenarioDefinition, answers: Answers) -> EstimationResult:
    mode = COMMUTE_MODES[_choice(s, answers, "commute_mode")]
    one_way = _number(s, answers, "one_way_distance_km")
    days = _number(s, answers, "days_per_week")
    weeks = _number(s, answers, "weeks_per_year")

    occupants = 1
    if mode == "car":
        fuel = _norm(_choice(s, answers, "car_fuel_type"))
        occupants = OCCUPANTS[_choice(s, answers, "occupants")]
        factor = _factor(COMMUTE_MODE, f"car_{fuel}", "car_fuel_type")
    else:
        factor = _factor(COMMUTE_MODE, mode, "commute_mode")

    annual_km = 2 * one_way * days * weeks
    return EstimationResult(
        scenario_id=s.id,
        emissions_kg=annual_km * factor / occupants,
        period="per year",
        details=(
            Quantity("annual_distance_km", annual_km, "km"),
            Quantity("emission_factor", factor, FACTORS.unit(COMMUTE_MODE)),
        ),
    )


_ESTIMATORS: Dict[str, Callable[[ScenarioDefinition, Answers], EstimationResult]] = {
    "business-trip": _business_trip,
    "electricity": _electricity,
    "commuting": _commuting,
}


def estimate(scenario_id: str, answers: Answers) -> Estimate:
    """Estimate CO2 for one scenario from the raw answer strings.

    Never raises for bad input: anything missing, unparseable, out of
    bounds or without a factor comes back as ``Incomplete``.
    """
    try:
        scenario = get_scenario(scenario_id)
    except UnknownScenario as e:
        return Incomplete(str(scenario_id), str(e))

    try:
        result = _ESTIMATORS[scenario.id](scenario, answers)
    except IncompleteInput as e:
        log.debug("%s incomplete at %s: %s", scenario.id, e.question_id, e.reason)
        return Incomplete(scenario.id, e.reason, e.question_id)

    if not math.isfinite(result.emissions_kg) or result.emissions_kg < 0:
        return Incomplete(scenario.id, "result out of range")
    return result
