from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple


class InputKind(str, Enum):
    SELECT = "select"
    RADIO = "radio"
    NUMBER = "number"


class UnknownScenario(ValueError):
    pass


@dataclass(frozen=True)
class ShowIf:
    """Visible only when answer[question_id] is one of ``values``."""

    question_id: str
    values: Tuple[str, ...]

    def __call__(self, answers: Mapping[str, str]) -> bool:
        return answers.get(self.question_id) in self.values


@dataclass(frozen=True)
class QuestionSpec:
    id: str
    label: str
    kind: InputKind
    options: Tuple[str, ...] = ()
    required: bool = True
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    # True: value must be strictly greater than min_value
    min_exclusive: bool = False
    placeholder: str = ""
    show_if: Optional[ShowIf] = None

    def is_visible(self, answers: Mapping[str, str]) -> bool:
        return self.show_if is None or self.show_if(answers)


@dataclass(frozen=True)
class ScenarioDefinition:
    id: str
    title: str
    questions: Tuple[QuestionSpec, ...]
    note: str = ""
    _by_id: Dict[str, QuestionSpec] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        seen: List[str] = []
        for q in self.questions:
            if q.id in seen:
                raise ValueError(f"{self.id}: duplicate question id {q.id!r}")
            if q.show_if is not None and q.show_if.question_id not in seen:
                raise ValueError(
                    f"{self.id}: {q.id!r} depends on {q.show_if.question_id!r}, "
                    "which is not an earlier question"
                )
            seen.append(q.id)
            self._by_id[q.id] = q

    def question(self, question_id: str) -> QuestionSpec:
        return self._by_id[question_id]

    def visible_questions(self, answers: Mapping[str, str]) -> List[QuestionSpec]:
        return [q for q in self.questions if q.is_visible(answers)]


# ------------------------------------------------------------
# Option labels
# ------------------------------------------------------------
AIRPLANE = "Airplane"
CAR = "Car"
PUBLIC_TRANSPORT = "Public Transport"
WALKING_CYCLING = "Walking/Cycling"

FLIGHT_TYPES: Dict[str, str] = {
    "Short-haul (< 500 km)": "short_haul",
    "Medium-haul (500-3700 km)": "medium_haul",
    "Long-haul (> 3700 km)": "long_haul",
}

FUEL_TYPES: Tuple[str, ...] = ("Gasoline", "Diesel", "Hybrid")

OCCUPANTS: Dict[str, int] = {"1": 1, "2": 2, "3": 3, "4": 4, "5+": 5}

TRIP_FREQUENCY: Dict[str, int] = {
    "One-time trip": 1,
    "Weekly": 52,
    "Monthly": 12,
    "Quarterly": 4,
    "Annually": 1,
}

PROVIDERS: Tuple[str, ...] = ("HK Electric", "CLP", "Other")

COMMUTE_MODES: Dict[str, str] = {
    CAR: "car",
    PUBLIC_TRANSPORT: "public_transport",
    WALKING_CYCLING: "walking_cycling",
}

_KM = "Enter distance in kilometers"
_M2 = "Enter area in square meters"
_KWH = "Enter kWh"

_by_plane = ShowIf("transport_mode", (AIRPLANE,))
_by_car = ShowIf("transport_mode", (CAR,))
_commute_car = ShowIf("commute_mode", (CAR,))


BUSINESS_TRIP = ScenarioDefinition(
    id="business-trip",
    title="Business Trip Carbon Emissions",
    note=(
        "These calculations include adjustments for trip frequency and occupancy. "
        "For car travel, fuel efficiency and fuel type are considered. For air travel, "
        "different emission factors are applied based on flight distance."
    ),
    questions=(
        QuestionSpec("transport_mode", "Transportation Mode", InputKind.SELECT, options=(AIRPLANE, CAR)),
        QuestionSpec("flight_type", "Flight Type", InputKind.SELECT, options=tuple(FLIGHT_TYPES), show_if=_by_plane),
        QuestionSpec(
            "flight_distance_km", "Total Flight Distance (in km)", InputKind.NUMBER,
            min_value=0.0, placeholder=_KM, show_if=_by_plane,
        ),
        QuestionSpec("car_fuel_type", "Car Fuel Type", InputKind.SELECT, options=FUEL_TYPES, show_if=_by_car),
        QuestionSpec(
            "car_distance_km", "Total Distance (in km)", InputKind.NUMBER,
            min_value=0.0, placeholder=_KM, show_if=_by_car,
        ),
        QuestionSpec(
            "fuel_efficiency_km_per_l", "Fuel Efficiency (km/L)", InputKind.NUMBER,
            min_value=0.0, min_exclusive=True, placeholder="Enter km per liter", show_if=_by_car,
        ),
        QuestionSpec("occupants", "Number of Occupants", InputKind.SELECT, options=tuple(OCCUPANTS), show_if=_by_car),
        QuestionSpec("trip_frequency", "Trip Frequency", InputKind.SELECT, options=tuple(TRIP_FREQUENCY)),
    ),
)

ELECTRICITY = ScenarioDefinition(
    id="electricity",
    title="Building Electricity Usage Analysis",
    note=(
        "These calculations are based on your electricity consumption and provider's "
        "emission factor. For shared spaces, emissions are calculated proportionally "
        "based on occupied area."
    ),
    questions=(
        QuestionSpec(
            "office_occupancy", "Do you occupy your own office space?", InputKind.RADIO,
            options=("yes", "no_leased", "no_metered"), required=False,
        ),
        QuestionSpec(
            "building_area_m2", "What is the total area of the building? (Enter in square meters)",
            InputKind.NUMBER, min_value=0.0, min_exclusive=True, placeholder=_M2, required=False,
        ),
        QuestionSpec(
            "occupied_area_m2",
            "What is the total area occupied by your organization? (Enter in square meters)",
            InputKind.NUMBER, min_value=0.0, placeholder=_M2, required=False,
        ),
        QuestionSpec(
            "building_consumption_kwh",
            "What is the total building energy consumption in the last 3 months? (Enter in kWh)",
            InputKind.NUMBER, min_value=0.0, placeholder=_KWH, required=False,
        ),
        QuestionSpec(
            "metered_consumption_kwh",
            "If your electricity usage is separately metered, please enter your total "
            "electricity consumption in the last 3 months (in kWh):",
            InputKind.NUMBER, min_value=0.0, placeholder=_KWH, required=False,
        ),
        QuestionSpec("provider", "Electricity Provider", InputKind.SELECT, options=PROVIDERS),
    ),
)

COMMUTING = ScenarioDefinition(
    id="commuting",
    title="Employee Commuting Emissions Analysis",
    note=(
        "These calculations use the round-trip commute distance, office days per week "
        "and working weeks per year to estimate annual emissions. Car emissions are "
        "shared between occupants."
    ),
    questions=(
        QuestionSpec("commute_mode", "Primary Commute Method", InputKind.SELECT, options=tuple(COMMUTE_MODES)),
        QuestionSpec("car_fuel_type", "Car Fuel Type", InputKind.SELECT, options=FUEL_TYPES, show_if=_commute_car),
        QuestionSpec("occupants", "Number of Occupants", InputKind.SELECT, options=tuple(OCCUPANTS), show_if=_commute_car),
        QuestionSpec(
            "one_way_distance_km", "One-way Commute Distance (in km)", InputKind.NUMBER,
            min_value=0.0, placeholder=_KM,
        ),
        QuestionSpec(
            "days_per_week", "Office Days per Week", InputKind.NUMBER,
            min_value=0.0, max_value=7.0, placeholder="0-7",
        ),
        QuestionSpec(
            "weeks_per_year", "Working Weeks per Year", InputKind.NUMBER,
            min_value=0.0, max_value=52.0, placeholder="0-52",
        ),
    ),
)

SCENARIOS: Dict[str, ScenarioDefinition] = {s.id: s for s in (BUSINESS_TRIP, ELECTRICITY, COMMUTING)}

SCENARIO_BUTTONS: Dict[str, str] = {
    "business-trip": "Business Trip Scenario",
    "electricity": "Building Electricity Consumption",
    "commuting": "Employee Commuting",
}


def get_scenario(scenario_id: str) -> ScenarioDefinition:
    try:
        return SCENARIOS[scenario_id]
    except KeyError:
        raise UnknownScenario(f"Unknown scenario: {scenario_id!r}") from None
