from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pandas as pd
import streamlit as st

from askyou.engine.estimator import ESTIMATOR_VERSION, EstimationResult
from askyou.engine.questions import SCENARIO_BUTTONS, InputKind, QuestionSpec
from askyou.engine.session import DemoSession
from askyou.factors.emission_factors import FACTORS
from askyou.ui.components import fmt_number, h2

SESSION_KEY = "demo_session"
WIDGET_PREFIX = "demo:"

# (label, detail name or None for the headline figure, unit)
_RESULT_ROWS: Dict[str, List[Tuple[str, Optional[str], str]]] = {
    "business-trip": [
        ("Total CO₂ Emissions", None, "kg CO₂"),
        ("Total Distance", "distance_km", "km"),
        ("Fuel Used per Person", "fuel_used_l", "L"),
        ("Applied Emission Factor", "emission_factor", ""),
    ],
    "electricity": [
        ("Organization's CO₂ Emissions (3 months)", None, "kg CO₂"),
        ("Total Building CO₂ Emissions (3 months)", "building_emissions_kg", "kg CO₂"),
        ("Organization Electricity Usage", "organization_usage_kwh", "kWh"),
        ("Applied Emission Factor", "emission_factor", "kg CO₂/kWh"),
    ],
    "commuting": [
        ("Estimated Annual CO₂ Emissions", None, "kg CO₂"),
        ("Annual Commute Distance", "annual_distance_km", "km/year"),
        ("Applied Emission Factor", "emission_factor", "kg CO₂/km"),
    ],
}


def get_session() -> DemoSession:
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = DemoSession()
    return st.session_state[SESSION_KEY]


def _clear_widgets() -> None:
    for k in list(st.session_state.keys()):
        if str(k).startswith(WIDGET_PREFIX):
            del st.session_state[k]


def _select(session: DemoSession, scenario_id: str) -> None:
    if scenario_id != session.scenario_id:
        _clear_widgets()
    session.select_scenario(scenario_id)


def _scenario_buttons(session: DemoSession) -> None:
    cols = st.columns(len(SCENARIO_BUTTONS))
    for col, (sid, label) in zip(cols, SCENARIO_BUTTONS.items()):
        with col:
            st.button(
                label,
                key=f"btn_{sid}",
                type="primary" if session.scenario_id == sid else "secondary",
                use_container_width=True,
                on_click=_select,
                args=(session, sid),
            )


def _render_question(scenario_id: str, q: QuestionSpec) -> Optional[str]:
    label = f"\\* {q.label}" if q.required else q.label
    key = f"{WIDGET_PREFIX}{scenario_id}:{q.id}"

    if q.kind == InputKind.SELECT:
        return st.selectbox(label, q.options, index=None, placeholder="Please select", key=key)
    if q.kind == InputKind.RADIO:
        return st.radio(label, q.options, index=None, horizontal=True, key=key)
    return st.text_input(label, placeholder=q.placeholder, key=key)


def _questions(session: DemoSession) -> None:
    scenario = session.scenario
    # Predicates only look at earlier questions, so one ordered pass is enough.
    for q in scenario.questions:
        if q.is_visible(session.answers):
            session.set_answer(q.id, _render_question(scenario.id, q))
        elif q.id in session.answers:
            session.set_answer(q.id, None)


def _results(session: DemoSession) -> None:
    h2("Estimated Results")
    result = session.result
    ok = isinstance(result, EstimationResult)

    rows = []
    for label, name, unit in _RESULT_ROWS[session.scenario_id]:
        if not ok:
            value = None
        elif name is None:
            value = result.emissions_kg
        else:
            value = result.detail(name)
            if value is None:
                continue
        if name == "emission_factor" and ok:
            unit = next(q.unit for q in result.details if q.name == name)
        rows.append({"": label, "Value": f"{fmt_number(value)} {unit}".strip()})

    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)

    inc = session.incomplete
    if inc is not None and session.answers:
        st.caption(f"Waiting for input: {inc.question_id or '-'} ({inc.reason})")
    if ok and result.period:
        st.caption(f"Period: {result.period}")

    st.info(session.scenario.note)


def demo_app() -> None:
    session = get_session()

    st.title("AskYou Demo")
    st.write("Experience the Future of ESG Reporting Automation")
    st.caption(f"Estimator version: {ESTIMATOR_VERSION}")

    _scenario_buttons(session)

    if session.scenario is None:
        st.info("Choose a scenario above to start the estimate.")
        return

    st.divider()
    left, right = st.columns([3, 2])
    with left:
        h2(session.scenario.title)
        _questions(session)
        if st.button("Reset", key="btn_reset"):
            session.reset()
            _clear_widgets()
            st.rerun()
    with right:
        _results(session)
        with st.expander("Emission factors used by this demo"):
            st.dataframe(pd.DataFrame(FACTORS.as_rows()), use_container_width=True, hide_index=True)
