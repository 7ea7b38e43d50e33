import pytest

from askyou.engine.estimator import EstimationResult, Incomplete
from askyou.engine.questions import UnknownScenario
from askyou.engine.session import DemoSession, SessionState


def test_lifecycle(session):
    assert session.state == SessionState.NO_SCENARIO
    assert session.visible_questions() == []

    session.select_scenario("electricity")
    assert session.state == SessionState.SCENARIO_SELECTED

    session.set_answer("provider", "HK Electric")
    assert session.state == SessionState.INCOMPLETE
    assert isinstance(session.result, Incomplete)

    result = session.set_answer("metered_consumption_kwh", "1000")
    assert session.state == SessionState.ESTIMATED
    assert isinstance(result, EstimationResult)
    assert result.emissions_kg == pytest.approx(660.0)

    session.reset()
    assert session.state == SessionState.NO_SCENARIO
    assert session.answers == {}
    assert session.result is None


def test_switching_scenario_clears_answers(session):
    session.select_scenario("business-trip")
    session.set_answer("transport_mode", "Car")
    session.set_answer("car_fuel_type", "Diesel")

    session.select_scenario("electricity")
    assert session.answers == {}
    assert "car_fuel_type" not in session.answers
    assert session.state == SessionState.SCENARIO_SELECTED


def test_reselecting_same_scenario_keeps_answers(session):
    session.select_scenario("commuting")
    session.set_answer("commute_mode", "Public Transport")
    session.select_scenario("commuting")
    assert session.answers == {"commute_mode": "Public Transport"}


def test_blank_answer_removes_key(session):
    session.select_scenario("electricity")
    session.set_answer("provider", "CLP")
    session.set_answer("metered_consumption_kwh", "100")
    assert session.state == SessionState.ESTIMATED

    session.set_answer("metered_consumption_kwh", "")
    assert "metered_consumption_kwh" not in session.answers
    assert session.state == SessionState.INCOMPLETE
    assert session.incomplete is not None


def test_visible_questions_follow_answers(session):
    session.select_scenario("business-trip")
    session.set_answer("transport_mode", "Airplane")
    assert [q.id for q in session.visible_questions()] == [
        "transport_mode", "flight_type", "flight_distance_km", "trip_frequency",
    ]


def test_misuse_raises(session):
    with pytest.raises(RuntimeError):
        session.set_answer("provider", "CLP")
    with pytest.raises(UnknownScenario):
        session.select_scenario("water")
    session.select_scenario("electricity")
    with pytest.raises(KeyError):
        session.set_answer("transport_mode", "Car")


def test_sessions_do_not_share_answers(session):
    other = DemoSession()
    session.select_scenario("commuting")
    session.set_answer("commute_mode", "Car")
    other.select_scenario("commuting")
    assert other.answers == {}


def test_recompute_without_scenario_raises(session):
    with pytest.raises(RuntimeError):
        session._recompute()
