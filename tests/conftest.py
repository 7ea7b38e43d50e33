import pytest

from askyou.config import get_settings
from askyou.engine.session import DemoSession


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch):
    # no SMTP unless a test opts in
    for k in ("SMTP_HOST", "SMTP_USER", "SMTP_PASS", "MAIL_FROM", "CONTACT_EMAIL"):
        monkeypatch.delenv(k, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def session():
    return DemoSession()


@pytest.fixture
def flight_answers():
    return {
        "transport_mode": "Airplane",
        "flight_type": "Short-haul (< 500 km)",
        "flight_distance_km": "400",
        "trip_frequency": "One-time trip",
    }


@pytest.fixture
def car_answers():
    return {
        "transport_mode": "Car",
        "car_fuel_type": "Diesel",
        "car_distance_km": "300",
        "fuel_efficiency_km_per_l": "15",
        "occupants": "2",
        "trip_frequency": "One-time trip",
    }


@pytest.fixture
def commute_answers():
    return {
        "commute_mode": "Public Transport",
        "one_way_distance_km": "10",
        "days_per_week": "5",
        "weeks_per_year": "48",
    }
