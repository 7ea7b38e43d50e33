from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parents[1] / "app.py")


def test_home_renders():
    at = AppTest.from_file(APP).run()
    assert not at.exception
    assert "AskYou" in at.title[0].value


def test_demo_page_electricity_estimate():
    at = AppTest.from_file(APP)
    at.switch_page("pages/4_Demo.py")
    at.run()
    assert not at.exception

    at.button(key="btn_electricity").click().run()
    at.selectbox(key="demo:electricity:provider").select("HK Electric").run()
    at.text_input(key="demo:electricity:metered_consumption_kwh").input("1000").run()
    assert not at.exception

    session = at.session_state["demo_session"]
    assert session.result.emissions_kg == pytest.approx(660.0)
