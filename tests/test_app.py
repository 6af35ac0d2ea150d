"""
Smoke tests for the Streamlit page (Blackbody_Radiation.py).

Uses Streamlit's AppTest harness to run the script headlessly and drive
its widgets the way a user would.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from blackbody.slider import slider_to_temperature
from blackbody.theme import Theme

APP_PATH = str(Path(__file__).resolve().parent.parent / "Blackbody_Radiation.py")


@pytest.fixture
def app() -> AppTest:
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_initial_render_shows_sun(app: AppTest) -> None:
    state = app.session_state["app_state"]
    assert state.active_preset == "Sun"
    assert app.slider(key="temp_slider").value == 812


def test_preset_button_selects_body(app: AppTest) -> None:
    app.button(key="preset_earth").click().run()
    assert not app.exception
    state = app.session_state["app_state"]
    assert state.active_preset == "Earth"
    assert state.temperature == 250
    assert app.slider(key="temp_slider").value == 0


def test_slider_switches_to_custom_body(app: AppTest) -> None:
    app.slider(key="temp_slider").set_value(500).run()
    assert not app.exception
    state = app.session_state["app_state"]
    assert state.active_preset is None
    assert state.temperature == pytest.approx(slider_to_temperature(500))


def test_theme_toggle(app: AppTest) -> None:
    app.button(key="theme_toggle").click().run()
    assert not app.exception
    assert app.session_state["app_state"].theme is Theme.DARK


def test_invalid_calculator_input(app: AppTest) -> None:
    app.text_input(key="wien_input").input("abc").run()
    assert not app.exception
    assert any("Invalid Temp" in md.value for md in app.markdown)


def test_extreme_stefan_input_does_not_crash(app: AppTest) -> None:
    app.text_input(key="stefan_input").input("1e80").run()
    assert not app.exception
    assert any("inf TW/m²" in md.value for md in app.markdown)


def test_page_uses_width_argument() -> None:
    source = Path(APP_PATH).read_text(encoding="utf-8")
    assert "use_container_width" not in source
    assert 'width="stretch"' in source
