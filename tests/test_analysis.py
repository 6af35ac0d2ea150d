"""
Unit tests for blackbody.analysis (result bundles for the page).

Covers the end-to-end scenarios: selecting "Sun" and "Earth".
"""

from __future__ import annotations

import math

import pytest

from blackbody.analysis import (
    CUSTOM_OBSERVATION,
    analyze_preset,
    analyze_temperature,
    check_temperature,
)
from blackbody.errors import InvalidTemperatureError, UnknownPresetError
from blackbody.formatting import SpectralRegion


def test_sun_preset_scenario() -> None:
    report = analyze_preset("Sun")
    assert report.temperature == 5800
    assert report.peak_wavelength == pytest.approx(0.4997, abs=1e-4)
    assert f"{report.peak_wavelength:.2f}" == "0.50"
    assert report.region is SpectralRegion.VISIBLE
    assert report.total_power == pytest.approx(6.42e7, rel=1e-3)
    assert report.power_text == "64.16 MW/m²"
    assert "surface of our Sun" in report.power_description
    assert report.profile.name == "Sun"
    assert report.profile.icon == "☀️"
    assert report.profile.is_preset
    assert len(report.spectrum) == 200


def test_earth_preset_scenario() -> None:
    report = analyze_preset("Earth")
    assert report.peak_wavelength == pytest.approx(11.592)
    assert report.region is SpectralRegion.INFRARED
    assert report.total_power == pytest.approx(221.5, abs=0.05)
    assert report.power_text == "221.48 W/m²"
    assert report.spectrum.x_max == 30
    assert report.visible_fraction < 1e-10


def test_custom_temperature_uses_bucket_profile() -> None:
    report = analyze_temperature(3500)
    assert report.profile.name == "Orange Giant"
    assert report.profile.observation == CUSTOM_OBSERVATION
    assert not report.profile.is_preset
    assert report.region is SpectralRegion.NEAR_INFRARED


def test_custom_temperature_at_preset_value_is_still_custom() -> None:
    """
    Only an explicit preset pick snaps to a catalog entry.
    """
    report = analyze_temperature(5800)
    assert report.profile.name == "Sun-like Star"
    assert not report.profile.is_preset


def test_fractions_are_bounded() -> None:
    report = analyze_preset("Light Bulb")
    assert 0 < report.visible_fraction < 1
    assert 0 < report.near_infrared_fraction < 1
    assert report.near_infrared_fraction > report.visible_fraction


@pytest.mark.parametrize("bad", [0, -5, math.nan, math.inf, "hot", None])
def test_analyze_temperature_rejects_invalid_input(bad) -> None:
    with pytest.raises(InvalidTemperatureError):
        analyze_temperature(bad)


def test_analyze_preset_unknown_name() -> None:
    with pytest.raises(UnknownPresetError):
        analyze_preset("Vega")


def test_check_temperature() -> None:
    assert check_temperature("300") == 300.0
    assert check_temperature(0, allow_zero=True) == 0.0
    with pytest.raises(InvalidTemperatureError):
        check_temperature(0)
    with pytest.raises(ValueError):
        check_temperature(-1, allow_zero=True)


def test_extreme_temperature_report_is_total() -> None:
    """
    A finite temperature large enough to overflow σT⁴ still yields a report.
    """
    report = analyze_temperature(1e80)
    assert math.isinf(report.total_power)
    assert report.power_text == "inf TW/m²"
    assert report.region is SpectralRegion.ULTRAVIOLET
    assert report.visible_fraction == 0.0
    assert len(report.spectrum) == 200


def test_reports_compare_by_identity() -> None:
    first = analyze_preset("Sun")
    second = analyze_preset("Sun")
    assert first == first
    assert first != second
    assert first.spectrum != second.spectrum
    assert len({first, second}) == 2
