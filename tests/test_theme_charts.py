"""
Unit tests for blackbody.theme and blackbody.charts.

Charts are checked structurally (traces, axis ranges, shapes), not visually.
"""

from __future__ import annotations

import pytest

from blackbody.analysis import analyze_preset, analyze_temperature
from blackbody.charts import create_spectrum_plot, y_axis_max
from blackbody.theme import (
    PRESET_BACKGROUNDS,
    Theme,
    color_for_temperature,
    fill_color,
    palette_for,
    wavelength_to_rgb,
)
from blackbody.catalog import preset_names


@pytest.mark.parametrize(
    "temperature, theme, expected",
    [
        (1000, Theme.LIGHT, "#d32f2f"),
        (2499, Theme.DARK, "#ff8a80"),
        (2500, Theme.LIGHT, "#f57c00"),
        (4999, Theme.DARK, "#ffb74d"),
        (5800, Theme.LIGHT, "#424242"),
        (5800, Theme.DARK, "#f5f5f5"),
        (8000, Theme.LIGHT, "#1976d2"),
        (12000, Theme.DARK, "#82b1ff"),
    ],
)
def test_color_for_temperature(temperature, theme, expected) -> None:
    assert color_for_temperature(temperature, theme) == expected


def test_color_accepts_theme_strings() -> None:
    assert color_for_temperature(9000, "dark") == "#82b1ff"


def test_theme_parse_and_toggle() -> None:
    assert Theme.parse("DARK") is Theme.DARK
    assert Theme.parse(None, default=Theme.LIGHT) is Theme.LIGHT
    assert Theme.parse("sepia") is None
    assert Theme.LIGHT.toggled() is Theme.DARK


def test_palettes_differ_by_theme() -> None:
    assert palette_for(Theme.LIGHT).grid == "rgba(0, 0, 0, 0.1)"
    assert palette_for(Theme.DARK).grid == "rgba(255, 255, 255, 0.1)"


def test_fill_color() -> None:
    assert fill_color("#1976d2") == "rgba(25, 118, 210, 0.1)"


def test_wavelength_to_rgb() -> None:
    assert wavelength_to_rgb(700) == "rgb(255, 0, 0)"
    assert wavelength_to_rgb(1000) == "rgb(0, 0, 0)"


def test_every_preset_has_background() -> None:
    assert set(PRESET_BACKGROUNDS) == set(preset_names())


def test_spectrum_plot_structure() -> None:
    report = analyze_preset("Sun")
    fig = create_spectrum_plot(report, Theme.DARK)

    assert len(fig.data) == 1
    curve = fig.data[0]
    assert curve.name == "Spectral Intensity"
    assert len(curve.x) == 200
    assert curve.line.color == "#f5f5f5"

    assert fig.layout.xaxis.range[0] == 0
    assert fig.layout.xaxis.range[1] == pytest.approx(report.spectrum.x_max)
    assert fig.layout.yaxis.range[1] == pytest.approx(report.spectrum.peak_radiance * 1.1)
    assert fig.layout.xaxis.gridcolor == "rgba(255, 255, 255, 0.1)"

    # visible band rectangles + peak line
    assert len(fig.layout.shapes) == 60
    assert fig.layout.annotations[0].text == "λmax: 0.50 μm"


def test_spectrum_plot_overlays() -> None:
    fig = create_spectrum_plot(
        analyze_temperature(3000), Theme.LIGHT,
        show_visible_band=False, show_rj=True, show_wien=True,
    )
    names = [trace.name for trace in fig.data]
    assert names == ["Rayleigh-Jeans", "Wien approximation", "Spectral Intensity"]
    assert fig.layout.showlegend is True
    assert len(fig.layout.shapes) == 1


def test_y_axis_max_never_zero() -> None:
    report = analyze_preset("Earth")
    assert y_axis_max(report.spectrum) > 0


@pytest.mark.parametrize(
    "wavelength, expected",
    [
        (400, "rgb(170, 0, 255)"),
        (440, "rgb(0, 0, 255)"),
        (510, "rgb(0, 255, 0)"),
        (580, "rgb(255, 255, 0)"),
        (750, "rgb(255, 0, 0)"),
        (399, "rgb(0, 0, 0)"),
        (751, "rgb(0, 0, 0)"),
    ],
)
def test_wavelength_to_rgb_anchors(wavelength, expected) -> None:
    assert wavelength_to_rgb(wavelength) == expected
