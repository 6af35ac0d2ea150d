"""
黑体辐射可视化核心包
普朗克定律 / 维恩位移定律 / 斯特藩-玻尔兹曼定律 + 显示格式化
"""

from blackbody.analysis import RadiationReport, analyze_preset, analyze_temperature
from blackbody.catalog import PRESETS, ReferenceBody, get_preset, preset_names
from blackbody.errors import BlackbodyError, InvalidTemperatureError, UnknownPresetError
from blackbody.physics import (
    SpectralSample,
    Spectrum,
    build_spectrum,
    peak_wavelength,
    spectral_radiance,
    total_power,
)
from blackbody.slider import slider_to_temperature, temperature_to_slider

__all__ = [
    "PRESETS",
    "BlackbodyError",
    "InvalidTemperatureError",
    "RadiationReport",
    "ReferenceBody",
    "SpectralSample",
    "Spectrum",
    "UnknownPresetError",
    "analyze_preset",
    "analyze_temperature",
    "build_spectrum",
    "get_preset",
    "peak_wavelength",
    "preset_names",
    "slider_to_temperature",
    "spectral_radiance",
    "temperature_to_slider",
    "total_power",
]
