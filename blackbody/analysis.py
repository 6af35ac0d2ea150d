"""
结果汇总：温度或预设名称 -> 展示层需要的全部数值

展示层只依赖 RadiationReport，不直接调用物理引擎。
"""

import logging
import math
from dataclasses import dataclass

from blackbody.catalog import get_preset
from blackbody.constants import SPECTRUM_SAMPLES
from blackbody.errors import InvalidTemperatureError
from blackbody.formatting import (
    SpectralRegion,
    body_profile_for_temperature,
    format_intensity,
    power_description,
    spectral_region,
)
from blackbody.physics import (
    Spectrum,
    build_spectrum,
    near_infrared_fraction,
    peak_wavelength,
    total_power,
    visible_fraction,
)

logger = logging.getLogger("blackbody")

CUSTOM_OBSERVATION = "A custom body at this temperature."


@dataclass(frozen=True)
class BodyProfile:
    name: str
    icon: str
    temperature: float
    observation: str
    is_preset: bool = False


@dataclass(frozen=True, eq=False)
class RadiationReport:
    temperature: float
    peak_wavelength: float  # μm
    region: SpectralRegion
    total_power: float  # W/m²
    power_text: str
    power_description: str
    spectrum: Spectrum
    profile: BodyProfile
    visible_fraction: float
    near_infrared_fraction: float


def check_temperature(value, allow_zero=False):
    """
    校验温度：必须为有限数值，且 > 0（allow_zero 时允许 = 0）
    返回 float
    """
    try:
        temperature = float(value)
    except (TypeError, ValueError):
        raise InvalidTemperatureError(value, "not a number") from None
    if not math.isfinite(temperature):
        raise InvalidTemperatureError(value, "not a finite number")
    if temperature < 0 or (temperature == 0 and not allow_zero):
        raise InvalidTemperatureError(value, "must be positive")
    return temperature


def custom_profile(temperature):
    name, icon = body_profile_for_temperature(temperature)
    return BodyProfile(name, icon, temperature, CUSTOM_OBSERVATION)


def _build_report(temperature, profile, samples):
    peak = peak_wavelength(temperature)
    power = total_power(temperature)
    return RadiationReport(
        temperature=temperature,
        peak_wavelength=peak,
        region=spectral_region(peak),
        total_power=power,
        power_text=format_intensity(power),
        power_description=power_description(power),
        spectrum=build_spectrum(temperature, samples),
        profile=profile,
        visible_fraction=visible_fraction(temperature),
        near_infrared_fraction=near_infrared_fraction(temperature),
    )


def analyze_temperature(temperature, samples=SPECTRUM_SAMPLES):
    """任意温度 -> 自定义天体的完整结果"""
    temperature = check_temperature(temperature)
    logger.debug("Analyzing custom body at %.1f K", temperature)
    return _build_report(temperature, custom_profile(temperature), samples)


def analyze_preset(name, samples=SPECTRUM_SAMPLES):
    """预设名称 -> 使用目录中字面温度的完整结果"""
    body = get_preset(name)
    temperature = float(body.temperature)
    logger.debug("Analyzing preset %s at %.1f K", name, temperature)
    profile = BodyProfile(body.name, body.icon, temperature, body.observation, is_preset=True)
    return _build_report(temperature, profile, samples)
