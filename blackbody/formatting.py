"""
单位换算与显示格式化
把物理计算结果转换为显示字符串与分类标签
"""

import math
from enum import Enum
from typing import NamedTuple

from blackbody.constants import NEAR_IR_LIMIT_UM, UV_LIMIT_UM, VISIBLE_LIMIT_UM


class SpectralRegion(str, Enum):
    ULTRAVIOLET = "Ultraviolet"
    VISIBLE = "Visible"
    NEAR_INFRARED = "Near Infrared"
    INFRARED = "Infrared"

    def __str__(self):
        return self.value


class CustomProfile(NamedTuple):
    name: str
    icon: str


INTENSITY_UNITS = ("W/m²", "kW/m²", "MW/m²", "GW/m²", "TW/m²")

# 阈值表: (上限, 值)，按顺序匹配第一个 value < 上限 的档位
POWER_TIERS = (
    (1e3, "Radiates very little energy, invisible to the naked eye."),
    (1e6, "Begins to glow dimly, like a hot stove element."),
    (5e7, "Shines brightly, similar to an incandescent light bulb."),
    (1e8, "Extremely luminous, like the surface of our Sun."),
    (math.inf, "Intensely powerful, far exceeding the Sun's radiance."),
)

CUSTOM_BODY_TIERS = (
    (400, CustomProfile("Cold Object", "🪐")),
    (2500, CustomProfile("Red Dwarf Star", "🔴")),
    (5000, CustomProfile("Orange Giant", "🟠")),
    (8000, CustomProfile("Sun-like Star", "☀️")),
    (math.inf, CustomProfile("Blue Giant Star", "🔵")),
)


def _first_tier(value, tiers):
    for limit, result in tiers:
        if value < limit:
            return result
    return tiers[-1][1]


def spectral_region(wavelength_um):
    """
    峰值波长所在光谱分区
    0.4 与 0.75 都属于可见光，2.5 属于近红外
    """
    if wavelength_um < UV_LIMIT_UM:
        return SpectralRegion.ULTRAVIOLET
    if wavelength_um <= VISIBLE_LIMIT_UM:
        return SpectralRegion.VISIBLE
    if wavelength_um <= NEAR_IR_LIMIT_UM:
        return SpectralRegion.NEAR_INFRARED
    return SpectralRegion.INFRARED


def format_intensity(value):
    """
    按 SI 倍数选择单位并保留两位小数
    小于 1 的值一律使用 W/m²；超出 TW 的值（含溢出的 inf）仍以 TW/m² 显示
    """
    if value < 1:
        return f"{value:.2f} {INTENSITY_UNITS[0]}"
    if not math.isfinite(value):
        return f"{value:.2f} {INTENSITY_UNITS[-1]}"
    i = min(int(math.floor(math.log10(value) / 3)), len(INTENSITY_UNITS) - 1)
    return f"{value / 1000 ** i:.2f} {INTENSITY_UNITS[i]}"


def power_description(power):
    return _first_tier(power, POWER_TIERS)


def body_profile_for_temperature(temperature):
    """无预设匹配时，根据温度档位生成自定义天体名称与图标"""
    return _first_tier(temperature, CUSTOM_BODY_TIERS)


def format_temperature(temperature):
    return f"{round(temperature):,} K"


def format_wavelength(wavelength_um):
    return f"{wavelength_um:.2f} μm"
