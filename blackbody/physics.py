"""
黑体辐射物理引擎
普朗克定律 / 维恩位移定律 / 斯特藩-玻尔兹曼定律

所有函数都是纯函数，支持标量与 numpy 数组输入。
本模块不做输入校验：温度 <= 0 属于调用方违约，应在上游拦截。
"""

from dataclasses import dataclass
from typing import Iterator, NamedTuple

import numpy as np
from scipy.integrate import trapezoid

from blackbody.constants import (
    CONST_C1,
    CONST_C2,
    CONST_RJ,
    NEAR_IR_LIMIT_UM,
    RADIANCE_DISPLAY_SCALE,
    SIGMA,
    SPECTRUM_SAMPLES,
    UV_LIMIT_UM,
    VISIBLE_LIMIT_UM,
    WIEN_B,
    WINDOW_MAX_UM,
    WINDOW_MIN_UM,
    WINDOW_PEAK_FACTOR,
)


class SpectralSample(NamedTuple):
    wavelength: float  # μm
    radiance: float


@dataclass(frozen=True, eq=False)
class Spectrum:
    """
    一次完整采样的光谱曲线
    温度变化时整体重算，不做增量修改
    """

    temperature: float
    x_max: float
    wavelengths: np.ndarray  # μm
    radiance: np.ndarray  # 原生单位 × 1e-6

    def __len__(self):
        return len(self.wavelengths)

    def __iter__(self) -> Iterator[SpectralSample]:
        for wl, b in zip(self.wavelengths, self.radiance):
            yield SpectralSample(float(wl), float(b))

    @property
    def peak_radiance(self) -> float:
        return float(np.max(self.radiance))

    def samples(self):
        return list(self)


def _as_float(value):
    # 标量输入返回 Python float，数组保持 ndarray
    if np.ndim(value) == 0:
        return float(value)
    return value


def peak_wavelength(temperature):
    """
    维恩位移定律: λ_max * T = 2898 μm·K
    返回峰值波长(μm)，T = 0 时返回 inf
    """
    with np.errstate(divide='ignore'):
        lambda_max = np.divide(WIEN_B, np.asarray(temperature, dtype=float))
    return _as_float(lambda_max)


def total_power(temperature):
    """
    斯特藩-玻尔兹曼定律: P = σT⁴
    返回单位面积总辐射功率 (W/m²)
    """
    with np.errstate(over='ignore'):
        power = SIGMA * np.asarray(temperature, dtype=float) ** 4
    return _as_float(power)


def spectral_radiance(wavelength_um, temperature):
    """
    普朗克黑体辐射定律（波长形式）

    参数:
        wavelength_um: 波长(μm)，标量或数组
        temperature: 温度(K)

    返回:
        辐射强度 W/m²/m（未做显示缩放）
        λ <= 0 或 T <= 0 时返回 0；指数溢出（λ·T → 0）时同样趋于 0
    """
    wavelength_um = np.asarray(wavelength_um, dtype=float)
    temperature = np.asarray(temperature, dtype=float)
    valid = (wavelength_um > 0) & (temperature > 0)

    # 无效点用 1 占位，最后用 mask 置零
    wavelength_m = np.where(valid, wavelength_um, 1.0) * 1e-6
    safe_t = np.where(valid, temperature, 1.0)

    with np.errstate(over='ignore'):
        exponent = CONST_C2 / (wavelength_m * safe_t)
        B = (CONST_C1 / wavelength_m ** 5) / np.expm1(exponent)

    return _as_float(np.where(valid, B, 0.0))


def rayleigh_jeans(wavelength_um, temperature):
    """
    瑞利-金斯公式（经典近似，长波长适用）
    短波长处发散（紫外灾难）
    """
    wavelength_m = np.asarray(wavelength_um, dtype=float) * 1e-6
    with np.errstate(divide='ignore'):
        B = (CONST_RJ * np.asarray(temperature, dtype=float)) / (wavelength_m ** 4)
    return _as_float(B)


def wien_approximation(wavelength_um, temperature):
    """
    维恩公式（短波长近似）
    """
    wavelength_m = np.asarray(wavelength_um, dtype=float) * 1e-6
    with np.errstate(over='ignore', divide='ignore'):
        exponent = CONST_C2 / (wavelength_m * np.asarray(temperature, dtype=float))
        B = (CONST_C1 / (wavelength_m ** 5)) * np.exp(-exponent)
    return _as_float(B)


def spectrum_window(temperature):
    """
    计算显示窗口上限 x_max (μm)
    以峰值波长的 5 倍为中心窗口，并限制在 [1.5, 30] 之间
    """
    return float(np.clip(peak_wavelength(temperature) * WINDOW_PEAK_FACTOR,
                         WINDOW_MIN_UM, WINDOW_MAX_UM))


def build_spectrum(temperature, samples=SPECTRUM_SAMPLES):
    """
    在 (0, x_max] 上等间距采样 samples 个点
    辐射强度乘以 1e-6 以便显示
    """
    x_max = spectrum_window(temperature)
    wavelengths = np.arange(1, samples + 1) / samples * x_max
    radiance = np.asarray(spectral_radiance(wavelengths, temperature)) * RADIANCE_DISPLAY_SCALE
    return Spectrum(
        temperature=float(temperature),
        x_max=x_max,
        wavelengths=wavelengths,
        radiance=radiance,
    )


def band_power(temperature, wavelength_lo_um, wavelength_hi_um, points=2000):
    """
    对普朗克曲线在 [λ_lo, λ_hi] 上积分
    返回该波段内的辐射功率 (W/m²)
    """
    lambda_um = np.linspace(wavelength_lo_um, wavelength_hi_um, points)
    B = spectral_radiance(lambda_um, temperature)
    return float(trapezoid(B, lambda_um * 1e-6))


def visible_fraction(temperature):
    """
    可见光比例: 可见光波段功率 / 总辐射功率
    """
    power = total_power(temperature)
    if power <= 0:
        return 0.0
    return band_power(temperature, UV_LIMIT_UM, VISIBLE_LIMIT_UM) / power


def near_infrared_fraction(temperature):
    power = total_power(temperature)
    if power <= 0:
        return 0.0
    return band_power(temperature, VISIBLE_LIMIT_UM, NEAR_IR_LIMIT_UM) / power
