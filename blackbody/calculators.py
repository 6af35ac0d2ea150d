"""
维恩 / 斯特藩 快速计算器
自由文本输入，无效输入返回 "Invalid Temp" 而不调用物理引擎
"""

import logging
from typing import NamedTuple

from blackbody.analysis import check_temperature
from blackbody.errors import InvalidTemperatureError
from blackbody.formatting import format_intensity, power_description, spectral_region
from blackbody.physics import peak_wavelength, total_power

logger = logging.getLogger("blackbody")

INVALID_OUTPUT = "Invalid Temp"


class CalculatorResult(NamedTuple):
    output: str
    description: str
    valid: bool = True


INVALID_RESULT = CalculatorResult(INVALID_OUTPUT, "", valid=False)


def parse_temperature(raw, allow_zero=False):
    """
    解析文本温度
    去除首尾空白后严格按 float 解析；非有限值、负数、（默认）零均拒绝
    """
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            raise InvalidTemperatureError(raw, "empty input")
    return check_temperature(raw, allow_zero=allow_zero)


def wien_calculator(raw):
    try:
        temperature = parse_temperature(raw)
    except InvalidTemperatureError as e:
        logger.warning("Wien calculator rejected input: %s", e)
        return INVALID_RESULT
    lambda_max = peak_wavelength(temperature)
    return CalculatorResult(
        f"λ_max ≈ {lambda_max:.2f} μm",
        f"This is in the {spectral_region(lambda_max)} spectrum.",
    )


def stefan_calculator(raw):
    try:
        temperature = parse_temperature(raw, allow_zero=True)
    except InvalidTemperatureError as e:
        logger.warning("Stefan calculator rejected input: %s", e)
        return INVALID_RESULT
    power = total_power(temperature)
    return CalculatorResult(f"P/A ≈ {format_intensity(power)}", power_description(power))
