"""
对数刻度滑块映射
滑块 [0, 1000] <-> 温度 [250, 12000] K

相同的滑块位移对应相同的温度相对变化。
映射函数本身不做钳位，需要时由调用方使用 clamp_* 辅助函数。
"""

import numpy as np

from blackbody.constants import MAX_T, MIN_T, SLIDER_MAX, SLIDER_MIN

MIN_LOG_T = np.log(MIN_T)
MAX_LOG_T = np.log(MAX_T)
LOG_SCALE = (MAX_LOG_T - MIN_LOG_T) / (SLIDER_MAX - SLIDER_MIN)


def slider_to_temperature(value):
    """滑块值 -> 温度(K)"""
    return float(np.exp(MIN_LOG_T + (value - SLIDER_MIN) * LOG_SCALE))


def temperature_to_slider(temperature):
    """温度(K) -> 滑块值（浮点，未取整）"""
    return float(SLIDER_MIN + (np.log(temperature) - MIN_LOG_T) / LOG_SCALE)


def clamp_temperature(temperature):
    return float(min(MAX_T, max(MIN_T, temperature)))


def clamp_slider(value):
    return int(round(min(SLIDER_MAX, max(SLIDER_MIN, value))))
