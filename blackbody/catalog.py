"""
预设天体目录（只读）
名称 -> 温度 / 图标 / 观测描述

背景图片等纯展示用的装饰信息在 blackbody.theme 中维护。
"""

from dataclasses import dataclass
from types import MappingProxyType

from blackbody.errors import UnknownPresetError


@dataclass(frozen=True)
class ReferenceBody:
    name: str
    temperature: float
    icon: str
    observation: str


PRESETS = MappingProxyType({
    body.name: body
    for body in (
        ReferenceBody(
            "Earth", 250, "🌍",
            "Emits in the infrared range, radiating heat but producing no visible light.",
        ),
        ReferenceBody(
            "Light Bulb", 3000, "💡",
            "Most radiation is infrared (heat), making incandescent bulbs inefficient.",
        ),
        ReferenceBody(
            "Sun", 5800, "☀️",
            "Emission peaks in the visible spectrum, appearing white to our eyes.",
        ),
        ReferenceBody(
            "Sirius A", 9850, "⭐",
            "A hot, massive star that emits strongly in the UV and blue part of the spectrum.",
        ),
    )
})


def get_preset(name):
    """按名称精确查找预设，不做模糊匹配"""
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPresetError(name) from None


def preset_names():
    return list(PRESETS)
