"""
主题与纯展示用的配色 / 装饰
不影响任何物理计算
"""

from enum import Enum
from typing import NamedTuple

import numpy as np


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def __str__(self):
        return self.value

    def toggled(self):
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK

    @classmethod
    def parse(cls, value, default=None):
        """宽松解析（用于 URL 参数 / 环境变量），无法识别时返回 default"""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return default


class Palette(NamedTuple):
    background: str
    panel: str
    text: str
    text_secondary: str
    accent: str
    grid: str
    font: str


PALETTES = {
    Theme.LIGHT: Palette(
        background="#F8F9FA",
        panel="#FFFFFF",
        text="#212529",
        text_secondary="#6C757D",
        accent="#0D6EFD",
        grid="rgba(0, 0, 0, 0.1)",
        font="#6C757D",
    ),
    Theme.DARK: Palette(
        background="#111827",
        panel="#1F2937",
        text="#F9FAFB",
        text_secondary="#9CA3AF",
        accent="#60A5FA",
        grid="rgba(255, 255, 255, 0.1)",
        font="#9CA3AF",
    ),
}

# (上限温度, 浅色, 深色)
TEMPERATURE_COLORS = (
    (2500, "#d32f2f", "#ff8a80"),  # Red
    (5000, "#f57c00", "#ffb74d"),  # Orange
    (8000, "#424242", "#f5f5f5"),  # White / Grey
    (float("inf"), "#1976d2", "#82b1ff"),  # Blue
)

# 预设按钮背景图
PRESET_BACKGROUNDS = {
    "Earth": "https://images.unsplash.com/photo-1614730321146-b6fa6a46bcb4?q=80&w=2070&auto=format&fit=crop",
    "Light Bulb": "https://images.unsplash.com/photo-1547483238-f400e65cceb2?q=80&w=1974&auto=format&fit=crop",
    "Sun": "https://images.unsplash.com/photo-1622521926312-347c43231362?q=80&w=2070&auto=format&fit=crop",
    "Sirius A": "https://images.unsplash.com/photo-1534796636912-3b95b3ab5986?q=80&w=2071&auto=format&fit=crop",
}


def palette_for(theme):
    return PALETTES[Theme(theme)]


def color_for_temperature(temperature, theme):
    """曲线颜色：按 2500 / 5000 / 8000 K 分档，区分浅色与深色主题"""
    dark = Theme(theme) is Theme.DARK
    for limit, light_color, dark_color in TEMPERATURE_COLORS:
        if temperature < limit:
            return dark_color if dark else light_color
    return TEMPERATURE_COLORS[-1][2 if dark else 1]


def fill_color(hex_color, alpha=0.1):
    """#rrggbb -> rgba(...)，用于曲线下方填充"""
    h = hex_color.lstrip("#")
    r, g, b = (int(h[i:i + 2], 16) for i in (0, 2, 4))
    return f"rgba({r}, {g}, {b}, {alpha})"


# 可见光色带锚点: (nm, r, g, b)，锚点之间线性插值
VISIBLE_ANCHORS = (
    (400, 2 / 3, 0.0, 1.0),  # 紫
    (440, 0.0, 0.0, 1.0),  # 蓝
    (490, 0.0, 1.0, 1.0),  # 青
    (510, 0.0, 1.0, 0.0),  # 绿
    (580, 1.0, 1.0, 0.0),  # 黄
    (645, 1.0, 0.0, 0.0),  # 红
    (750, 1.0, 0.0, 0.0),
)


def wavelength_to_rgb(wavelength_nm):
    """
    可见光波长(nm) -> 'rgb(r, g, b)'，仅覆盖图中着色的 400–750 nm 色带
    色带之外返回黑色
    """
    nm, r, g, b = zip(*VISIBLE_ANCHORS)
    if not nm[0] <= wavelength_nm <= nm[-1]:
        return 'rgb(0, 0, 0)'
    channels = (round(float(np.interp(wavelength_nm, nm, c) * 255)) for c in (r, g, b))
    return 'rgb({}, {}, {})'.format(*channels)


def page_css(theme):
    """根据主题生成页面 CSS"""
    p = palette_for(theme)
    return f"""
<style>
    .stApp {{
        background-color: {p.background};
        color: {p.text};
    }}
    section[data-testid="stSidebar"] {{
        background-color: {p.panel} !important;
    }}
    .stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label {{
        color: {p.text};
    }}
    .stat-card {{
        background-color: {p.panel};
        padding: 12px 16px;
        border-radius: 10px;
        margin-bottom: 12px;
    }}
    .stat-card .label {{
        color: {p.text_secondary};
        font-size: 14px;
        margin: 0;
    }}
    .stat-card .value {{
        color: {p.accent};
        font-size: 24px;
        font-weight: 600;
        margin: 4px 0 0 0;
    }}
    .observation {{
        color: {p.text_secondary};
        font-style: italic;
    }}
</style>
"""
