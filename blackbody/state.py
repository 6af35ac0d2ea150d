"""
页面状态对象
取代全局变量：当前温度 / 当前预设 / 主题，由展示层持有
"""

import logging
from dataclasses import dataclass
from typing import Optional

from blackbody.analysis import analyze_preset, analyze_temperature, check_temperature
from blackbody.catalog import get_preset
from blackbody.constants import DEFAULT_T, SPECTRUM_SAMPLES
from blackbody.slider import (
    clamp_slider,
    clamp_temperature,
    slider_to_temperature,
    temperature_to_slider,
)
from blackbody.theme import Theme

logger = logging.getLogger("blackbody")


@dataclass
class AppState:
    temperature: float = DEFAULT_T
    active_preset: Optional[str] = "Sun"
    theme: Theme = Theme.LIGHT
    samples: int = SPECTRUM_SAMPLES

    @classmethod
    def from_settings(cls, settings, theme=None):
        state = cls(theme=theme or settings.default_theme, samples=settings.spectrum_samples)
        state.select_preset(settings.default_preset)
        return state

    @property
    def slider_value(self):
        return clamp_slider(temperature_to_slider(self.temperature))

    def select_preset(self, name):
        """温度吸附到预设的字面值，这是唯一会匹配目录的路径"""
        body = get_preset(name)
        self.temperature = float(body.temperature)
        self.active_preset = body.name
        logger.info("Preset selected: %s (%s K)", body.name, body.temperature)

    def set_slider(self, value):
        value = clamp_slider(value)
        self.temperature = slider_to_temperature(value)
        self.active_preset = None
        logger.debug("Slider moved to %d -> %.1f K", value, self.temperature)

    def set_temperature(self, temperature):
        self.temperature = clamp_temperature(check_temperature(temperature))
        self.active_preset = None

    def toggle_theme(self):
        self.theme = self.theme.toggled()
        logger.info("Theme switched to %s", self.theme)
        return self.theme

    def report(self):
        if self.active_preset is not None:
            return analyze_preset(self.active_preset, self.samples)
        return analyze_temperature(self.temperature, self.samples)
