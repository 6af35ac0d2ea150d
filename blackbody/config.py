"""
运行配置
物理常量与范围见 blackbody.constants；这里只放可通过环境变量覆盖的设置
"""

import logging
import os
from dataclasses import dataclass, replace

from blackbody.catalog import PRESETS
from blackbody.constants import SPECTRUM_SAMPLES
from blackbody.theme import Theme

logger = logging.getLogger("blackbody")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """
    Central place for page configuration.
    """

    page_title: str = "Blackbody Radiation Explorer"
    default_preset: str = "Sun"
    default_theme: Theme = Theme.LIGHT
    spectrum_samples: int = SPECTRUM_SAMPLES
    log_level: str = "INFO"


def load_settings(environ=None):
    """
    读取环境变量:
        BLACKBODY_DEFAULT_PRESET  预设名称（精确匹配）
        BLACKBODY_THEME           light / dark
        BLACKBODY_LOG_LEVEL       DEBUG / INFO / ...
    无效值回退到默认值并记录警告
    """
    environ = os.environ if environ is None else environ
    defaults = Settings()
    overrides = {}

    preset = environ.get("BLACKBODY_DEFAULT_PRESET")
    if preset is not None:
        if preset in PRESETS:
            overrides["default_preset"] = preset
        else:
            logger.warning("Ignoring unknown BLACKBODY_DEFAULT_PRESET=%r", preset)

    theme = environ.get("BLACKBODY_THEME")
    if theme is not None:
        parsed = Theme.parse(theme)
        if parsed is None:
            logger.warning("Ignoring invalid BLACKBODY_THEME=%r", theme)
        else:
            overrides["default_theme"] = parsed

    level = environ.get("BLACKBODY_LOG_LEVEL")
    if level is not None:
        if level.upper() in LOG_LEVELS:
            overrides["log_level"] = level.upper()
        else:
            logger.warning("Ignoring invalid BLACKBODY_LOG_LEVEL=%r", level)

    return replace(defaults, **overrides)
