"""Typed models for theme resolution."""

from pymaptheme.models._base import SettingEnum, UtcTimestamp, parse_timestamp
from pymaptheme.models.map_style import MapStyle
from pymaptheme.models.position import LastKnownPosition
from pymaptheme.models.resolution import ThemeResolution
from pymaptheme.models.settings import (
    ConcreteThemeSetting,
    NavigationMode,
    RawThemeSetting,
    SystemBrightnessState,
)

__all__ = [
    "ConcreteThemeSetting",
    "LastKnownPosition",
    "MapStyle",
    "NavigationMode",
    "RawThemeSetting",
    "SettingEnum",
    "SystemBrightnessState",
    "ThemeResolution",
    "UtcTimestamp",
    "parse_timestamp",
]
