"""Theme, navigation and system brightness settings."""

from __future__ import annotations

from pymaptheme.models._base import SettingEnum

__all__ = [
    "ConcreteThemeSetting",
    "NavigationMode",
    "RawThemeSetting",
    "SystemBrightnessState",
]


class RawThemeSetting(SettingEnum):
    """Theme preference as stored by the user, dynamic variants included."""

    LIGHT = "default"
    DARK = "night"
    FOLLOW_SYSTEM = "follow-system"
    AUTO = "auto"
    NAV_AUTO = "nav-auto"

    @property
    def is_dynamic(self) -> bool:
        """``True`` for settings that depend on time, position or navigation."""
        return self in (RawThemeSetting.AUTO, RawThemeSetting.NAV_AUTO)


class ConcreteThemeSetting(SettingEnum):
    """Theme handed to the UI theme controller. Never dynamic."""

    LIGHT = "default"
    DARK = "night"
    FOLLOW_SYSTEM = "follow-system"


class NavigationMode(SettingEnum):
    """Current routing mode."""

    NONE = "none"
    PEDESTRIAN = "pedestrian"
    VEHICLE = "vehicle"
    OTHER = "other"


class SystemBrightnessState(SettingEnum):
    """OS-level day/night state."""

    DAY = "day"
    NIGHT = "night"
