"""pymaptheme - UI theme and map style resolution for map applications."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pymaptheme")
except PackageNotFoundError:
    __version__ = "0+local"
from pymaptheme.apply import ApplyContext, ApplyOutcome, apply_theme
from pymaptheme.checker import AutoThemeChecker
from pymaptheme.config import ThemeConfig
from pymaptheme.daynight import DayNightPolicy, SolarDayNightPolicy, is_day_time
from pymaptheme.exceptions import (
    ThemeConfigError,
    ThemeError,
    ThemeInvariantError,
    ThemeSettingError,
)
from pymaptheme.models import (
    ConcreteThemeSetting,
    LastKnownPosition,
    MapStyle,
    NavigationMode,
    RawThemeSetting,
    SystemBrightnessState,
    ThemeResolution,
)
from pymaptheme.resolver import (
    ThemeResolver,
    needs_periodic_check,
    normalize_theme_setting,
    resolve_brightness,
    select_map_style,
)
from pymaptheme.switcher import ThemeSwitcher

__all__ = [
    "__version__",
    "ApplyContext",
    "ApplyOutcome",
    "AutoThemeChecker",
    "ConcreteThemeSetting",
    "DayNightPolicy",
    "LastKnownPosition",
    "MapStyle",
    "NavigationMode",
    "RawThemeSetting",
    "SolarDayNightPolicy",
    "SystemBrightnessState",
    "ThemeConfig",
    "ThemeConfigError",
    "ThemeError",
    "ThemeInvariantError",
    "ThemeResolution",
    "ThemeResolver",
    "ThemeSettingError",
    "ThemeSwitcher",
    "apply_theme",
    "is_day_time",
    "needs_periodic_check",
    "normalize_theme_setting",
    "resolve_brightness",
    "select_map_style",
]
