"""Theme and map style resolution.

Resolution runs in three pure steps:

1. :func:`normalize_theme_setting` turns the stored (possibly dynamic)
   setting into Light, Dark or FollowSystem.  This is the value given to
   the UI theme controller.
2. :func:`resolve_brightness` substitutes the OS day/night state for
   FollowSystem, leaving Light or Dark.
3. :func:`select_map_style` picks the map style with vehicle navigation
   taking precedence over the outdoors layer.

None of the steps keep state; :class:`ThemeResolver` only binds the
day/night policy to them.
"""

from __future__ import annotations

import logging

from pymaptheme.daynight import DayNightPolicy
from pymaptheme.exceptions import ThemeInvariantError
from pymaptheme.models.map_style import MapStyle
from pymaptheme.models.resolution import ThemeResolution
from pymaptheme.models.settings import (
    ConcreteThemeSetting,
    NavigationMode,
    RawThemeSetting,
    SystemBrightnessState,
)

_logger = logging.getLogger(__name__)

_PASSTHROUGH: dict[RawThemeSetting, ConcreteThemeSetting] = {
    RawThemeSetting.LIGHT: ConcreteThemeSetting.LIGHT,
    RawThemeSetting.DARK: ConcreteThemeSetting.DARK,
    RawThemeSetting.FOLLOW_SYSTEM: ConcreteThemeSetting.FOLLOW_SYSTEM,
}

_SYSTEM_BRIGHTNESS: dict[SystemBrightnessState, ConcreteThemeSetting] = {
    SystemBrightnessState.DAY: ConcreteThemeSetting.LIGHT,
    SystemBrightnessState.NIGHT: ConcreteThemeSetting.DARK,
}

# (vehicle, outdoors, plain) per brightness, in precedence order.
_STYLE_TABLE: dict[ConcreteThemeSetting, tuple[MapStyle, MapStyle, MapStyle]] = {
    ConcreteThemeSetting.DARK: (MapStyle.VEHICLE_DARK, MapStyle.OUTDOORS_DARK, MapStyle.DARK),
    ConcreteThemeSetting.LIGHT: (MapStyle.VEHICLE_CLEAR, MapStyle.OUTDOORS_CLEAR, MapStyle.CLEAR),
}


def _check_concrete(value: object, origin: str) -> ConcreteThemeSetting:
    if not isinstance(value, ConcreteThemeSetting):
        raise ThemeInvariantError(f"{origin} returned {value!r}, expected a ConcreteThemeSetting")
    return value


def normalize_theme_setting(
    raw: RawThemeSetting,
    nav: NavigationMode,
    policy: DayNightPolicy,
) -> ConcreteThemeSetting:
    """Resolve dynamic settings (Auto, NavAuto) to a concrete setting.

    Light, Dark and FollowSystem pass through.  Auto asks *policy*.
    NavAuto behaves like Auto during vehicle navigation and is Light
    otherwise.
    """
    if not isinstance(raw, RawThemeSetting):
        raise ThemeInvariantError(f"expected a RawThemeSetting, got {raw!r}")

    concrete = _PASSTHROUGH.get(raw)
    if concrete is not None:
        return concrete

    if raw is RawThemeSetting.NAV_AUTO and nav is not NavigationMode.VEHICLE:
        return ConcreteThemeSetting.LIGHT

    return _check_concrete(policy.resolve_auto(), "day/night policy")


def resolve_brightness(
    concrete: ConcreteThemeSetting,
    brightness: SystemBrightnessState,
) -> ConcreteThemeSetting:
    """Return Light or Dark for the map, following the OS state for FollowSystem."""
    if concrete is ConcreteThemeSetting.FOLLOW_SYSTEM:
        resolved = _SYSTEM_BRIGHTNESS.get(brightness)
        if resolved is None:
            raise ThemeInvariantError(f"expected a SystemBrightnessState, got {brightness!r}")
        return resolved
    if concrete in _STYLE_TABLE:
        return concrete
    raise ThemeInvariantError(f"expected a ConcreteThemeSetting, got {concrete!r}")


def select_map_style(brightness: ConcreteThemeSetting, nav: NavigationMode, outdoors: bool) -> MapStyle:
    """Pick the map style: vehicle beats outdoors beats plain.

    *brightness* must be Light or Dark; anything else raises
    :class:`ThemeInvariantError` rather than falling back to a default.
    """
    styles = _STYLE_TABLE.get(brightness) if isinstance(brightness, ConcreteThemeSetting) else None
    if styles is None:
        raise ThemeInvariantError(f"map style needs light or dark brightness, got {brightness!r}")
    vehicle_style, outdoors_style, plain_style = styles
    if nav is NavigationMode.VEHICLE:
        return vehicle_style
    if outdoors:
        return outdoors_style
    return plain_style


def needs_periodic_check(raw: RawThemeSetting, nav: NavigationMode) -> bool:
    """Whether the resolved theme can change with time alone."""
    if raw is RawThemeSetting.AUTO:
        return True
    return raw is RawThemeSetting.NAV_AUTO and nav is NavigationMode.VEHICLE


class ThemeResolver:
    """Stateless resolver bound to a day/night policy."""

    def __init__(self, policy: DayNightPolicy) -> None:
        self._policy = policy

    @property
    def policy(self) -> DayNightPolicy:
        return self._policy

    def resolve(
        self,
        raw: RawThemeSetting,
        nav: NavigationMode,
        brightness: SystemBrightnessState,
        outdoors: bool,
    ) -> ThemeResolution:
        """Resolve the UI theme and map style for one set of inputs."""
        theme = normalize_theme_setting(raw, nav, self._policy)
        renderable = resolve_brightness(theme, brightness)
        style = select_map_style(renderable, nav, outdoors)
        _logger.debug(
            "Resolved raw=%s nav=%s brightness=%s outdoors=%s -> theme=%s style=%s",
            raw,
            nav,
            brightness,
            outdoors,
            theme,
            style.name,
        )
        return ThemeResolution(
            theme=theme,
            map_style=style,
            is_dark=renderable is ConcreteThemeSetting.DARK,
        )
