"""Structural interfaces for the subsystems theme resolution talks to.

Everything here is owned elsewhere: settings persistence, the OS theme
API, the map renderer and the car display.  Having protocols makes it
easy to pass test doubles while keeping the production adapters in the
host application.
"""

from __future__ import annotations

from typing import Protocol

from pymaptheme.models.map_style import MapStyle
from pymaptheme.models.position import LastKnownPosition
from pymaptheme.models.settings import (
    ConcreteThemeSetting,
    NavigationMode,
    RawThemeSetting,
    SystemBrightnessState,
)


class ConfigStore(Protocol):
    """Read-only view of the persisted theme settings."""

    def get_theme_setting(self) -> RawThemeSetting: ...

    def get_last_known_position(self) -> LastKnownPosition | None: ...

    def get_current_ui_theme(self) -> ConcreteThemeSetting | None:
        """Concrete theme applied last time, if any."""
        ...


class UIThemeController(Protocol):
    """OS-level UI theme switch. Idempotent and cheap."""

    def set_mode(self, theme: ConcreteThemeSetting) -> None: ...


class MapRenderer(Protocol):
    """Map rendering engine handle.

    ``set_style_immediate`` is synchronous and blocks the caller when the
    renderer is not active.  ``mark_style_pending`` records the style to be
    applied when rendering resumes.
    """

    def set_style_immediate(self, style: MapStyle) -> None: ...

    def mark_style_pending(self, style: MapStyle) -> None: ...

    def is_active(self) -> bool: ...

    def get_current_style(self) -> MapStyle: ...

    def is_outdoors_layer_enabled(self) -> bool: ...


class DisplayModeGuard(Protocol):
    """Reports whether a secondary display with its own theming is in use."""

    def is_alternate_display_in_use(self) -> bool: ...


class NavigationStateProvider(Protocol):
    def get_navigation_mode(self) -> NavigationMode: ...


class SystemBrightnessProvider(Protocol):
    def get_system_brightness(self) -> SystemBrightnessState: ...
