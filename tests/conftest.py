from __future__ import annotations

import dataclasses

import pytest

from pymaptheme.models.map_style import MapStyle
from pymaptheme.models.position import LastKnownPosition
from pymaptheme.models.settings import (
    ConcreteThemeSetting,
    NavigationMode,
    RawThemeSetting,
    SystemBrightnessState,
)


@dataclasses.dataclass
class FakeApp:
    """Mutable stand-in for every collaborator a switcher reads or drives."""

    theme_setting: RawThemeSetting = RawThemeSetting.LIGHT
    position: LastKnownPosition | None = None
    previous_theme: ConcreteThemeSetting | None = None
    navigation: NavigationMode = NavigationMode.NONE
    brightness: SystemBrightnessState = SystemBrightnessState.DAY
    outdoors: bool = False
    alternate_display: bool = False
    current_style: MapStyle = MapStyle.CLEAR
    ui_modes: list[ConcreteThemeSetting] = dataclasses.field(default_factory=list)
    style_calls: list[tuple[str, MapStyle]] = dataclasses.field(default_factory=list)

    # ConfigStore
    def get_theme_setting(self) -> RawThemeSetting:
        return self.theme_setting

    def get_last_known_position(self) -> LastKnownPosition | None:
        return self.position

    def get_current_ui_theme(self) -> ConcreteThemeSetting | None:
        return self.previous_theme

    # NavigationStateProvider / SystemBrightnessProvider
    def get_navigation_mode(self) -> NavigationMode:
        return self.navigation

    def get_system_brightness(self) -> SystemBrightnessState:
        return self.brightness

    # UIThemeController
    def set_mode(self, theme: ConcreteThemeSetting) -> None:
        self.ui_modes.append(theme)
        self.previous_theme = theme

    # MapRenderer
    def set_style_immediate(self, style: MapStyle) -> None:
        self.style_calls.append(("immediate", style))
        self.current_style = style

    def mark_style_pending(self, style: MapStyle) -> None:
        self.style_calls.append(("pending", style))

    def is_active(self) -> bool:
        return True

    def get_current_style(self) -> MapStyle:
        return self.current_style

    def is_outdoors_layer_enabled(self) -> bool:
        return self.outdoors

    # DisplayModeGuard
    def is_alternate_display_in_use(self) -> bool:
        return self.alternate_display


@pytest.fixture
def app() -> FakeApp:
    return FakeApp()
