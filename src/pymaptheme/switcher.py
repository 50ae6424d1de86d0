"""Theme switcher: gathers inputs, resolves and applies.

This is the only place that reads the collaborators.  It holds no
renderer state between calls; whether the renderer is active is passed
to every :meth:`ThemeSwitcher.restart`.
"""

from __future__ import annotations

import logging

from pymaptheme.apply import ApplyContext, ApplyOutcome, apply_theme
from pymaptheme.collaborators import (
    ConfigStore,
    DisplayModeGuard,
    MapRenderer,
    NavigationStateProvider,
    SystemBrightnessProvider,
    UIThemeController,
)
from pymaptheme.config import ThemeConfig
from pymaptheme.daynight import DayNightPolicy, SolarDayNightPolicy
from pymaptheme.models.resolution import ThemeResolution
from pymaptheme.resolver import ThemeResolver, needs_periodic_check

_logger = logging.getLogger(__name__)


class ThemeSwitcher:
    """Changes the UI theme and the map style when the inputs change.

    Parameters
    ----------
    store
        Persisted theme setting, last known position and previous theme.
    navigation
        Current routing mode.
    system
        OS day/night state, used when the theme follows the system.
    ui
        UI theme controller.
    renderer
        Map renderer; also reports whether the outdoors layer is enabled.
    display
        Tells whether a secondary display manages its own theme.
    config
        Resolver configuration.  Defaults to :class:`ThemeConfig()`.
    policy
        Day/night policy for Auto themes.  Defaults to
        :class:`SolarDayNightPolicy` over *store*.
    """

    def __init__(
        self,
        *,
        store: ConfigStore,
        navigation: NavigationStateProvider,
        system: SystemBrightnessProvider,
        ui: UIThemeController,
        renderer: MapRenderer,
        display: DisplayModeGuard,
        config: ThemeConfig | None = None,
        policy: DayNightPolicy | None = None,
    ) -> None:
        self._config = config or ThemeConfig()
        self._store = store
        self._navigation = navigation
        self._system = system
        self._ui = ui
        self._renderer = renderer
        self._display = display
        self._resolver = ThemeResolver(policy or SolarDayNightPolicy(store, config=self._config))
        self.last_outcome: ApplyOutcome | None = None

    @property
    def config(self) -> ThemeConfig:
        return self._config

    def resolve(self) -> ThemeResolution:
        """Resolve from the collaborators' current state without applying anything."""
        return self._resolver.resolve(
            self._store.get_theme_setting(),
            self._navigation.get_navigation_mode(),
            self._system.get_system_brightness(),
            self._renderer.is_outdoors_layer_enabled(),
        )

    def restart(self, renderer_active: bool) -> ThemeResolution:
        """Re-resolve and apply the theme and map style.

        *renderer_active* must be ``True`` only if the map is rendered and
        visible right now; otherwise the synchronous style change would
        block.  Call on the UI thread.
        """
        resolution = self.resolve()
        context = ApplyContext(
            ui=self._ui,
            renderer=self._renderer,
            display=self._display,
            renderer_active=renderer_active,
        )
        self.last_outcome = apply_theme(resolution.theme, resolution.map_style, context)
        _logger.debug(
            "Theme restart: theme=%s style=%s outcome=%s",
            resolution.theme,
            resolution.map_style.name,
            self.last_outcome,
        )
        return resolution

    def needs_periodic_check(self) -> bool:
        """Whether the current setting must be re-evaluated as time passes."""
        return needs_periodic_check(self._store.get_theme_setting(), self._navigation.get_navigation_mode())
