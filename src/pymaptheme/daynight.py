"""Day/night policy for the Auto and NavAuto themes.

The policy is pluggable: anything implementing :class:`DayNightPolicy`
can be handed to the resolver.  :class:`SolarDayNightPolicy` is the
default and decides by the sun's elevation at the last known position.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol

from astral import Observer
from astral.sun import elevation

from pymaptheme.collaborators import ConfigStore
from pymaptheme.config import ThemeConfig
from pymaptheme.models.position import LastKnownPosition
from pymaptheme.models.settings import ConcreteThemeSetting

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class DayNightPolicy(Protocol):
    """Resolves the Auto theme to a concrete setting."""

    def resolve_auto(self) -> ConcreteThemeSetting: ...


def sun_elevation(when: datetime, latitude: float, longitude: float) -> float:
    """Return the sun's elevation in degrees, refraction included."""
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)
    return elevation(Observer(latitude=latitude, longitude=longitude), when, with_refraction=True)


def is_day_time(when: datetime, latitude: float, longitude: float, *, horizon: float) -> bool:
    """Return ``True`` when the sun is above *horizon* degrees at the given place and time.

    Works at any latitude, including polar day and polar night.
    """
    return sun_elevation(when, latitude, longitude) > horizon


class SolarDayNightPolicy:
    """Light by day, Dark by night, at the last known position.

    Deterministic for a fixed clock reading and position.  Without a
    position the previously applied concrete theme is kept, FollowSystem
    included; only when none was stored is ``config.auto_fallback`` used.
    """

    def __init__(
        self,
        store: ConfigStore,
        *,
        config: ThemeConfig | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._config = config or ThemeConfig()
        self._clock = clock

    def resolve_auto(self) -> ConcreteThemeSetting:
        position = self._store.get_last_known_position()
        if position is None:
            return self._fallback()
        return self.resolve_at(self._clock(), position)

    def resolve_at(self, when: datetime, position: LastKnownPosition) -> ConcreteThemeSetting:
        day = is_day_time(when, position.latitude, position.longitude, horizon=self._config.sun_horizon_degrees)
        _logger.debug(
            "Auto theme at lat=%.4f lon=%.4f time=%s: %s",
            position.latitude,
            position.longitude,
            when.isoformat(),
            "day" if day else "night",
        )
        return ConcreteThemeSetting.LIGHT if day else ConcreteThemeSetting.DARK

    def _fallback(self) -> ConcreteThemeSetting:
        previous = self._store.get_current_ui_theme()
        if isinstance(previous, ConcreteThemeSetting):
            _logger.debug("No known position; keeping previous theme %s", previous)
            return previous
        _logger.debug("No known position and no previous theme; using %s", self._config.auto_fallback)
        return self._config.auto_fallback
