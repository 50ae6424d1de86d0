from __future__ import annotations

from datetime import UTC, datetime

import pytest

from pymaptheme.config import ThemeConfig
from pymaptheme.daynight import SolarDayNightPolicy, is_day_time, sun_elevation
from pymaptheme.models.position import LastKnownPosition
from pymaptheme.models.settings import ConcreteThemeSetting, RawThemeSetting

AMSTERDAM = LastKnownPosition(latitude=52.37, longitude=4.90)
LONGYEARBYEN = LastKnownPosition(latitude=78.22, longitude=15.65)

SUMMER_NOON = datetime(2026, 6, 21, 12, 0, tzinfo=UTC)
SUMMER_MIDNIGHT = datetime(2026, 6, 21, 0, 0, tzinfo=UTC)
WINTER_NOON = datetime(2026, 12, 21, 11, 0, tzinfo=UTC)
WINTER_MIDNIGHT = datetime(2026, 12, 21, 0, 0, tzinfo=UTC)


class _Store:
    def __init__(
        self,
        position: LastKnownPosition | None = None,
        previous: ConcreteThemeSetting | None = None,
    ) -> None:
        self.position = position
        self.previous = previous

    def get_theme_setting(self) -> RawThemeSetting:
        return RawThemeSetting.AUTO

    def get_last_known_position(self) -> LastKnownPosition | None:
        return self.position

    def get_current_ui_theme(self) -> ConcreteThemeSetting | None:
        return self.previous


def test_day_and_night_at_mid_latitude() -> None:
    assert is_day_time(SUMMER_NOON, AMSTERDAM.latitude, AMSTERDAM.longitude, horizon=-0.833)
    assert not is_day_time(WINTER_MIDNIGHT, AMSTERDAM.latitude, AMSTERDAM.longitude, horizon=-0.833)


def test_polar_day_and_polar_night() -> None:
    # Midnight sun in June, no sunrise at all in December.
    assert is_day_time(SUMMER_MIDNIGHT, LONGYEARBYEN.latitude, LONGYEARBYEN.longitude, horizon=-0.833)
    assert not is_day_time(WINTER_NOON, LONGYEARBYEN.latitude, LONGYEARBYEN.longitude, horizon=-0.833)


def test_naive_datetime_is_treated_as_utc() -> None:
    naive = SUMMER_NOON.replace(tzinfo=None)
    assert sun_elevation(naive, 52.37, 4.90) == pytest.approx(sun_elevation(SUMMER_NOON, 52.37, 4.90))


def test_policy_uses_clock_and_last_known_position() -> None:
    store = _Store(position=AMSTERDAM)

    day_policy = SolarDayNightPolicy(store, clock=lambda: SUMMER_NOON)
    night_policy = SolarDayNightPolicy(store, clock=lambda: WINTER_MIDNIGHT)

    assert day_policy.resolve_auto() is ConcreteThemeSetting.LIGHT
    assert night_policy.resolve_auto() is ConcreteThemeSetting.DARK


def test_policy_is_deterministic_for_fixed_inputs() -> None:
    policy = SolarDayNightPolicy(_Store(position=AMSTERDAM), clock=lambda: WINTER_MIDNIGHT)

    assert {policy.resolve_auto() for _ in range(5)} == {ConcreteThemeSetting.DARK}


def test_horizon_threshold_is_configurable() -> None:
    # Civil twilight counts as day with a -6 degree horizon.
    dusk = datetime(2026, 6, 21, 20, 30, tzinfo=UTC)
    elevation = sun_elevation(dusk, AMSTERDAM.latitude, AMSTERDAM.longitude)
    assert -6.0 < elevation < -0.833

    strict = SolarDayNightPolicy(_Store(), clock=lambda: dusk)
    lenient = SolarDayNightPolicy(_Store(), config=ThemeConfig(sun_horizon_degrees=-6.0), clock=lambda: dusk)

    assert strict.resolve_at(dusk, AMSTERDAM) is ConcreteThemeSetting.DARK
    assert lenient.resolve_at(dusk, AMSTERDAM) is ConcreteThemeSetting.LIGHT


@pytest.mark.parametrize("previous", list(ConcreteThemeSetting))
def test_without_position_previous_theme_is_kept(previous: ConcreteThemeSetting) -> None:
    policy = SolarDayNightPolicy(_Store(previous=previous), clock=lambda: SUMMER_NOON)

    assert policy.resolve_auto() is previous


def test_without_position_or_previous_theme_configured_fallback_is_used() -> None:
    default_policy = SolarDayNightPolicy(_Store())
    dark_policy = SolarDayNightPolicy(
        _Store(),
        config=ThemeConfig(auto_fallback=ConcreteThemeSetting.DARK),
    )

    assert default_policy.resolve_auto() is ConcreteThemeSetting.LIGHT
    assert dark_policy.resolve_auto() is ConcreteThemeSetting.DARK
