from __future__ import annotations

import asyncio

import pytest

from pymaptheme.checker import AutoThemeChecker
from pymaptheme.config import ThemeConfig
from pymaptheme.exceptions import ThemeInvariantError
from pymaptheme.models.settings import ConcreteThemeSetting, RawThemeSetting
from pymaptheme.switcher import ThemeSwitcher


class _FlippingPolicy:
    def __init__(self) -> None:
        self.calls = 0

    def resolve_auto(self) -> ConcreteThemeSetting:
        self.calls += 1
        return ConcreteThemeSetting.DARK if self.calls % 2 else ConcreteThemeSetting.LIGHT


def _switcher(app, policy) -> ThemeSwitcher:
    return ThemeSwitcher(store=app, navigation=app, system=app, ui=app, renderer=app, display=app, policy=policy)


@pytest.mark.asyncio
async def test_static_theme_applies_once_without_scheduling(app) -> None:
    checker = AutoThemeChecker(_switcher(app, _FlippingPolicy()), lambda: True, interval=0.01)

    checker.start()
    await asyncio.sleep(0.05)

    assert checker.is_running is False
    assert app.ui_modes == [ConcreteThemeSetting.LIGHT]


@pytest.mark.asyncio
async def test_auto_theme_is_rechecked_until_stopped(app) -> None:
    app.theme_setting = RawThemeSetting.AUTO
    policy = _FlippingPolicy()
    checker = AutoThemeChecker(_switcher(app, policy), lambda: True, interval=0.01)

    checker.start()
    await asyncio.sleep(0.1)
    await checker.stop()
    calls = policy.calls
    await asyncio.sleep(0.05)

    assert calls >= 3
    assert policy.calls == calls
    assert checker.is_running is False
    assert ConcreteThemeSetting.DARK in app.ui_modes
    assert ConcreteThemeSetting.LIGHT in app.ui_modes


@pytest.mark.asyncio
async def test_checker_stops_when_setting_becomes_static(app) -> None:
    app.theme_setting = RawThemeSetting.AUTO
    checker = AutoThemeChecker(_switcher(app, _FlippingPolicy()), lambda: True, interval=0.01)

    checker.start()
    assert checker.is_running is True
    app.theme_setting = RawThemeSetting.DARK
    await asyncio.sleep(0.1)

    assert checker.is_running is False
    assert app.ui_modes[-1] is ConcreteThemeSetting.DARK


@pytest.mark.asyncio
async def test_renderer_activity_is_sampled_on_each_check(app) -> None:
    app.theme_setting = RawThemeSetting.AUTO
    active = iter([False, True, True, True, True, True, True, True, True, True, True, True])
    checker = AutoThemeChecker(_switcher(app, _FlippingPolicy()), lambda: next(active, True), interval=0.01)

    checker.start()
    await asyncio.sleep(0.1)
    await checker.stop()

    kinds = [kind for kind, _ in app.style_calls]
    assert kinds[0] == "pending"
    assert "immediate" in kinds[1:]


@pytest.mark.asyncio
async def test_failed_check_is_logged_and_schedule_kept(app, caplog) -> None:
    class _FlakyPolicy(_FlippingPolicy):
        def resolve_auto(self) -> ConcreteThemeSetting:
            result = super().resolve_auto()
            if self.calls == 2:
                raise RuntimeError("location service unavailable")
            return result

    app.theme_setting = RawThemeSetting.AUTO
    policy = _FlakyPolicy()
    checker = AutoThemeChecker(_switcher(app, policy), lambda: True, interval=0.01)

    checker.start()
    await asyncio.sleep(0.1)
    await checker.stop()

    assert policy.calls >= 3
    assert "Periodic theme check failed" in caplog.text

@pytest.mark.asyncio
async def test_invariant_violation_ends_checker(app, caplog) -> None:
    class _BrokenPolicy(_FlippingPolicy):
        def resolve_auto(self) -> ConcreteThemeSetting:
            result = super().resolve_auto()
            if self.calls >= 2:
                return "day"  # type: ignore[return-value]
            return result

    app.theme_setting = RawThemeSetting.AUTO
    policy = _BrokenPolicy()
    checker = AutoThemeChecker(_switcher(app, policy), lambda: True, interval=0.01)

    checker.start()
    await asyncio.sleep(0.1)

    assert checker.is_running is False
    assert policy.calls == 2
    assert "Periodic theme check failed" not in caplog.text
    with pytest.raises(ThemeInvariantError):
        await checker.stop()


def test_default_interval_comes_from_config(app) -> None:
    config = ThemeConfig(auto_check_interval=42.0)
    switcher = ThemeSwitcher(
        store=app, navigation=app, system=app, ui=app, renderer=app, display=app, config=config
    )

    checker = AutoThemeChecker(switcher, lambda: True)

    assert checker._interval == 42.0  # noqa: SLF001
