"""Resolver configuration for pymaptheme."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any

from pymaptheme._constants import DEFAULT_AUTO_CHECK_INTERVAL, DEFAULT_SUN_HORIZON_DEGREES, ENV_PREFIX
from pymaptheme.exceptions import ThemeConfigError, ThemeSettingError
from pymaptheme.models.settings import ConcreteThemeSetting

_RENDERABLE = (ConcreteThemeSetting.LIGHT, ConcreteThemeSetting.DARK)


def _env_float(env: Mapping[str, str], key: str) -> float | None:
    raw = env.get(key)
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ThemeConfigError(f"{key} must be a number, got {raw!r}") from exc


def _env_theme(env: Mapping[str, str], key: str) -> ConcreteThemeSetting | None:
    raw = env.get(key)
    if raw is None:
        return None
    try:
        return ConcreteThemeSetting.parse(raw)
    except ThemeSettingError as exc:
        raise ThemeConfigError(f"{key}: {exc}") from exc


@dataclasses.dataclass(frozen=True)
class ThemeConfig:
    """Resolver configuration.

    Parameters
    ----------
    auto_check_interval : float
        Seconds between re-evaluations of the Auto / NavAuto themes.
        Defaults to 30 minutes.
    sun_horizon_degrees : float
        Sun elevation at or below which it counts as night.  The default
        matches sunrise/sunset with atmospheric refraction.
    auto_fallback : ConcreteThemeSetting
        Theme used by Auto when no position is known and no previous
        theme was stored.  Must be Light or Dark.
    """

    auto_check_interval: float = DEFAULT_AUTO_CHECK_INTERVAL
    sun_horizon_degrees: float = DEFAULT_SUN_HORIZON_DEGREES
    auto_fallback: ConcreteThemeSetting = ConcreteThemeSetting.LIGHT

    def __post_init__(self) -> None:
        if self.auto_check_interval <= 0:
            raise ThemeConfigError(f"auto_check_interval must be positive, got {self.auto_check_interval}")
        if not -90.0 <= self.sun_horizon_degrees <= 90.0:
            raise ThemeConfigError(f"sun_horizon_degrees must be between -90 and 90, got {self.sun_horizon_degrees}")
        try:
            fallback = ConcreteThemeSetting.parse(self.auto_fallback)
        except ThemeSettingError as exc:
            raise ThemeConfigError(f"auto_fallback: {exc}") from exc
        if fallback not in _RENDERABLE:
            raise ThemeConfigError(f"auto_fallback must be light or dark, got {fallback!r}")
        object.__setattr__(self, "auto_fallback", fallback)

    @classmethod
    def from_env(cls, **overrides: Any) -> ThemeConfig:
        """Create configuration from environment variables.

        Reads ``MAPTHEME_AUTO_CHECK_INTERVAL``, ``MAPTHEME_SUN_HORIZON``
        and ``MAPTHEME_AUTO_FALLBACK``.
        Explicit keyword arguments override environment values.

        Raises
        ------
        ThemeConfigError
            If an environment value cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        interval = _env_float(env, f"{ENV_PREFIX}AUTO_CHECK_INTERVAL")
        if interval is not None:
            config_kwargs["auto_check_interval"] = interval

        horizon = _env_float(env, f"{ENV_PREFIX}SUN_HORIZON")
        if horizon is not None:
            config_kwargs["sun_horizon_degrees"] = horizon

        fallback = _env_theme(env, f"{ENV_PREFIX}AUTO_FALLBACK")
        if fallback is not None:
            config_kwargs["auto_fallback"] = fallback

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
