"""Result of a single theme resolution."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pymaptheme.models.map_style import MapStyle
from pymaptheme.models.settings import ConcreteThemeSetting


class ThemeResolution(BaseModel):
    """Concrete UI theme and map style derived from one set of inputs.

    ``is_dark`` records the brightness the map style was selected with,
    which differs from ``theme`` when the theme follows the system.
    """

    model_config = ConfigDict(frozen=True)

    theme: ConcreteThemeSetting
    map_style: MapStyle
    is_dark: bool
