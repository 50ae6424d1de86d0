"""Renderer map styles."""

from __future__ import annotations

import enum

__all__ = ["MapStyle"]

_DARK_STYLES = frozenset({1, 4, 6})
_VEHICLE_STYLES = frozenset({3, 4})
_OUTDOORS_STYLES = frozenset({5, 6})


class MapStyle(enum.IntEnum):
    """Style codes understood by the map renderer.

    Code ``2`` is the renderer's internal merged style and is never
    produced by theme resolution, so it has no member here.
    """

    CLEAR = 0
    DARK = 1
    VEHICLE_CLEAR = 3
    VEHICLE_DARK = 4
    OUTDOORS_CLEAR = 5
    OUTDOORS_DARK = 6

    @property
    def is_dark(self) -> bool:
        return self.value in _DARK_STYLES

    @property
    def is_vehicle(self) -> bool:
        return self.value in _VEHICLE_STYLES

    @property
    def is_outdoors(self) -> bool:
        return self.value in _OUTDOORS_STYLES
