"""Apply a resolved theme to the UI and the map renderer."""

from __future__ import annotations

import dataclasses
import logging
from enum import StrEnum

from pymaptheme.collaborators import DisplayModeGuard, MapRenderer, UIThemeController
from pymaptheme.models.map_style import MapStyle
from pymaptheme.models.settings import ConcreteThemeSetting

_logger = logging.getLogger(__name__)


class ApplyOutcome(StrEnum):
    """What happened to the map style."""

    IMMEDIATE = "immediate"
    DEFERRED = "deferred"
    UNCHANGED = "unchanged"
    SKIPPED_ALTERNATE_DISPLAY = "skipped_alternate_display"


@dataclasses.dataclass(frozen=True)
class ApplyContext:
    """Collaborators and renderer state for one apply call.

    ``renderer_active`` must be ``True`` only if the map is rendered and
    visible at this moment.  Getting it wrong either blocks the caller in
    the synchronous style call or leaves a stale style until the next
    activation.
    """

    ui: UIThemeController
    renderer: MapRenderer
    display: DisplayModeGuard
    renderer_active: bool


def apply_theme(theme: ConcreteThemeSetting, style: MapStyle, context: ApplyContext) -> ApplyOutcome:
    """Set the UI theme, then set or mark the map style.

    Must be called on the thread that owns the UI and the renderer.
    Collaborator errors propagate to the caller.
    """
    context.ui.set_mode(theme)
    return apply_map_style(style, context)


def apply_map_style(style: MapStyle, context: ApplyContext) -> ApplyOutcome:
    # The car display switches its own themes.
    if context.display.is_alternate_display_in_use():
        _logger.debug("Alternate display in use; leaving map style to it")
        return ApplyOutcome.SKIPPED_ALTERNATE_DISPLAY

    # An inactive renderer recreates all graphics on activation, so marking is enough.
    # get_current_style() does not reflect pending marks.
    if not context.renderer_active:
        _logger.debug("Renderer inactive; marking map style %s", style.name)
        context.renderer.mark_style_pending(style)
        return ApplyOutcome.DEFERRED

    if context.renderer.get_current_style() == style:
        _logger.debug("Map style already %s", style.name)
        return ApplyOutcome.UNCHANGED

    _logger.debug("Setting map style %s", style.name)
    context.renderer.set_style_immediate(style)
    return ApplyOutcome.IMMEDIATE
