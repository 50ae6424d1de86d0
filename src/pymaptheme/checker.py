"""Periodic re-evaluation of time-dependent themes."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable

from pymaptheme.exceptions import ThemeInvariantError
from pymaptheme.switcher import ThemeSwitcher

_logger = logging.getLogger(__name__)


class AutoThemeChecker:
    """Re-runs :meth:`ThemeSwitcher.restart` while Auto / NavAuto is in effect.

    Runs as a task on the current event loop, which must be the loop that
    owns the UI and the renderer.  The checker stops on its own once the
    setting no longer depends on time; call :meth:`start` again after the
    setting or the navigation state changes.

    A failed check is logged and retried on the next tick, except for
    :class:`ThemeInvariantError`, which ends the task and is re-raised by
    :meth:`stop`.

    Parameters
    ----------
    switcher
        The switcher to drive.
    renderer_active
        Returns whether the map is rendered and visible at the moment of
        each check.
    interval
        Seconds between checks.  Defaults to the switcher's
        ``config.auto_check_interval``.
    """

    def __init__(
        self,
        switcher: ThemeSwitcher,
        renderer_active: Callable[[], bool],
        *,
        interval: float | None = None,
    ) -> None:
        self._switcher = switcher
        self._renderer_active = renderer_active
        self._interval = interval if interval is not None else switcher.config.auto_check_interval
        self._task: asyncio.Task[None] | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Apply now and schedule re-checks if the setting is time dependent."""
        self.cancel()
        self._switcher.restart(self._renderer_active())
        if not self._switcher.needs_periodic_check():
            _logger.debug("Theme is not time dependent; no periodic check")
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    def cancel(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def stop(self) -> None:
        task = self._task
        self.cancel()
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                self._switcher.restart(self._renderer_active())
                periodic = self._switcher.needs_periodic_check()
            except ThemeInvariantError:
                raise
            except Exception:
                _logger.warning("Periodic theme check failed", exc_info=True)
                continue
            if not periodic:
                _logger.debug("Theme no longer time dependent; stopping periodic check")
                return
