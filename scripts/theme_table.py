#!/usr/bin/env python3
"""Print how theme settings resolve to a UI theme and a map style.

Usage
-----
    python scripts/theme_table.py
    python scripts/theme_table.py --theme nav-auto --nav vehicle
    python scripts/theme_table.py --theme auto --lat 52.37 --lon 4.90 --time 2026-12-21T00:00:00+00:00
"""

from __future__ import annotations

import argparse
import itertools
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pymaptheme import (  # noqa: E402
    ConcreteThemeSetting,
    LastKnownPosition,
    NavigationMode,
    RawThemeSetting,
    SolarDayNightPolicy,
    SystemBrightnessState,
    ThemeConfig,
    ThemeError,
    ThemeResolver,
)


class _CliStore:
    def __init__(self, position: LastKnownPosition | None, previous: ConcreteThemeSetting | None) -> None:
        self._position = position
        self._previous = previous

    def get_theme_setting(self) -> RawThemeSetting:
        return RawThemeSetting.AUTO

    def get_last_known_position(self) -> LastKnownPosition | None:
        return self._position

    def get_current_ui_theme(self) -> ConcreteThemeSetting | None:
        return self._previous


def _parse_time(value: str | None) -> datetime:
    if value is None:
        return datetime.now(UTC)
    parsed = datetime.fromisoformat(value)
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


def _print_rows(rows: list[tuple[str, ...]]) -> None:
    header = ("theme", "nav", "system", "outdoors", "ui theme", "map style")
    widths = [max(len(r[i]) for r in [header, *rows]) for i in range(len(header))]
    line = "  ".join(f"{h:<{w}}" for h, w in zip(header, widths, strict=True))
    print(line)
    print("─" * len(line))
    for row in rows:
        print("  ".join(f"{c:<{w}}" for c, w in zip(row, widths, strict=True)))


def main() -> None:
    parser = argparse.ArgumentParser(description="Resolve theme settings to UI theme and map style.")
    parser.add_argument("--theme", help="Stored theme setting (default, night, follow-system, auto, nav-auto)")
    parser.add_argument("--nav", help="Navigation mode (none, pedestrian, vehicle, other)")
    parser.add_argument("--system", help="OS brightness (day, night)")
    parser.add_argument("--outdoors", action="store_true", help="Outdoors layer enabled")
    parser.add_argument("--lat", type=float, help="Last known latitude for Auto themes")
    parser.add_argument("--lon", type=float, help="Last known longitude for Auto themes")
    parser.add_argument("--time", help="ISO time for Auto themes (default: now, UTC)")
    parser.add_argument("--previous", help="Previously applied theme used when no position is known")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    try:
        config = ThemeConfig.from_env()
        position = None
        if args.lat is not None and args.lon is not None:
            position = LastKnownPosition(latitude=args.lat, longitude=args.lon)
        previous = ConcreteThemeSetting.parse(args.previous) if args.previous else None
        when = _parse_time(args.time)
        policy = SolarDayNightPolicy(_CliStore(position, previous), config=config, clock=lambda: when)
        resolver = ThemeResolver(policy)

        themes = [RawThemeSetting.parse(args.theme)] if args.theme else list(RawThemeSetting)
        navs = [NavigationMode.parse(args.nav)] if args.nav else list(NavigationMode)
        systems = [SystemBrightnessState.parse(args.system)] if args.system else list(SystemBrightnessState)
        outdoors_values = [True] if args.outdoors else [False, True]
    except (ThemeError, ValueError) as exc:
        parser.error(str(exc))

    rows: list[tuple[str, ...]] = []
    for raw, nav, system, outdoors in itertools.product(themes, navs, systems, outdoors_values):
        resolution = resolver.resolve(raw, nav, system, outdoors)
        rows.append(
            (
                raw.value,
                nav.value,
                system.value,
                str(outdoors).lower(),
                resolution.theme.value,
                resolution.map_style.name,
            )
        )

    _print_rows(rows)


if __name__ == "__main__":
    main()
