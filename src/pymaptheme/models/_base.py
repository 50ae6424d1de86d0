"""Shared enum base and timestamp coercion for pymaptheme models.

Settings enums inherit from :class:`SettingEnum`, a ``StrEnum`` whose
values are the strings kept in configuration storage.  Unlike lenient
API enums there is no ``UNKNOWN`` member: an unrecognised stored value
is rejected by :meth:`SettingEnum.parse` so that nothing downstream ever
sees an out-of-domain setting.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Annotated, Any, Self

from pydantic import BeforeValidator

from pymaptheme._constants import MS_TIMESTAMP_THRESHOLD
from pymaptheme.exceptions import ThemeSettingError


class SettingEnum(StrEnum):
    """Base for enums persisted as plain strings."""

    @classmethod
    def parse(cls, value: Any) -> Self:
        """Return the member for *value*.

        Accepts a member of this enum or its stored string (case-insensitive,
        surrounding whitespace ignored).  Raises :class:`ThemeSettingError`
        for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        raise ThemeSettingError(f"invalid {cls.__name__} value: {value!r}", value=value)


def parse_timestamp(value: Any) -> datetime | None:
    """Convert an epoch timestamp (seconds **or** milliseconds) to a UTC datetime.

    Naive datetimes are assumed to be UTC.
    """
    if value is None:
        return value
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
    ts = float(value)
    if ts >= MS_TIMESTAMP_THRESHOLD:
        ts = ts / 1000
    return datetime.fromtimestamp(ts, tz=UTC)


UtcTimestamp = Annotated[datetime | None, BeforeValidator(parse_timestamp)]
"""Annotated type that coerces epoch numbers (seconds or ms) to UTC datetimes."""
