"""Last known geographic position."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from pymaptheme.models._base import UtcTimestamp


class LastKnownPosition(BaseModel):
    """Most recent location fix, as kept by the configuration store.

    Parameters
    ----------
    latitude : float
        Latitude in degrees, ``-90`` to ``90``.
    longitude : float
        Longitude in degrees, ``-180`` to ``180``.
    timestamp : datetime or None
        When the fix was taken (UTC).  Epoch seconds or milliseconds are
        accepted on input.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    latitude: float = Field(validation_alias=AliasChoices("latitude", "lat"))
    longitude: float = Field(validation_alias=AliasChoices("longitude", "lon", "lng"))
    timestamp: UtcTimestamp = Field(default=None, validation_alias=AliasChoices("timestamp", "time", "ts"))

    @model_validator(mode="before")
    @classmethod
    def _from_tuple(cls, values: Any) -> Any:
        # (lat, lon) or (lat, lon, timestamp)
        if isinstance(values, (tuple, list)) and len(values) in (2, 3):
            keys = ("latitude", "longitude", "timestamp")
            return dict(zip(keys, values, strict=False))
        return values

    @field_validator("latitude")
    @classmethod
    def _check_latitude(cls, value: float) -> float:
        if not -90.0 <= value <= 90.0:
            raise ValueError(f"latitude must be between -90 and 90, got {value}")
        return value

    @field_validator("longitude")
    @classmethod
    def _check_longitude(cls, value: float) -> float:
        if not -180.0 <= value <= 180.0:
            raise ValueError(f"longitude must be between -180 and 180, got {value}")
        return value
