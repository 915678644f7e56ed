from datetime import datetime, timedelta, timezone

from pydantic import Field
from pydantic.dataclasses import dataclass


def as_utc(value: datetime) -> datetime:
    """Return `value` as an aware UTC datetime. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class Coordinate:
    """Geographic coordinate representing a point on Earth's surface.

    Attributes:
        latitude: Latitude in decimal degrees (range: -90 to 90).
        longitude: Longitude in decimal degrees (range: -180 to 180).
    """

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


@dataclass(frozen=True)
class Location:
    """A named place, as returned by a location search."""

    name: str
    coordinate: Coordinate


@dataclass(frozen=True)
class TimeWindow:
    """Closed interval of time to request tide data for.

    Naive datetimes are interpreted as UTC. The window is not required to be
    ordered at construction; `TideClient` rejects windows with `start > end`
    before contacting the provider.

    Attributes:
        start: First instant of the window.
        end: Last instant of the window.
    """

    start: datetime
    end: datetime

    @classmethod
    def last(cls, duration: timedelta, now: datetime | None = None) -> "TimeWindow":
        """Window of length `duration` that ends at `now` (defaults to UTC now)."""
        end = as_utc(now) if now is not None else datetime.now(timezone.utc)
        return cls(start=end - duration, end=end)

    @property
    def is_ordered(self) -> bool:
        return as_utc(self.start) <= as_utc(self.end)

    @property
    def start_epoch(self) -> int:
        return int(as_utc(self.start).timestamp())

    @property
    def end_epoch(self) -> int:
        return int(as_utc(self.end).timestamp())
