from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable, Sequence

import pandas as pd
import xarray as xr

from tidetimes.types.geo import as_utc


class ExtremeKind(str, Enum):
    HIGH = "high"
    LOW = "low"

    @property
    def label(self) -> str:
        return "High Tide" if self is ExtremeKind.HIGH else "Low Tide"


@dataclass(frozen=True)
class HeightSample:
    """Water level at a single instant.

    Attributes:
        timestamp: Time of the sample. Naive values are taken as UTC.
        height_meters: Water height in meters.
    """

    timestamp: datetime
    height_meters: float

    def __post_init__(self):
        object.__setattr__(self, "timestamp", as_utc(self.timestamp))


@dataclass(frozen=True)
class ExtremeEvent:
    """A high or low tide.

    Attributes:
        timestamp: Time of the extreme. Naive values are taken as UTC.
        height_meters: Water height in meters.
        kind: Whether this is a high or a low tide.
    """

    timestamp: datetime
    height_meters: float
    kind: ExtremeKind

    def __post_init__(self):
        object.__setattr__(self, "timestamp", as_utc(self.timestamp))


def _is_sorted(items: Sequence[HeightSample | ExtremeEvent]) -> bool:
    return all(a.timestamp <= b.timestamp for a, b in zip(items, items[1:]))


@dataclass(frozen=True)
class TideSeries:
    """Tide heights and extremes for one location, ordered by time.

    Both `samples` and `extremes` are sorted ascending by timestamp. Use
    `TideSeries.from_unordered` to build a series from provider output in
    any order.
    """

    samples: tuple[HeightSample, ...] = field(default_factory=tuple)
    extremes: tuple[ExtremeEvent, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence but always store tuples
        object.__setattr__(self, "samples", tuple(self.samples))
        object.__setattr__(self, "extremes", tuple(self.extremes))
        if not _is_sorted(self.samples):
            raise ValueError("samples must be sorted by timestamp")
        if not _is_sorted(self.extremes):
            raise ValueError("extremes must be sorted by timestamp")

    @classmethod
    def from_unordered(
        cls,
        samples: Iterable[HeightSample],
        extremes: Iterable[ExtremeEvent],
    ) -> "TideSeries":
        return cls(
            samples=tuple(sorted(samples, key=lambda s: s.timestamp)),
            extremes=tuple(sorted(extremes, key=lambda e: e.timestamp)),
        )

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def is_empty(self) -> bool:
        return not self.samples and not self.extremes

    @property
    def highs(self) -> tuple[ExtremeEvent, ...]:
        return tuple(e for e in self.extremes if e.kind is ExtremeKind.HIGH)

    @property
    def lows(self) -> tuple[ExtremeEvent, ...]:
        return tuple(e for e in self.extremes if e.kind is ExtremeKind.LOW)

    def between(self, start: datetime, end: datetime) -> "TideSeries":
        """Restrict the series to the closed interval [start, end].

        Args:
            start: First instant to keep. Naive values are taken as UTC.
            end: Last instant to keep. Naive values are taken as UTC.

        Returns:
            A new TideSeries containing only the samples and extremes inside
            the interval.
        """
        start, end = as_utc(start), as_utc(end)
        return TideSeries(
            samples=tuple(s for s in self.samples if start <= s.timestamp <= end),
            extremes=tuple(e for e in self.extremes if start <= e.timestamp <= end),
        )

    def next_extreme(
        self, after: datetime, kind: ExtremeKind | None = None
    ) -> ExtremeEvent | None:
        after = as_utc(after)
        for extreme in self.extremes:
            if extreme.timestamp <= after:
                continue
            if kind is None or extreme.kind is kind:
                return extreme
        return None

    def height_range(self) -> tuple[float, float] | None:
        if not self.samples:
            return None
        heights = [s.height_meters for s in self.samples]
        return min(heights), max(heights)

    def to_pandas(self) -> pd.DataFrame:
        """Height samples as a DataFrame indexed by `time`."""
        df = pd.DataFrame(
            {
                "time": pd.DatetimeIndex(
                    [s.timestamp for s in self.samples], tz="UTC"
                ),
                "height": [s.height_meters for s in self.samples],
            }
        )
        return df.set_index("time")

    def extremes_to_pandas(self) -> pd.DataFrame:
        """Extremes as a DataFrame indexed by `time` with `height` and `kind`."""
        df = pd.DataFrame(
            {
                "time": pd.DatetimeIndex(
                    [e.timestamp for e in self.extremes], tz="UTC"
                ),
                "height": [e.height_meters for e in self.extremes],
                "kind": [e.kind.value for e in self.extremes],
            }
        )
        return df.set_index("time")

    def to_xarray(self) -> xr.Dataset | None:
        if self.is_empty:
            return None

        # numpy datetime64 has no timezone; all timestamps are UTC
        sample_times = [s.timestamp.replace(tzinfo=None) for s in self.samples]
        extreme_times = [e.timestamp.replace(tzinfo=None) for e in self.extremes]

        return xr.Dataset(
            data_vars={
                "height": (
                    ("time",),
                    [s.height_meters for s in self.samples],
                ),
                "extreme_height": (
                    ("extreme_time",),
                    [e.height_meters for e in self.extremes],
                ),
                "extreme_kind": (
                    ("extreme_time",),
                    [e.kind.value for e in self.extremes],
                ),
            },
            coords={
                "time": pd.DatetimeIndex(sample_times),
                "extreme_time": pd.DatetimeIndex(extreme_times),
            },
            attrs={"units": "m", "timezone": "UTC"},
        )

    def __repr__(self) -> str:
        return (
            f"TideSeries(samples={len(self.samples)}, "
            f"extremes={len(self.extremes)})"
        )
