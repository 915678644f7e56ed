from tidetimes.client import TideClient
from tidetimes.settings.tidetimes_settings import TideTimesSettings
from tidetimes.tides.series import ExtremeEvent, ExtremeKind, HeightSample, TideSeries
from tidetimes.types.geo import Coordinate, Location, TimeWindow

__all__ = [
    "Coordinate",
    "ExtremeEvent",
    "ExtremeKind",
    "HeightSample",
    "Location",
    "TideClient",
    "TideSeries",
    "TideTimesSettings",
    "TimeWindow",
]
