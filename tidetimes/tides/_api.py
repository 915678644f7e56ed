import requests  # type: ignore[import-untyped]

from tidetimes._api import API
from tidetimes.settings.tidetimes_settings import TideTimesSettings
from tidetimes.types.geo import Coordinate, TimeWindow


class TidesAPI:
    """Builds WorldTides v3 queries and sends them.

    Note:
        This class is intended for internal use only. Use `TideClient`.
    """

    def __init__(self, settings: TideTimesSettings):
        self._api = API(settings)

    @staticmethod
    def build_params(
        coordinate: Coordinate, window: TimeWindow, api_key: str
    ) -> dict[str, str | float | int]:
        # `heights` and `extremes` are valueless flags on the wire
        return {
            "heights": "",
            "extremes": "",
            "lat": coordinate.latitude,
            "lon": coordinate.longitude,
            "start": window.start_epoch,
            "end": window.end_epoch,
            "key": api_key,
        }

    def get_tides(
        self, coordinate: Coordinate, window: TimeWindow, api_key: str
    ) -> requests.Response:
        return self._api.get(params=self.build_params(coordinate, window, api_key))
