import math
from datetime import timedelta

from tidetimes.errors.api_errors import DecodeError, NetworkError, ProviderError
from tidetimes.errors.argument_errors import InvalidArgumentError
from tidetimes.logging import get_logger
from tidetimes.settings.authentication import AuthenticationSettings
from tidetimes.settings.tidetimes_settings import TideTimesSettings
from tidetimes.tides._api import TidesAPI
from tidetimes.tides._decoder import decode_tides_response
from tidetimes.tides.series import TideSeries
from tidetimes.types.geo import Coordinate, TimeWindow

logger = get_logger(__name__)


class TideClient:
    """Client for the WorldTides API.

    Each call performs exactly one request. Nothing is cached or retried, and
    the client holds no state besides its settings, so one instance can be
    shared between threads.

    Args:
        settings: Endpoint, timeout and credential configuration.
        api_key: WorldTides API key. Overrides `settings.auth.api_key`.

    Examples:
        >>> client = TideClient(api_key="...")
        >>> series = client.fetch_tide_series(
        ...     Coordinate(latitude=51.5074, longitude=-0.1278),
        ...     TimeWindow.last(timedelta(days=1)),
        ... )
        >>> series.highs
    """

    def __init__(
        self,
        settings: TideTimesSettings | None = None,
        api_key: str | None = None,
    ):
        self.settings = settings if settings is not None else TideTimesSettings()
        if api_key is not None:
            # Copy so a shared settings object keeps its own key
            self.settings = self.settings.model_copy(
                update={"auth": AuthenticationSettings(api_key=api_key)}
            )
        self._api = TidesAPI(self.settings)

    def fetch_tide_series(
        self,
        coordinate: Coordinate,
        window: TimeWindow,
        api_key: str | None = None,
    ) -> TideSeries:
        """Fetch tide heights and extremes for a location and time window.

        Args:
            coordinate: Location to request tides for.
            window: Time range to request. `start` must not be after `end`.
            api_key: Key to use for this call instead of the configured one.

        Returns:
            TideSeries with samples and extremes sorted by timestamp.

        Raises:
            InvalidArgumentError: If the coordinate, window or key is invalid.
                Raised before any request is made.
            NetworkError: If the provider could not be reached.
            ProviderError: If the provider answered with a non-success status.
            DecodeError: If the response body could not be decoded.
        """
        if api_key is None:
            if not self.settings.auth.is_authenticated:
                raise InvalidArgumentError("api_key", "no API key configured")
            api_key = self.settings.auth.api_key
        _validate_arguments(coordinate, window, api_key)

        logger.debug(
            "Fetching tides for (%s, %s) from %s to %s",
            coordinate.latitude,
            coordinate.longitude,
            window.start.isoformat(),
            window.end.isoformat(),
        )
        try:
            response = self._api.get_tides(coordinate, window, api_key)
            series = decode_tides_response(response)
        except (NetworkError, ProviderError, DecodeError) as e:
            logger.warning(
                "Tide request for (%s, %s) failed: %s",
                coordinate.latitude,
                coordinate.longitude,
                e.message,
            )
            raise

        logger.debug("Received %r", series)
        return series

    def fetch_recent_tides(
        self,
        coordinate: Coordinate,
        duration: timedelta = timedelta(days=1),
        api_key: str | None = None,
    ) -> TideSeries:
        """Fetch the tides of the last `duration`, ending now."""
        return self.fetch_tide_series(
            coordinate, TimeWindow.last(duration), api_key=api_key
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        pass


def _validate_arguments(
    coordinate: Coordinate, window: TimeWindow, api_key: str | None
) -> None:
    if not isinstance(coordinate, Coordinate):
        raise InvalidArgumentError(
            "coordinate", f"expected Coordinate, got {type(coordinate).__name__}"
        )
    lat, lon = coordinate.latitude, coordinate.longitude
    if not (math.isfinite(lat) and -90 <= lat <= 90):
        raise InvalidArgumentError("coordinate", f"latitude {lat} out of range")
    if not (math.isfinite(lon) and -180 <= lon <= 180):
        raise InvalidArgumentError("coordinate", f"longitude {lon} out of range")

    if not isinstance(window, TimeWindow):
        raise InvalidArgumentError(
            "window", f"expected TimeWindow, got {type(window).__name__}"
        )
    if not window.is_ordered:
        raise InvalidArgumentError(
            "window",
            f"start {window.start.isoformat()} is after end {window.end.isoformat()}",
        )

    if not api_key:
        raise InvalidArgumentError("api_key", "must not be empty")
