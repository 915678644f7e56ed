from datetime import datetime, timezone

import requests  # type: ignore[import-untyped]
from pydantic import ValidationError

from tidetimes.errors.api_errors import DecodeError, ProviderError
from tidetimes.tides._types.api_response_types import (
    TidesErrorResponse,
    TidesResponse,
)
from tidetimes.tides.series import ExtremeEvent, ExtremeKind, HeightSample, TideSeries

PROVIDER_SUCCESS_STATUS = 200


def epoch_to_datetime(dt: int) -> datetime:
    return datetime.fromtimestamp(dt, tz=timezone.utc)


def _raise_for_provider_status(body: object) -> None:
    # Error bodies usually omit heights/extremes, so check status on its own
    if not isinstance(body, dict):
        return
    try:
        status = TidesErrorResponse.model_validate(body)
    except ValidationError:
        return
    if status.status is not None and status.status != PROVIDER_SUCCESS_STATUS:
        details = str(status.error) if status.error is not None else None
        raise ProviderError(status.status, details=details)


def decode_tides_response(response: requests.Response) -> TideSeries:
    """Decode a WorldTides response into a sorted TideSeries.

    Args:
        response: Response whose HTTP status has already been checked.

    Returns:
        TideSeries with samples and extremes sorted by timestamp.

    Raises:
        DecodeError: If the body is not JSON or does not have the expected
            shape, including an extreme type other than high or low.
        ProviderError: If the body reports a status other than 200.
    """
    try:
        body = response.json()
    except ValueError as e:
        raise DecodeError(details=f"Body is not valid JSON: {e}") from e

    _raise_for_provider_status(body)

    try:
        payload = TidesResponse.model_validate(body)
    except ValidationError as e:
        raise DecodeError(details=str(e)) from e

    if payload.status != PROVIDER_SUCCESS_STATUS:
        raise ProviderError(payload.status)

    try:
        samples = [
            HeightSample(timestamp=epoch_to_datetime(h.dt), height_meters=h.height)
            for h in payload.heights
        ]
        extremes = [
            ExtremeEvent(
                timestamp=epoch_to_datetime(x.dt),
                height_meters=x.height,
                kind=ExtremeKind(x.type),
            )
            for x in payload.extremes
        ]
    except (OverflowError, OSError, ValueError) as e:
        # Epoch outside the range datetime can represent
        raise DecodeError(details=f"Invalid timestamp: {e}") from e

    return TideSeries.from_unordered(samples=samples, extremes=extremes)
