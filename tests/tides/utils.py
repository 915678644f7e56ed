"""Utility functions for tide tests."""

import json
from datetime import datetime, timezone

import requests

# 2025-04-12T00:00:00Z
BASE_EPOCH = 1744416000


def create_mock_response(
    body: dict | str | bytes,
    status_code: int = 200,
) -> requests.Response:
    """Create a real requests.Response carrying the given body.

    Args:
        body: JSON-serialisable dict, or the raw body as text/bytes.
        status_code: HTTP status code of the response.

    Returns:
        Response object whose json(), text and ok behave like a live response.
    """
    if isinstance(body, dict):
        content = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        content = body.encode("utf-8")
    else:
        content = body

    response = requests.Response()
    response.status_code = status_code
    response._content = content
    response.encoding = "utf-8"
    response.headers["content-type"] = "application/json"
    response.url = "https://www.worldtides.info/api/v3"
    return response


def create_tides_body(
    heights: list[tuple[int, float]] | None = None,
    extremes: list[tuple[int, float, str]] | None = None,
    status: int = 200,
) -> dict:
    """Build a WorldTides v3 body from (dt, height[, type]) tuples."""
    return {
        "status": status,
        "callCount": 1,
        "copyright": "Tidal data retrieved from www.worldtides.info.",
        "heights": [{"dt": dt, "height": h} for dt, h in heights or []],
        "extremes": [
            {"dt": dt, "height": h, "type": t} for dt, h, t in extremes or []
        ],
    }


def epoch(offset_seconds: int) -> int:
    return BASE_EPOCH + offset_seconds


def utc(offset_seconds: int) -> datetime:
    return datetime.fromtimestamp(epoch(offset_seconds), tz=timezone.utc)
