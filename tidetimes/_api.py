import requests  # type: ignore[import-untyped]

from tidetimes.errors.api_errors import NetworkError, ProviderError
from tidetimes.settings.tidetimes_settings import TideTimesSettings


class API:
    def __init__(self, settings: TideTimesSettings):
        self._settings = settings

    def _get_headers(self) -> dict:
        return {"Accept": "application/json"}

    def _validate_response_status(self, response: requests.Response) -> None:
        if response.ok:
            return

        raise ProviderError(response.status_code, details=_error_message(response))

    def get(self, params: dict | None = None) -> requests.Response:
        try:
            response = requests.get(
                self._settings.api_url,
                headers=self._get_headers(),
                params=params,
                timeout=self._settings.request_timeout,
            )
        except requests.RequestException as e:
            raise NetworkError(details=str(e)) from e
        self._validate_response_status(response)
        return response


def _error_message(response: requests.Response) -> str | None:
    # WorldTides reports failures as {"status": ..., "error": "..."}
    try:
        body = response.json()
    except ValueError:
        return response.text or None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.text or None
