import pytest
from pydantic import ValidationError

from tidetimes.settings import AuthenticationSettings, TideTimesSettings


def test_defaults(monkeypatch):
    monkeypatch.delenv("TIDETIMES_API_URL", raising=False)
    monkeypatch.delenv("TIDETIMES_REQUEST_TIMEOUT", raising=False)

    settings = TideTimesSettings()

    assert settings.api_url == "https://www.worldtides.info/api/v3"
    assert settings.request_timeout == 30.0
    assert not settings.auth.is_authenticated


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TIDETIMES_API_URL", "http://localhost:8080/api/v3")
    monkeypatch.setenv("TIDETIMES_REQUEST_TIMEOUT", "5")

    settings = TideTimesSettings()

    assert settings.api_url == "http://localhost:8080/api/v3"
    assert settings.request_timeout == 5.0


def test_api_key_is_not_read_from_environment(monkeypatch):
    monkeypatch.setenv("TIDETIMES_API_KEY", "from-env")

    assert TideTimesSettings().auth.api_key is None


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        TideTimesSettings(request_timeout=0)


def test_api_key_is_hidden_from_repr():
    auth = AuthenticationSettings(api_key="secret-key")

    assert auth.is_authenticated
    assert "secret-key" not in repr(auth)
    assert "secret-key" not in repr(TideTimesSettings(auth=auth))
