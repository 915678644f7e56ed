from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tidetimes.settings.authentication import AuthenticationSettings


class TideTimesSettings(BaseSettings):
    api_url: str = Field(
        default="https://www.worldtides.info/api/v3",
        description="Endpoint of the WorldTides API",
    )

    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait for the provider before giving up",
    )

    auth: AuthenticationSettings = Field(
        default_factory=AuthenticationSettings,
        description="Credentials for the tide provider",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="TIDETIMES_",
    )
