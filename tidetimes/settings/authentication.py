from pydantic import BaseModel, Field


class AuthenticationSettings(BaseModel):
    """
    Credentials for the tide provider.

    The API key is always handed in explicitly, either here or through
    `TideClient(api_key=...)`. It is never picked up from the environment.
    """

    api_key: str | None = Field(
        default=None, description="WorldTides API key", repr=False
    )

    @property
    def is_authenticated(self) -> bool:
        """Check if an API key is set."""
        return bool(self.api_key)
