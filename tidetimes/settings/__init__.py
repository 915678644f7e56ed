from tidetimes.settings.authentication import AuthenticationSettings
from tidetimes.settings.tidetimes_settings import TideTimesSettings

__all__ = ["AuthenticationSettings", "TideTimesSettings"]
