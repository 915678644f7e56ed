from tidetimes.errors.api_errors import DecodeError, NetworkError, ProviderError
from tidetimes.errors.argument_errors import InvalidArgumentError
from tidetimes.errors.tidetimes_error import TideTimesError

__all__ = [
    "DecodeError",
    "InvalidArgumentError",
    "NetworkError",
    "ProviderError",
    "TideTimesError",
]
