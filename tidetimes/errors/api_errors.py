from tidetimes.errors.tidetimes_error import TideTimesError


class NetworkError(TideTimesError):
    def __init__(self, details: str | None = None):
        super().__init__(
            "Could not reach the tide provider",
            details=details,
        )


class ProviderError(TideTimesError):
    def __init__(self, status: int, details: str | None = None):
        super().__init__(
            f"Tide provider returned status {status}",
            details=details,
        )
        self.status = status


class DecodeError(TideTimesError):
    def __init__(self, details: str | None = None):
        super().__init__(
            "Could not decode the tide provider response",
            details=details,
        )
