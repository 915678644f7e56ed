from tidetimes.errors.tidetimes_error import TideTimesError


class InvalidArgumentError(TideTimesError):
    def __init__(self, argument: str, reason: str):
        super().__init__(f"Invalid {argument}: {reason}")
        self.argument = argument
