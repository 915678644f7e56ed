import logging

PACKAGE_LOGGER_NAME = "tidetimes"

LOG_FORMAT = "%(asctime)s [%(levelname)-8s] [%(name)s] - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


class _TideTimesHandler(logging.StreamHandler):
    pass


def _configure_package_logger() -> logging.Logger:
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not any(isinstance(h, _TideTimesHandler) for h in package_logger.handlers):
        handler = _TideTimesHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(handler)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger that writes through the shared `tidetimes` handler.

    The stream handler lives on the `tidetimes` package logger only, so
    module loggers (`tidetimes.client`, ...) reach it by propagation and each
    record is written once.

    Args:
        name: The name for the logger, typically __name__ of the calling module.

    Returns:
        The Logger for `name`.
    """
    _configure_package_logger()
    return logging.getLogger(name)
