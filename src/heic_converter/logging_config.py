"""Process-wide logging setup for the converter trigger."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"

# Google client transport logs every request at DEBUG/INFO
_CLIENT_LOGGERS = ("urllib3", "google.auth", "google.api_core", "google.cloud")


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Configure the root logger once per process.

    level accepts a logging constant or a name such as "debug" (LOG_LEVEL).
    Google client libraries are held at WARNING unless level is DEBUG.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    client_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(client_level)
