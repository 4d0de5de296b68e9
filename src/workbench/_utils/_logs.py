import logging
import sys

from .constants import LOGGER_NAME

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the SDK logger.

    Attaches a single stream handler to the ``workbench`` logger. Calling it
    again only adjusts the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    if not any(getattr(h, "_workbench_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._workbench_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Return a copy of ``headers`` safe to write to logs."""
    return {
        key: ("***" if key.lower() == "authorization" else value)
        for key, value in headers.items()
    }
