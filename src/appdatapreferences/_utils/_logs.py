import logging
from typing import Mapping

from .constants import HEADER_AUTHORIZATION, LOGGER_NAME

logger: logging.Logger = logging.getLogger(LOGGER_NAME)
_handler: logging.Handler | None = None


def setup_logging(should_debug: bool = False) -> None:
    """Attach a stream handler to the package logger, once."""
    global _handler

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(_handler)

    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy of ``headers`` with the bearer credential masked for log output."""
    redacted = dict(headers)
    if HEADER_AUTHORIZATION in redacted:
        scheme, _, credential = redacted[HEADER_AUTHORIZATION].partition(" ")
        redacted[HEADER_AUTHORIZATION] = f"{scheme} ***" if credential else scheme
    return redacted
