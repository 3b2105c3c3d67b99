"""Logging configuration helpers."""

import logging

# HTTP client libraries log every request at INFO, including each OpenAI call.
CLIENT_LOGGERS = ("httpx", "httpcore", "openai")


def configure_logging(level: str = "INFO") -> None:
    """Configure the ``leftover_chef`` logger and quiet the HTTP client loggers."""
    logger = logging.getLogger("leftover_chef")
    logger.setLevel(level.upper())
    for name in CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
