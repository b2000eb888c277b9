"""Logging configuration helpers."""

import logging

PACKAGE_LOGGER = "nutrient_calculator"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Set the package log level and attach one stream handler.

    Repeated calls only update the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
