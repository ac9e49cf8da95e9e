import logging
import sys


def setup_logger(name: str = "pubnet", level: str = "WARNING") -> logging.Logger:
    """Attach a stdout handler to the ``pubnet`` logger (once) and set its level."""
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    if logger.handlers:
        return logger  # avoid duplicate handlers

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s: %(message)s")
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    return logger
