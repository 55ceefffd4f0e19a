import logging
import sys
from typing import TextIO

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

# discord.py loggers that are chatty at INFO
NOISY_LOGGERS = ("discord", "discord.client", "discord.gateway", "discord.http")


def setup_logging(
    level: int = logging.INFO, stream: TextIO | None = None
) -> logging.Logger:
    """Configure the ``booba`` logger tree once and return its root."""
    logger = logging.getLogger("booba")
    if logger.handlers:
        return logger  # already configured
    logger.setLevel(level)
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    if level > logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    return logger
