import logging
import sys

from lotto_partners.models.config import LoggingConfig


ROOT_LOGGER = "lotto-partners"

# Third-party loggers that log every outbound request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Attach a stdout handler to the application logger."""
    config = config or LoggingConfig()
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(config.format, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get ``lotto-partners`` or one of its children."""
    if name:
        return logging.getLogger(f"{ROOT_LOGGER}.{name}")
    return logging.getLogger(ROOT_LOGGER)
