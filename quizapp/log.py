import logging

from quizapp.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler = None


def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger that writes to stderr at the configured LOG_LEVEL.

    Parameters:
        name (str): Usually the calling module's __name__.

    Returns:
        logging.Logger: The configured logger.
    """
    global _handler
    package_logger = logging.getLogger("quizapp")
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(_handler)
        package_logger.setLevel(settings.LOG_LEVEL.upper())
        package_logger.propagate = False
    return logging.getLogger(name)
