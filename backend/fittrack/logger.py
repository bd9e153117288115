import logging

from fittrack.settings import get_settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

def get_logger(name: str = "fittrack") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(get_settings().LOG_LEVEL.upper())

    # If no handlers are attached, add a console handler
    if not logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(console)

    return logger
