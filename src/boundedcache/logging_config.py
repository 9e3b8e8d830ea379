import logging

import colorlog

from boundedcache.config import config

LOG_FORMAT = '%(log_color)s[%(levelname)s] %(asctime)s - %(name)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_COLORS = {
    'DEBUG': 'blue',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'bold_red',
}

# (Brief) Attaches a colored stream handler to the package logger.
# (Usage) Call once from an application entry point; importing the package never configures logging.
#
# (Params)
#   level (string or int) - Overrides CACHE_LOG_LEVEL when given.
#
def setup_logging(level: str | int | None = None) -> logging.Logger:
    logger = logging.getLogger("boundedcache")
    logger.setLevel(level if level is not None else config.cache.log_level)

    if not any(getattr(h, "_boundedcache", False) for h in logger.handlers):
        handler = colorlog.StreamHandler()
        handler.setFormatter(colorlog.ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT, log_colors=LOG_COLORS))
        handler._boundedcache = True
        logger.addHandler(handler)
    return logger
