import logging
from logging.handlers import RotatingFileHandler

FULL_FORMAT = "%(asctime)s %(levelname)-8s %(name)s %(message)s"
MINIMAL_FORMAT = "%(levelname)-8s %(message)s"


def configure_logging(level=logging.WARNING, file=None):
    """ Set up the handlers of the ``rpncalc`` logger.

    Messages are written to the console and, if ``file`` is given,
    to a rotating log file. Handlers installed by a previous call
    are replaced.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger("rpncalc")
    logger.propagate = False
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt=MINIMAL_FORMAT))
    logger.addHandler(console_handler)

    if file is not None:
        file_handler = RotatingFileHandler(
            file, maxBytes=1 << 20, backupCount=3
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            fmt=FULL_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)
    return logger
