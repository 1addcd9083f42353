import logging

LOGGER_NAME = "resumable"


def configure_logging(level: int) -> logging.Logger:
    """Send the package's log records to stderr at the given level.

    The library itself never installs handlers; applications such as the
    command line call this once at startup.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
    return logger
