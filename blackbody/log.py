import logging

LOGGER_NAME = "blackbody"
DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(module)s - %(message)s"


def setup_logging(level="INFO", fmt=DEFAULT_FORMAT):
    """
    Sets up the application logger.

    Configures a dedicated "blackbody" logger (not the root logger) so that
    Streamlit's and Tornado's own logs are left alone. Safe to call on every
    Streamlit rerun: existing handlers are cleared before new ones are added.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # --- Prevent logs from propagating to the root logger ---
    logger.propagate = False

    formatter = logging.Formatter(fmt)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)

    # Clear existing handlers to avoid duplication if this function is called again
    if logger.hasHandlers():
        logger.handlers.clear()
    logger.addHandler(stream_handler)

    logger.debug("Logging initialized at level %s", logging.getLevelName(logger.level))
    return logger
