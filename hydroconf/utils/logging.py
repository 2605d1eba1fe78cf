import logging


def get_logger(name: str = "") -> logging.Logger:
    """
    Get a logger with the given name.

    hydroconf only emits records; handlers are the application's business.
    """
    return logging.getLogger(name)
