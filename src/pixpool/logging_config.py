import logging
import sys


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Installs a single stdout handler on the "pixpool" logger.
    """
    logger = logging.getLogger("pixpool")
    logger.setLevel(level)

    # Prevent duplicate handlers if called multiple times
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Returns the "pixpool" logger or one of its children.
    """
    if name:
        return logging.getLogger(f"pixpool.{name}")
    return logging.getLogger("pixpool")
