import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "arbiter"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Routes the package logger through a single Rich handler.

    Safe to call once per CLI command; later calls only adjust the level.

    Args:
        level: Logging level name, e.g. "DEBUG".

    Returns:
        The package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        package_logger.addHandler(handler)
        package_logger.propagate = False
    return package_logger
