"""Logging setup for the freenas logger."""

from rich.logging import RichHandler

from freenas.config import config

logger = config.logger
logger.addHandler(
    RichHandler(
        show_path=config.debug,
        markup=True,
        rich_tracebacks=True,
    )
)


def log_error(error: Exception) -> None:
    """Log an error, with its traceback when debugging."""
    logger.error(error, exc_info=error if config.debug else None)
