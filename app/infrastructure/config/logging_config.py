"""Process-wide logging setup."""

import logging

from app.infrastructure.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-5s %(name)s %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure the root logger once at startup from ``settings.log_level``."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # SQL echo is controlled by db_echo, keep the engine logger quiet otherwise
    if not settings.db_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
