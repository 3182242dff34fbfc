import logging
import sys
from typing import ClassVar, TextIO

LIBRARY_NAME = "weatherscreen"

logger = logging.getLogger(LIBRARY_NAME)
logger.addHandler(logging.NullHandler())


def configure_logging(level: str = "WARNING", stream: TextIO | None = None) -> None:
    """Send library diagnostics to `stream` (stderr by default). Never user-facing."""
    log_level = logging.getLevelName(level.strip().upper())
    unknown_level = not isinstance(log_level, int)
    if unknown_level:
        log_level = logging.WARNING

    lib_logger = logging.getLogger(LIBRARY_NAME)
    lib_logger.handlers.clear()
    lib_logger.setLevel(log_level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    lib_logger.addHandler(handler)

    if unknown_level:
        lib_logger.warning("Unknown log level %r, using WARNING", level)


class LoggingMixin:
    logger: ClassVar[logging.Logger]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.logger = logging.getLogger(f"{LIBRARY_NAME}.{cls.__name__}")
