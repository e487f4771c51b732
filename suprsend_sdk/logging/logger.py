import logging
import sys
from typing import TextIO

_LOGGER_NAME = "suprsend_sdk"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(message)s"

logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())


class Log:
    """SDK-wide logging facade.

    Silent until ``configure`` is called; host applications may instead attach
    their own handlers to the ``suprsend_sdk`` logger.
    """

    _logger: logging.Logger = logging.getLogger(_LOGGER_NAME)
    _handler: logging.Handler | None = None

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach one stream handler (stdout by default)."""
        cls._logger.setLevel(log_level.upper())
        if cls._handler is None:
            cls._handler = logging.StreamHandler(stream or sys.stdout)
            cls._handler.setFormatter(logging.Formatter(_FORMAT))
            cls._logger.addHandler(cls._handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)

    @classmethod
    def is_debug_enabled(cls) -> bool:
        return cls._logger.isEnabledFor(logging.DEBUG)
