# finnder/core/logger.py
from loguru import logger
import sys

from finnder.core.config import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

_handler_id: int | None = None


def setup_logging(level: str | None = None, sink=sys.stdout) -> int:
    """
    Enable finnder's log messages and send them to `sink` at `level`
    (defaults to FINNDER_LOG_LEVEL).

    Only the sink added by a previous call is replaced; sinks configured by
    the host application are left alone. Returns the loguru handler id.
    """
    global _handler_id

    if _handler_id is not None:
        logger.remove(_handler_id)

    level = (level or settings.FINNDER_LOG_LEVEL).upper()
    _handler_id = logger.add(
        sink,
        format=LOG_FORMAT,
        level=level,
        filter="finnder",
    )
    logger.enable("finnder")
    return _handler_id


# Silent until the host opts in with setup_logging() or logger.enable("finnder").
logger.disable("finnder")

__all__ = ["logger", "setup_logging"]
