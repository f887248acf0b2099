"""Logging infrastructure built on loguru."""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    from loguru import Logger

_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)

_configured = False


def _stderr_sink(message: str) -> None:
    # Resolve sys.stderr per write so redirected streams keep working.
    sys.stderr.write(message)


def configure_logger(
    level: LogLevel | str = LogLevel.INFO,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace all loguru handlers with one configured for the environment.

    Production emits serialized JSON lines; other environments use a
    human-readable format.
    """
    global _configured

    logger.remove()
    logger.configure(extra={"name": "env_extract"})
    if environment is Environment.PRODUCTION:
        logger.add(_stderr_sink, level=str(level), serialize=True)
    else:
        logger.add(
            _stderr_sink,
            level=str(level),
            format=_DEVELOPMENT_FORMAT,
            colorize=False,
        )
    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from Settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "Logger":
    """Return a logger bound to ``name``, configuring defaults on first use."""
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Remove all handlers so the next get_logger call reconfigures."""
    global _configured

    logger.remove()
    _configured = False
