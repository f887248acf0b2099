from dataclasses import dataclass

from .config.loader import load_settings
from .config.settings import Settings
from .infrastructure.logging import setup_logging


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds references to cross-cutting concerns (currently only `Settings`).
    """

    settings: Settings


def create_app(settings: Settings | None = None) -> App:
    """Create an `App` with provided settings, or settings read from ENV_EXTRACT_*.

    Configures logging as a side effect.
    """
    settings = settings or load_settings()
    setup_logging(settings)
    return App(settings=settings)
