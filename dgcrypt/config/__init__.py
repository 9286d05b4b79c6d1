from .settings      import Settings
from .logging_setup import configure_logging

__all__ = ["Settings", "configure_logging"]
