from .settings import settings, logger, Settings

__all__ = ["settings", "logger", "Settings"]
