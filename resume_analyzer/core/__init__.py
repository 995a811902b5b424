from .config import settings, setup_logging, validate_settings

__all__ = ["settings", "setup_logging", "validate_settings"]
