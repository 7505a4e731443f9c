"""Configuration, formatting and logging shared by the API and the report."""

from .config import GoalSettings, Settings, get_settings  # noqa: F401
from .logger import configure_logging, get_logger  # noqa: F401

__all__ = ["GoalSettings", "Settings", "configure_logging", "get_logger", "get_settings"]
