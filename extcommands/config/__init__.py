"""Configuration for extcommands"""

from .loader import get_settings_path, invalidate_settings_cache, load_settings
from .schema import CommandsSettings

__all__ = [
    "CommandsSettings",
    "load_settings",
    "invalidate_settings_cache",
    "get_settings_path",
]
