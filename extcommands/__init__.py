"""extcommands - command contributions declared by extensions.

Validates, normalizes and registers the `commands` contributions of extension
manifests, and binds registered commands to lazily activated actions.
"""

from __future__ import annotations

from .commands import (
    Action,
    Command,
    CommandAction,
    CommandRegistry,
    IconPath,
    Location,
    ResourceFilter,
    ThemableIcon,
    WhenExpression,
    describe_schema,
    get_command_registry,
    handle_commands,
    is_themable_icon,
    is_valid_command,
    normalize_command,
    register_commands_extension_point,
)
from .config import CommandsSettings, load_settings
from .errors import (
    ActivationError,
    CommandActionError,
    ContributionError,
    DispatchError,
    RegistryFrozenError,
)
from .extensions import (
    ExtensionDescription,
    ExtensionMessageCollector,
    ExtensionPointUser,
    ExtensionsRegistry,
    load_extension_users,
)

__version__ = "0.1.0"

__all__ = [
    "Action",
    "Command",
    "CommandAction",
    "CommandRegistry",
    "IconPath",
    "Location",
    "ResourceFilter",
    "ThemableIcon",
    "WhenExpression",
    "describe_schema",
    "get_command_registry",
    "handle_commands",
    "is_themable_icon",
    "is_valid_command",
    "normalize_command",
    "register_commands_extension_point",
    "CommandsSettings",
    "load_settings",
    "ActivationError",
    "CommandActionError",
    "ContributionError",
    "DispatchError",
    "RegistryFrozenError",
    "ExtensionDescription",
    "ExtensionMessageCollector",
    "ExtensionPointUser",
    "ExtensionsRegistry",
    "load_extension_users",
]
