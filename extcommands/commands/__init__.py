"""Command contributions: model, validation, schema, registry and actions"""

from .actions import Action, CommandAction, ORDER_LAST
from .normalize import normalize_command, resolve_icon_path
from .registry import (
    CommandRegistry,
    RegistryState,
    collect_messages,
    get_command_registry,
    handle_command,
    handle_commands,
    register_commands_extension_point,
    reset_command_registry,
)
from .schema import COMMAND_CONTRIBUTION_SCHEMA, describe_schema
from .types import (
    Command,
    Icon,
    IconPath,
    Location,
    ResourceFilter,
    ThemableIcon,
    WhenCondition,
    WhenExpression,
    is_themable_icon,
)
from .validation import (
    is_valid_command,
    is_valid_icon,
    is_valid_when,
    is_valid_where,
    parse_command,
    validate_command,
)

__all__ = [
    "Action",
    "CommandAction",
    "ORDER_LAST",
    "Command",
    "Icon",
    "IconPath",
    "Location",
    "ResourceFilter",
    "ThemableIcon",
    "WhenCondition",
    "WhenExpression",
    "is_themable_icon",
    "is_valid_command",
    "is_valid_icon",
    "is_valid_when",
    "is_valid_where",
    "parse_command",
    "validate_command",
    "normalize_command",
    "resolve_icon_path",
    "COMMAND_CONTRIBUTION_SCHEMA",
    "describe_schema",
    "CommandRegistry",
    "RegistryState",
    "collect_messages",
    "get_command_registry",
    "reset_command_registry",
    "handle_command",
    "handle_commands",
    "register_commands_extension_point",
]
