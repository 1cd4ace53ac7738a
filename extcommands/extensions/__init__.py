"""Extension descriptions, extension points and manifest loading"""

from .manifest import describe_extension, load_extension_users, read_extension_manifest
from .registry import (
    ExtensionPoint,
    ExtensionsRegistry,
    get_extensions_registry,
    reset_extensions_registry,
)
from .types import (
    ActivationTrigger,
    CommandDispatcher,
    ExtensionDescription,
    ExtensionMessage,
    ExtensionMessageCollector,
    ExtensionPointUser,
)

__all__ = [
    "ActivationTrigger",
    "CommandDispatcher",
    "ExtensionDescription",
    "ExtensionMessage",
    "ExtensionMessageCollector",
    "ExtensionPointUser",
    "ExtensionPoint",
    "ExtensionsRegistry",
    "get_extensions_registry",
    "reset_extensions_registry",
    "describe_extension",
    "load_extension_users",
    "read_extension_manifest",
]
