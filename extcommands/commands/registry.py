"""Command contribution registry.

Commands accepted during the extension loading pass are appended in arrival
order; once the batch has been drained the registry is frozen for the rest of
the process lifetime.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any

from ..config.schema import CommandsSettings
from ..errors import RegistryFrozenError
from ..extensions.registry import ExtensionPoint, ExtensionsRegistry, get_extensions_registry
from ..extensions.types import ExtensionDescription, ExtensionMessageCollector, ExtensionPointUser
from .normalize import normalize_command
from .schema import describe_schema
from .types import Command
from .validation import validate_command

logger = logging.getLogger(__name__)


class RegistryState(str, Enum):
    OPEN = "open"
    FROZEN = "frozen"


class CommandRegistry:
    """Ordered, append-then-frozen list of accepted commands."""

    def __init__(self):
        self._commands: list[Command] = []
        self._state = RegistryState.OPEN

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def frozen(self) -> bool:
        return self._state is RegistryState.FROZEN

    @property
    def commands(self) -> tuple[Command, ...]:
        """Snapshot of the registered commands in registration order."""
        return tuple(self._commands)

    def push(self, command: Command) -> None:
        """Append a command.

        Raises:
            RegistryFrozenError: if the registry has been frozen
        """
        if self.frozen:
            raise RegistryFrozenError(f"Cannot register {command.command!r}: command registry is frozen")
        self._commands.append(command)

    def freeze(self) -> None:
        """Stop accepting commands. Freezing twice is a no-op."""
        if self.frozen:
            return
        self._state = RegistryState.FROZEN
        logger.debug(f"Command registry frozen with {len(self._commands)} commands")

    def get(self, command_id: str) -> Command | None:
        """First registered command with the given id."""
        return next((c for c in self._commands if c.command == command_id), None)

    def __contains__(self, command_id: object) -> bool:
        return any(c.command == command_id for c in self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self._commands)


def _declared_commands(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def handle_command(
    candidate: Any,
    user: ExtensionPointUser,
    registry: CommandRegistry,
    settings: CommandsSettings | None = None,
) -> Command | None:
    """Validate, normalize and register one declared command."""
    command = validate_command(candidate, user.collector, settings)
    if command is None:
        return None
    command = normalize_command(command, user.description.extension_location)
    registry.push(command)
    logger.debug(f"Registered command {command.command!r} from {user.description.id}")
    return command


def handle_commands(
    users: Iterable[ExtensionPointUser],
    registry: CommandRegistry | None = None,
    settings: CommandsSettings | None = None,
) -> tuple[Command, ...]:
    """
    Drain one load cycle of `commands` contributions into the registry.

    Each user's value is a single command or a list of commands. Invalid
    entries are reported to that user's collector and skipped; the registry is
    frozen once the whole batch has been processed.

    Returns:
        The registered commands
    """
    if registry is None:
        registry = get_command_registry()
    settings = settings or CommandsSettings()

    rejected = 0
    for user in users:
        for candidate in _declared_commands(user.value):
            if handle_command(candidate, user, registry, settings) is None:
                rejected += 1

    registry.freeze()
    logger.info(f"Registered {len(registry)} commands ({rejected} rejected)")
    return registry.commands


def register_commands_extension_point(
    extensions_registry: ExtensionsRegistry | None = None,
    registry: CommandRegistry | None = None,
    settings: CommandsSettings | None = None,
) -> ExtensionPoint:
    """Register the `commands` extension point and install its batch handler."""
    extensions_registry = extensions_registry or get_extensions_registry()
    settings = settings or CommandsSettings()
    target = registry if registry is not None else get_command_registry()

    point = extensions_registry.register_extension_point(settings.extension_point, describe_schema())

    def _handler(users: list[ExtensionPointUser]) -> None:
        handle_commands(users, target, settings)

    return point.set_handler(_handler)


def collect_messages(
    users: Iterable[ExtensionPointUser],
) -> list[tuple[ExtensionDescription, ExtensionMessageCollector]]:
    """(description, collector) pairs of the users whose collector holds messages, in batch order.

    Extensions sharing an id each keep their own entry.
    """
    return [(user.description, user.collector) for user in users if user.collector.messages]


# Global registry instance
_global_registry: CommandRegistry | None = None


def get_command_registry() -> CommandRegistry:
    """Get the process-wide command registry."""
    global _global_registry
    if _global_registry is None:
        _global_registry = CommandRegistry()
    return _global_registry


def reset_command_registry() -> None:
    """Drop the process-wide command registry (used when the host reloads)."""
    global _global_registry
    _global_registry = None
