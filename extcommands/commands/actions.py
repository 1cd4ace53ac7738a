"""Actions backed by command contributions.

A CommandAction lets a UI affordance run a contributed command: the owning
extension is activated through `onCommand:<id>` first, then the command is
executed by id.
"""
from __future__ import annotations

import logging
import sys
from collections.abc import Awaitable, Callable
from typing import Any

from ..errors import ActivationError, DispatchError
from ..extensions.types import ActivationTrigger, CommandDispatcher
from .types import Command

logger = logging.getLogger(__name__)

ActionCallback = Callable[..., Awaitable[Any]]

# Sorts after every other action
ORDER_LAST = sys.maxsize


class Action:
    """Minimal runnable action: identity, label, ordering hint and a callback."""

    def __init__(
        self,
        id: str,
        label: str = "",
        enabled: bool = True,
        order: int = 0,
        callback: ActionCallback | None = None,
    ):
        self.id = id
        self.label = label
        self.enabled = enabled
        self.order = order
        self._callback = callback

    async def run(self, *args: Any) -> Any:
        if self._callback is None:
            return None
        return await self._callback(*args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, label={self.label!r})"


class CommandAction(Action):
    """Action that activates the contributing extension and then runs its command."""

    def __init__(
        self,
        command: Command,
        activation: ActivationTrigger,
        dispatcher: CommandDispatcher,
    ):
        super().__init__(command.command, command.title, order=ORDER_LAST)
        self.command = command
        self._activation = activation
        self._dispatcher = dispatcher
        self._callback = self._activate_and_execute

    async def _activate_and_execute(self, *args: Any) -> Any:
        command_id = self.command.command
        event = self.command.activation_event

        try:
            await self._activation.activate_by_event(event)
        except Exception as e:
            logger.warning(f"Activation {event!r} failed for command {command_id!r}: {e}")
            raise ActivationError(command_id, event, f"Activation event {event!r} failed: {e}") from e

        try:
            return await self._dispatcher.execute_command(command_id, *args)
        except Exception as e:
            logger.warning(f"Command {command_id!r} failed: {e}")
            raise DispatchError(command_id, f"Command {command_id!r} failed: {e}") from e
