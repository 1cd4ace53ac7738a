"""Extension-side types consumed by contribution handlers.

Descriptions, per-extension message collectors, extension point users and the
collaborator protocols used to activate extensions and execute commands.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Literal, Protocol

logger = logging.getLogger(__name__)

MessageLevel = Literal["error", "warning"]


@dataclass(frozen=True)
class ExtensionDescription:
    """Installed extension as seen by the host"""
    id: str
    extension_location: str  # Absolute install root
    name: str | None = None
    version: str | None = None
    publisher: str | None = None


@dataclass
class ExtensionMessage:
    """Message reported against one extension's contribution"""
    level: MessageLevel
    message: str
    extension_id: str
    point: str

    def to_dict(self) -> dict[str, str]:
        return {
            "level": self.level,
            "message": self.message,
            "extension_id": self.extension_id,
            "point": self.point,
        }


class ExtensionMessageCollector:
    """
    Collects human-readable problems for one extension and one extension point.

    Never raises; each message is also logged with the extension id so problems
    stay attributable when several extensions are processed in one batch.
    """

    def __init__(self, extension_id: str, point: str):
        self.extension_id = extension_id
        self.point = point
        self.messages: list[ExtensionMessage] = []

    def report(self, message: str) -> None:
        """Record an error for this extension."""
        self._add("error", message)

    error = report

    def warn(self, message: str) -> None:
        """Record a non-fatal warning for this extension."""
        self._add("warning", message)

    @property
    def errors(self) -> list[str]:
        return [m.message for m in self.messages if m.level == "error"]

    @property
    def warnings(self) -> list[str]:
        return [m.message for m in self.messages if m.level == "warning"]

    def has_errors(self) -> bool:
        return any(m.level == "error" for m in self.messages)

    def _add(self, level: MessageLevel, message: str) -> None:
        self.messages.append(
            ExtensionMessage(level=level, message=message, extension_id=self.extension_id, point=self.point)
        )
        log = logger.warning if level == "error" else logger.info
        log(f"[{self.extension_id}] {self.point}: {message}")


@dataclass
class ExtensionPointUser:
    """One extension's declared value for an extension point"""
    description: ExtensionDescription
    value: Any
    collector: ExtensionMessageCollector = field(default=None)  # type: ignore[assignment]
    point: str = "commands"

    def __post_init__(self):
        if self.collector is None:
            self.collector = ExtensionMessageCollector(self.description.id, self.point)


class ActivationTrigger(Protocol):
    """Ensures an activation event has fired for the extensions listening to it"""

    def activate_by_event(self, event: str) -> Awaitable[None]:
        ...


class CommandDispatcher(Protocol):
    """Executes a command by id"""

    def execute_command(self, command_id: str, *args: Any) -> Awaitable[Any]:
        ...
