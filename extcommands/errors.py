from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    REGISTRY_FROZEN = "REGISTRY_FROZEN"
    EXTENSION_POINT = "EXTENSION_POINT"
    INVALID_MANIFEST = "INVALID_MANIFEST"
    ACTIVATION_FAILED = "ACTIVATION_FAILED"
    DISPATCH_FAILED = "DISPATCH_FAILED"


class ContributionError(Exception):
    def __init__(self, message: str, error_code: ErrorCode, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.error_code.value,
            "message": str(self),
            "details": self.details,
        }


class RegistryFrozenError(ContributionError):
    def __init__(self, message: str | None = None):
        msg = message or "Command registry is frozen"
        super().__init__(msg, ErrorCode.REGISTRY_FROZEN)


class ExtensionPointError(ContributionError):
    def __init__(self, message: str, point: str):
        super().__init__(message, ErrorCode.EXTENSION_POINT, {"point": point})
        self.point = point


class ManifestError(ContributionError):
    def __init__(self, message: str, path: str):
        super().__init__(message, ErrorCode.INVALID_MANIFEST, {"path": path})
        self.path = path


class CommandActionError(ContributionError):
    """Failure of a command action invocation; `stage` tells which step failed."""

    stage = "unknown"

    def __init__(self, command_id: str, message: str, error_code: ErrorCode):
        super().__init__(message, error_code, {"command": command_id, "stage": self.stage})
        self.command_id = command_id


class ActivationError(CommandActionError):
    stage = "activation"

    def __init__(self, command_id: str, event: str, message: str | None = None):
        msg = message or f"Activation event {event!r} failed"
        super().__init__(command_id, msg, ErrorCode.ACTIVATION_FAILED)
        self.event = event
        self.details["event"] = event


class DispatchError(CommandActionError):
    stage = "dispatch"

    def __init__(self, command_id: str, message: str | None = None):
        msg = message or f"Command {command_id!r} failed"
        super().__init__(command_id, msg, ErrorCode.DISPATCH_FAILED)


__all__ = [
    "ErrorCode",
    "ContributionError",
    "RegistryFrozenError",
    "ExtensionPointError",
    "ManifestError",
    "CommandActionError",
    "ActivationError",
    "DispatchError",
]
