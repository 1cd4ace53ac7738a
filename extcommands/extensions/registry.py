"""Extension point registry.

Extension points are named slots in a manifest's `contributes` section. Each
point carries a JSON schema for tooling and a single batch handler that
receives every extension's declared value once per load cycle.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable
from typing import Any

from ..errors import ExtensionPointError
from .types import ExtensionPointUser

logger = logging.getLogger(__name__)

ExtensionPointHandler = Callable[[list[ExtensionPointUser]], Any]


class ExtensionPoint:
    """A named extension point with its schema and batch handler."""

    def __init__(self, name: str, schema: dict[str, Any]):
        self.name = name
        self.schema = schema
        self._handler: ExtensionPointHandler | None = None
        self._users: list[ExtensionPointUser] | None = None

    @property
    def has_handler(self) -> bool:
        return self._handler is not None

    def set_handler(self, handler: ExtensionPointHandler) -> ExtensionPoint:
        """Install the batch handler.

        Args:
            handler: Callable receiving the full list of users for this point

        Raises:
            ExtensionPointError: if a handler is already installed
        """
        if self._handler is not None:
            raise ExtensionPointError(f"Handler already set for extension point {self.name!r}", self.name)
        self._handler = handler
        if self._users is not None:
            self._run_handler(handler)
        return self

    def accept_users(self, users: Iterable[ExtensionPointUser]) -> None:
        """Deliver one load cycle's users; runs the handler if one is installed."""
        self._users = list(users)
        if self._handler is not None:
            self._run_handler(self._handler)

    def _run_handler(self, handler: ExtensionPointHandler) -> None:
        users = self._users or []
        logger.debug(f"Running handler for extension point {self.name!r} with {len(users)} users")
        handler(users)


class ExtensionsRegistry:
    """Registry of extension points, keyed by point name."""

    def __init__(self):
        self._points: dict[str, ExtensionPoint] = {}

    def register_extension_point(self, name: str, schema: dict[str, Any]) -> ExtensionPoint:
        """Register a new extension point.

        Raises:
            ExtensionPointError: if the name is already registered
        """
        if name in self._points:
            raise ExtensionPointError(f"Duplicate extension point {name!r}", name)
        point = ExtensionPoint(name, schema)
        self._points[name] = point
        logger.debug(f"Registered extension point {name!r}")
        return point

    def get_extension_point(self, name: str) -> ExtensionPoint | None:
        return self._points.get(name)

    def list_extension_points(self) -> list[ExtensionPoint]:
        return list(self._points.values())

    def get_manifest_schema(self) -> dict[str, Any]:
        """JSON schema for the `contributes` section built from every point."""
        return {
            "type": "object",
            "properties": {name: copy.deepcopy(point.schema) for name, point in self._points.items()},
        }


# Global registry instance
_global_registry: ExtensionsRegistry | None = None


def get_extensions_registry() -> ExtensionsRegistry:
    """Get the global extensions registry."""
    global _global_registry
    if _global_registry is None:
        _global_registry = ExtensionsRegistry()
    return _global_registry


def reset_extensions_registry() -> None:
    """Drop the global extensions registry (used when the host reloads)."""
    global _global_registry
    _global_registry = None
