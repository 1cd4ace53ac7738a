"""JSON schema of the `commands` contribution point.

Used by editors and tooling to validate manifests. The field names and the
`where` enum are shared with the runtime validator.
"""

from __future__ import annotations

import copy
from typing import Any

from .types import Location

FILTER_TYPE: dict[str, Any] = {
    "type": "object",
    "anyOf": [{"required": ["language"]}, {"required": ["scheme"]}, {"required": ["pattern"]}],
    "properties": {
        "language": {
            "description": "Language identifier of the resource",
            "type": "string",
        },
        "scheme": {
            "description": "URI scheme of the resource",
            "type": "string",
        },
        "pattern": {
            "description": "Glob pattern matched against the resource path",
            "type": "string",
        },
    },
}

WHERE_TYPE: dict[str, Any] = {
    "description": (
        "Menus and tool bars to which the command is added, "
        "e.g. `editor title actions` or `explorer context menu`"
    ),
    "oneOf": [
        {"type": "string", "enum": Location.values()},
        {"type": "array", "items": {"type": "string", "enum": Location.values()}},
    ],
}

WHEN_TYPE: dict[str, Any] = {
    "description": (
        "Condition that must be met in order to show the command. Can be a language identifier, "
        "a glob-pattern, an uri scheme, or a combination of them."
    ),
    "anyOf": [
        {"type": "string"},
        FILTER_TYPE,
        {"type": "array", "minItems": 1, "items": {"anyOf": [{"type": "string"}, FILTER_TYPE]}},
    ],
}

ICON_TYPE: dict[str, Any] = {
    "description": (
        "(Optional) Icon which is used to represent the command in the UI. "
        "Either a file path or a themable configuration"
    ),
    "oneOf": [
        {"type": "string"},
        {
            "type": "object",
            "required": ["light", "dark"],
            "properties": {
                "light": {
                    "description": "Icon path when a light theme is used",
                    "type": "string",
                },
                "dark": {
                    "description": "Icon path when a dark theme is used",
                    "type": "string",
                },
            },
        },
    ],
}

COMMAND_TYPE: dict[str, Any] = {
    "type": "object",
    "required": ["command", "title"],
    "properties": {
        "command": {
            "description": "Identifier of the command to execute",
            "type": "string",
            "minLength": 1,
        },
        "title": {
            "description": "Title by which the command is represented in the UI",
            "type": "string",
            "minLength": 1,
        },
        "category": {
            "description": "(Optional) Category string by which the command is grouped in the UI",
            "type": "string",
        },
        "where": WHERE_TYPE,
        "when": WHEN_TYPE,
        "icon": ICON_TYPE,
        "context": {
            "description": "Deprecated and ignored: declare `where`, `when` and `icon` on the command itself",
            "deprecated": True,
        },
    },
}

COMMAND_CONTRIBUTION_SCHEMA: dict[str, Any] = {
    "description": "Contributes commands to the command palette.",
    "oneOf": [
        COMMAND_TYPE,
        {"type": "array", "items": COMMAND_TYPE},
    ],
}


def describe_schema() -> dict[str, Any]:
    """Return a private copy of the contribution schema."""
    return copy.deepcopy(COMMAND_CONTRIBUTION_SCHEMA)
