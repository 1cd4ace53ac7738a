"""Validation of raw command contributions.

Every check reports at most one message to the extension's collector and the
first failing check rejects the candidate. The predicates never raise and never
mutate the candidate; `parse_command` turns an accepted mapping into a Command.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..config.schema import CommandsSettings
from ..extensions.types import ExtensionMessageCollector
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

logger = logging.getLogger(__name__)

MSG_NON_EMPTY = "expected non-empty value."
MSG_REQUIRE_STRING = "property `{0}` is mandatory and must be of type `string`"
MSG_EMPTY_STRING = "property `{0}` must not be empty"
MSG_OPTIONAL_STRING = "property `{0}` can be omitted or must be of type `string`"
MSG_ICON = "property `icon` can be omitted or must be either a string or a literal like `{dark, light}`"
MSG_WHERE = "property `where` can be omitted or must be a valid enum value"
MSG_WHEN_REQUIRED = "property `when` is mandatory and must be a string or like `{language, scheme, pattern}`"
MSG_WHEN = (
    "property `when` can be omitted or must be a string, a literal like `{language, scheme, pattern}` "
    "or a non-empty array of them"
)
MSG_CONTEXT = "property `context` is ignored, declare `where`, `when` and `icon` on the command itself"

FILTER_KEYS = ("language", "scheme", "pattern")

_SEQUENCE_TYPES = (list, tuple)


def is_valid_icon(icon: Any, collector: ExtensionMessageCollector) -> bool:
    if icon is None:
        return True
    if isinstance(icon, str):
        return True
    if is_themable_icon(icon):
        return True
    collector.report(MSG_ICON)
    return False


def is_valid_where(where: Any, collector: ExtensionMessageCollector) -> bool:
    if isinstance(where, _SEQUENCE_TYPES):
        return all(is_valid_where(location, collector) for location in where)
    if isinstance(where, str) and where in Location.values():
        return True
    collector.report(MSG_WHERE)
    return False


def _is_filter(value: Any) -> bool:
    """A mapping setting at least one of language, scheme, pattern (all strings)."""
    if not isinstance(value, Mapping):
        return False
    if not any(value.get(key) is not None for key in FILTER_KEYS):
        return False
    return all(value.get(key) is None or isinstance(value.get(key), str) for key in FILTER_KEYS)


def is_valid_when(when: Any, collector: ExtensionMessageCollector, required: bool = False) -> bool:
    """Validate a when-clause: a string, a filter, or a non-empty array of either.

    Args:
        when: Declared value (None when the field is absent)
        collector: Collector of the owning extension
        required: Report a missing clause as an error
    """
    if when is None:
        if required:
            collector.report(MSG_WHEN_REQUIRED)
            return False
        return True
    if isinstance(when, _SEQUENCE_TYPES):
        if when and all(isinstance(w, str) or _is_filter(w) for w in when):
            return True
    elif isinstance(when, str) or _is_filter(when):
        return True
    collector.report(MSG_WHEN)
    return False


def is_valid_command(
    candidate: Any,
    collector: ExtensionMessageCollector,
    settings: CommandsSettings | None = None,
) -> bool:
    """
    Check one raw command contribution.

    Args:
        candidate: Declared value, normally a mapping parsed from the manifest
        collector: Collector of the owning extension
        settings: Pipeline settings (defaults when omitted)

    Returns:
        True if the candidate can be registered
    """
    settings = settings or CommandsSettings()

    if candidate is None:
        collector.report(MSG_NON_EMPTY)
        return False
    fields: Mapping[str, Any] = candidate if isinstance(candidate, Mapping) else {}

    for name in ("command", "title"):
        if not isinstance(fields.get(name), str):
            collector.report(MSG_REQUIRE_STRING.format(name))
            return False
    if not settings.allow_empty_strings:
        for name in ("command", "title"):
            if not fields[name].strip():
                collector.report(MSG_EMPTY_STRING.format(name))
                return False

    category = fields.get("category")
    if category is not None and not isinstance(category, str):
        collector.report(MSG_OPTIONAL_STRING.format("category"))
        return False

    if not is_valid_icon(fields.get("icon"), collector):
        return False

    where = fields.get("where")
    if where is not None and not is_valid_where(where, collector):
        return False

    if not is_valid_when(fields.get("when"), collector, required=settings.require_when):
        return False

    if "context" in fields:
        collector.warn(MSG_CONTEXT)

    return True


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, _SEQUENCE_TYPES):
        return list(value)
    return [value]


def _flatten_where(where: Any) -> list[Location]:
    locations: list[Location] = []
    for item in _as_list(where):
        if isinstance(item, _SEQUENCE_TYPES):
            locations.extend(_flatten_where(item))
        else:
            locations.append(Location(item))
    return locations


def _parse_when(when: Any) -> tuple[WhenCondition, ...]:
    conditions: list[WhenCondition] = []
    for item in _as_list(when):
        if isinstance(item, str):
            conditions.append(WhenExpression(item))
        else:
            conditions.append(ResourceFilter.from_dict(item))
    return tuple(conditions)


def _parse_icon(icon: Any) -> Icon | None:
    if icon is None:
        return None
    if isinstance(icon, str):
        return IconPath(icon)
    if isinstance(icon, ThemableIcon):
        return icon
    return ThemableIcon(dark=icon["dark"], light=icon["light"])


def parse_command(candidate: Mapping[str, Any]) -> Command:
    """
    Build a Command from a mapping accepted by `is_valid_command`.

    Raises:
        ValueError: if `where` holds an unknown location
    """
    return Command(
        command=candidate["command"],
        title=candidate["title"],
        category=candidate.get("category"),
        where=tuple(_flatten_where(candidate.get("where"))),
        when=_parse_when(candidate.get("when")),
        icon=_parse_icon(candidate.get("icon")),
    )


def validate_command(
    candidate: Any,
    collector: ExtensionMessageCollector,
    settings: CommandsSettings | None = None,
) -> Command | None:
    """Validate and parse in one step; None when the candidate is rejected."""
    if not is_valid_command(candidate, collector, settings):
        logger.debug(f"Rejected command contribution from {collector.extension_id}")
        return None
    return parse_command(candidate)
