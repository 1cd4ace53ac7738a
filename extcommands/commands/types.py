"""Command contribution model.

Raw manifest values are loosely typed (`where`, `when` and `icon` each accept a
scalar or a list / a string or an object). Once validated they are parsed into
the tagged variants below, one class per accepted shape.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class Location(str, Enum):
    """UI surfaces a command can be placed in"""

    EDITOR_PRIMARY = "editor/primary"
    EDITOR_SECONDARY = "editor/secondary"
    EXPLORER_CONTEXT = "explorer/context"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


@dataclass(frozen=True)
class ResourceFilter:
    """Resource predicate; set fields are ANDed by whoever evaluates it"""

    language: str | None = None
    scheme: str | None = None
    pattern: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ResourceFilter:
        return cls(
            language=data.get("language"),
            scheme=data.get("scheme"),
            pattern=data.get("pattern"),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            key: value
            for key, value in (("language", self.language), ("scheme", self.scheme), ("pattern", self.pattern))
            if value is not None
        }


@dataclass(frozen=True)
class WhenExpression:
    """Free-form visibility condition"""

    expression: str

    def to_dict(self) -> str:
        return self.expression


WhenCondition = Union[WhenExpression, ResourceFilter]


@dataclass(frozen=True)
class IconPath:
    """Single icon used for every theme"""

    path: str

    def to_dict(self) -> str:
        return self.path


@dataclass(frozen=True)
class ThemableIcon:
    """Separate icon artwork per theme"""

    dark: str
    light: str

    def to_dict(self) -> dict[str, str]:
        return {"dark": self.dark, "light": self.light}


Icon = Union[IconPath, ThemableIcon]


def is_themable_icon(thing: Any) -> bool:
    """True iff `thing` is a non-null structured value with string `dark` and `light`."""
    if isinstance(thing, ThemableIcon):
        return True
    return isinstance(thing, Mapping) and isinstance(thing.get("dark"), str) and isinstance(thing.get("light"), str)


@dataclass(frozen=True)
class Command:
    """
    A validated command contribution.

    `where` and `when` are tuples; an empty tuple means the field was not
    declared. The when-clause is an OR across its conditions.
    """

    command: str
    title: str
    category: str | None = None
    where: tuple[Location, ...] = ()
    when: tuple[WhenCondition, ...] = ()
    icon: Icon | None = None

    @property
    def activation_event(self) -> str:
        return f"onCommand:{self.command}"

    def to_dict(self) -> dict[str, Any]:
        """Render back to the manifest shape (single values are not wrapped in lists)."""
        data: dict[str, Any] = {"command": self.command, "title": self.title}
        if self.category is not None:
            data["category"] = self.category
        if self.where:
            where = [location.value for location in self.where]
            data["where"] = where[0] if len(where) == 1 else where
        if self.when:
            when = [condition.to_dict() for condition in self.when]
            data["when"] = when[0] if len(when) == 1 else when
        if self.icon is not None:
            data["icon"] = self.icon.to_dict()
        return data
