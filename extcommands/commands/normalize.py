"""Icon path resolution against the owning extension's install root"""
from __future__ import annotations

import os
from dataclasses import replace

from .types import Command, IconPath, ThemableIcon


def resolve_icon_path(extension_root: str, path: str) -> str:
    """Join an icon path onto the extension root by path segments.

    Absolute paths and drive letters are treated as relative to the root.
    """
    relative = os.path.splitdrive(path)[1].lstrip("/\\")
    return os.path.normpath(os.path.join(extension_root, relative))


def normalize_command(command: Command, extension_root: str) -> Command:
    """Return a copy of `command` whose icon paths are rooted at `extension_root`."""
    icon = command.icon
    if isinstance(icon, IconPath):
        return replace(command, icon=IconPath(resolve_icon_path(extension_root, icon.path)))
    if isinstance(icon, ThemableIcon):
        return replace(
            command,
            icon=ThemableIcon(
                dark=resolve_icon_path(extension_root, icon.dark),
                light=resolve_icon_path(extension_root, icon.light),
            ),
        )
    return command
