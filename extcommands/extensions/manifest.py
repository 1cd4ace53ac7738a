"""
Extension manifest loading

Scans extension directories for package.json manifests and turns the
`contributes.<point>` section of each one into an ExtensionPointUser:
- a directory holding a manifest is one extension
- otherwise each child directory holding a manifest is one extension
"""
from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ..errors import ManifestError
from .types import ExtensionDescription, ExtensionPointUser

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_NAME = "package.json"


def read_extension_manifest(directory: Path, manifest_name: str = DEFAULT_MANIFEST_NAME) -> dict[str, Any]:
    """
    Read the manifest of one extension directory

    Raises:
        ManifestError: if the manifest is missing, unreadable or not an object
    """
    manifest_path = directory / manifest_name

    if not manifest_path.is_file():
        raise ManifestError(f"No {manifest_name} in {directory}", str(manifest_path))

    try:
        with open(manifest_path, encoding="utf-8") as f:
            manifest = json.load(f)
    except (OSError, ValueError) as e:
        raise ManifestError(f"Failed to read {manifest_path}: {e}", str(manifest_path)) from e

    if not isinstance(manifest, dict):
        raise ManifestError(f"Manifest {manifest_path} is not a JSON object", str(manifest_path))

    return manifest


def describe_extension(directory: Path, manifest: dict[str, Any]) -> ExtensionDescription:
    """
    Build the extension description from its manifest

    Examples:
    - {"publisher": "acme", "name": "tools"} -> id "acme.tools"
    - {"name": "tools"} -> id "tools"
    - {} in directory "tools-1.0" -> id "tools-1.0"
    """
    name = manifest.get("name") if isinstance(manifest.get("name"), str) else None
    publisher = manifest.get("publisher") if isinstance(manifest.get("publisher"), str) else None
    version = manifest.get("version") if isinstance(manifest.get("version"), str) else None

    if name and publisher:
        extension_id = f"{publisher}.{name}"
    else:
        extension_id = name or directory.name

    return ExtensionDescription(
        id=extension_id,
        extension_location=str(directory.resolve()),
        name=name,
        version=version,
        publisher=publisher,
    )


def _find_extension_dirs(directory: Path, manifest_name: str) -> list[Path]:
    if (directory / manifest_name).is_file():
        return [directory]
    if not directory.is_dir():
        logger.debug(f"Extension directory does not exist: {directory}")
        return []
    return sorted(child for child in directory.iterdir() if child.is_dir() and (child / manifest_name).is_file())


def load_extension_users(
    directories: Iterable[str | Path],
    point: str = "commands",
    manifest_name: str = DEFAULT_MANIFEST_NAME,
) -> list[ExtensionPointUser]:
    """
    Collect the users of one extension point from extension directories

    Extensions that do not contribute to the point are skipped, as are
    unreadable manifests (logged). A directory reached twice is loaded once.

    Args:
        directories: Extension directories or directories of extensions
        point: Extension point name under `contributes`
        manifest_name: Manifest file name

    Returns:
        One user per contributing extension, in scan order
    """
    users: list[ExtensionPointUser] = []
    seen: set[Path] = set()

    for directory in directories:
        for extension_dir in _find_extension_dirs(Path(directory), manifest_name):
            resolved = extension_dir.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)

            try:
                manifest = read_extension_manifest(extension_dir, manifest_name)
            except ManifestError as e:
                logger.warning(str(e))
                continue

            contributes = manifest.get("contributes")
            if not isinstance(contributes, dict) or point not in contributes:
                continue

            description = describe_extension(resolved, manifest)
            users.append(ExtensionPointUser(description=description, value=contributes[point], point=point))
            logger.debug(f"Extension {description.id} contributes to {point!r}")

    logger.info(f"Loaded {len(users)} extensions contributing to {point!r}")
    return users
