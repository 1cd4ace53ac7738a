"""
Pytest configuration for extcommands tests

Resets process-wide registries and the settings cache around every test
"""
import pytest

from extcommands.commands.registry import reset_command_registry
from extcommands.config.loader import invalidate_settings_cache
from extcommands.extensions.registry import reset_extensions_registry


@pytest.fixture(autouse=True)
def _reset_globals():
    reset_command_registry()
    reset_extensions_registry()
    invalidate_settings_cache()
    yield
    reset_command_registry()
    reset_extensions_registry()
    invalidate_settings_cache()


@pytest.fixture
def make_user():
    """Build an ExtensionPointUser for an extension rooted at `root`"""
    from extcommands.extensions.types import ExtensionDescription, ExtensionPointUser

    def _make(value, extension_id="acme.tools", root="/ext/acme"):
        description = ExtensionDescription(id=extension_id, extension_location=root)
        return ExtensionPointUser(description=description, value=value)

    return _make
