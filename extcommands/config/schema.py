"""Settings for the command contribution pipeline"""

from pydantic import BaseModel, Field


class CommandsSettings(BaseModel):
    """Host settings for the `commands` extension point"""

    extension_point: str = Field("commands", description="Extension point name")
    require_when: bool = Field(
        False, description="Reject contributions that do not declare a `when` clause"
    )
    allow_empty_strings: bool = Field(
        False, description="Accept empty `command` / `title` strings"
    )
    extensions_dirs: list[str] = Field(default_factory=list, description="Directories scanned for extensions")
    manifest_name: str = Field("package.json", description="Manifest file name inside an extension")
