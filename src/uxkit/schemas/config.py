"""Configuration schema — validates ux-toolkit.yml."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, model_validator

Target = Literal["opencode", "claude"]
Scope = Literal["global", "project"]


class ToolkitConfig(BaseModel):
    """Top-level configuration loaded from ux-toolkit.yml.

    Every field has a default, so an empty file (or no file at all) is a
    valid configuration that installs globally into OpenCode.
    """

    target: Target = "opencode"
    scope: Scope = "global"
    project_root: str = "."

    # Extra template directories layered over the bundled commands,
    # later entries win on name clashes.
    command_dirs: list[str] = []

    # Overwrite files that already exist at the destination
    force: bool = False

    @model_validator(mode="after")
    def check_project_root_exists(self) -> "ToolkitConfig":
        if self.scope == "project" and not Path(self.project_root).is_dir():
            raise ValueError(f"project_root does not exist: {self.project_root}")
        return self
