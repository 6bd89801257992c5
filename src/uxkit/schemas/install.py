"""Result models returned by the installer."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class InstallResult(BaseModel):
    """Outcome of copying command templates into a config directory."""

    installed: list[str] = []
    skipped: list[str] = []
    errors: list[str] = []

    @property
    def ok(self) -> bool:
        return not self.errors


class UninstallResult(BaseModel):
    """Outcome of removing command templates from a config directory."""

    removed: list[str] = []
    not_found: list[str] = []
    errors: list[str] = []

    @property
    def ok(self) -> bool:
        return not self.errors


class ComponentStatus(BaseModel):
    """Installation state of one command file."""

    name: str
    installed: bool
    path: str = ""
    modified_at: datetime | None = None


class CommandStatus(BaseModel):
    """Installation state of every catalog command for one destination."""

    config_dir: str
    available: bool
    components: list[ComponentStatus] = []

    @property
    def installed(self) -> int:
        return sum(1 for c in self.components if c.installed)

    @property
    def total(self) -> int:
        return len(self.components)

    @property
    def missing(self) -> list[str]:
        return [c.name for c in self.components if not c.installed]
