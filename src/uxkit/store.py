"""Command Template Store — named templates with argument substitution."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel

from uxkit.catalog import agent_names
from uxkit.errors import DuplicateTemplateError, TemplateError, TemplateNotFound
from uxkit.paths import bundled_commands_dir
from uxkit.schemas.command import CommandTemplate
from uxkit.schemas.config import ToolkitConfig
from uxkit.templates import parse_template_file

logger = logging.getLogger(__name__)


class CommandStore:
    """Read-only mapping from command name to ``CommandTemplate``.

    Built once and never mutated, so ``resolve`` is a pure lookup plus
    string substitution.
    """

    def __init__(self, templates: Iterable[CommandTemplate] = ()) -> None:
        table: dict[str, CommandTemplate] = {}
        for template in templates:
            if template.name in table:
                raise DuplicateTemplateError(f"duplicate command name: {template.name!r}")
            table[template.name] = template
        self._templates = MappingProxyType(table)

    @classmethod
    def from_directory(cls, path: str | Path) -> "CommandStore":
        """Load every ``*.md`` file in ``path``.

        Raises ``FileNotFoundError`` if the directory doesn't exist and a
        ``TemplateError`` subclass on the first malformed file.
        """
        path = Path(path)
        if not path.is_dir():
            raise FileNotFoundError(f"Template directory not found: {path}")
        return cls(parse_template_file(p) for p in sorted(path.glob("*.md")))

    @classmethod
    def from_directories(cls, paths: Iterable[str | Path]) -> "CommandStore":
        """Layer several directories; later directories override earlier ones."""
        merged: dict[str, CommandTemplate] = {}
        for raw in paths:
            path = Path(raw)
            if not path.is_dir():
                logger.warning("Skipping missing template directory: %s", path)
                continue
            for template in cls.from_directory(path):
                if template.name in merged:
                    logger.debug("Template %s overridden by %s", template.name, path)
                merged[template.name] = template
        return cls(merged.values())

    @classmethod
    def bundled(cls) -> "CommandStore":
        """The templates shipped with the package."""
        return cls.from_directory(bundled_commands_dir())

    def names(self) -> list[str]:
        return sorted(self._templates)

    def get(self, name: str) -> CommandTemplate:
        try:
            return self._templates[name]
        except KeyError:
            raise TemplateNotFound(name, list(self._templates)) from None

    def resolve(self, name: str, argument_text: str) -> str:
        """Return the body of ``name`` with its placeholder replaced.

        Raises ``TemplateNotFound`` when no template is registered under
        ``name``.
        """
        return self.get(name).render(argument_text)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[CommandTemplate]:
        return iter(self._templates[n] for n in self.names())

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"CommandStore({self.names()!r})"


def load_store(config: ToolkitConfig | None = None) -> CommandStore:
    """Build the store from the bundled templates plus ``config.command_dirs``."""
    dirs: list[str | Path] = [bundled_commands_dir()]
    if config is not None:
        dirs.extend(config.command_dirs)
    return CommandStore.from_directories(dirs)


# ---------------------------------------------------------------------------
# Directory validation
# ---------------------------------------------------------------------------


class FileReport(BaseModel):
    """Validation outcome for a single template file."""

    path: str
    name: str
    errors: list[str] = []
    warnings: list[str] = []

    @property
    def ok(self) -> bool:
        return not self.errors


class ValidationReport(BaseModel):
    """Validation outcome for a whole template directory."""

    directory: str
    files: list[FileReport] = []

    @property
    def ok(self) -> bool:
        return all(f.ok for f in self.files)

    @property
    def error_count(self) -> int:
        return sum(len(f.errors) for f in self.files)

    @property
    def warning_count(self) -> int:
        return sum(len(f.warnings) for f in self.files)


def validate_directory(path: str | Path) -> ValidationReport:
    """Validate every template in ``path`` without stopping at the first error.

    An ``agent`` that isn't in the catalog is only a warning since agent
    personas live outside this package.
    """
    path = Path(path)
    if not path.is_dir():
        raise FileNotFoundError(f"Template directory not found: {path}")

    known_agents = set(agent_names())
    report = ValidationReport(directory=str(path))
    for md_file in sorted(path.glob("*.md")):
        entry = FileReport(path=str(md_file), name=md_file.stem)
        try:
            template = parse_template_file(md_file)
        except (TemplateError, OSError, UnicodeDecodeError) as exc:
            entry.errors.append(str(exc))
        else:
            if template.agent not in known_agents:
                entry.warnings.append(f"agent {template.agent!r} is not in the catalog")
        report.files.append(entry)

    if not report.files:
        logger.warning("No templates found in %s", path)
    return report
