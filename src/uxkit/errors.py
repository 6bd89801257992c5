"""Exceptions raised while loading and resolving command templates."""

from __future__ import annotations

from pathlib import Path


class ToolkitError(Exception):
    """Base exception for ux-toolkit."""


class TemplateError(ToolkitError):
    """A command template could not be loaded."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class TemplateFormatError(TemplateError):
    """Front matter is missing, unterminated, or not a YAML mapping."""


class TemplateValidationError(TemplateError):
    """Front matter or body violates the template schema."""


class DuplicateTemplateError(TemplateError):
    """Two templates share the same name within one store."""


class TemplateNotFound(ToolkitError, KeyError):
    """No template is registered under the requested name."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = sorted(available or [])
        super().__init__(name)

    def __str__(self) -> str:
        msg = f"Command template not found: {self.name!r}"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        return msg
