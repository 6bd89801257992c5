"""Parse command template files (YAML front matter + Markdown body)."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from uxkit.errors import TemplateFormatError, TemplateValidationError
from uxkit.schemas.command import CommandTemplate

logger = logging.getLogger(__name__)

_MARKER = "---"


def split_front_matter(text: str) -> tuple[str, str]:
    """Split ``text`` into (front matter, body).

    The front matter must open on the very first line and be closed by a
    line holding only ``---``. Leading blank lines of the body are dropped.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != _MARKER:
        raise TemplateFormatError("missing front matter (file must start with '---')")

    for idx in range(1, len(lines)):
        if lines[idx].rstrip("\r\n") == _MARKER:
            front = "".join(lines[1:idx])
            body = "".join(lines[idx + 1:]).lstrip("\r\n")
            return front, body

    raise TemplateFormatError("unterminated front matter (no closing '---')")


def parse_template(text: str, name: str, path: Path | None = None) -> CommandTemplate:
    """Build a ``CommandTemplate`` from raw file contents.

    Raises ``TemplateFormatError`` for structural problems and
    ``TemplateValidationError`` when the metadata or body break the schema.
    """
    try:
        front, body = split_front_matter(text)
    except TemplateFormatError as exc:
        raise TemplateFormatError(str(exc), path) from None

    try:
        meta = yaml.safe_load(front)
    except yaml.YAMLError as exc:
        raise TemplateFormatError(f"invalid YAML front matter: {exc}", path) from exc

    if not isinstance(meta, dict):
        raise TemplateFormatError(
            f"front matter must be a YAML mapping, got {type(meta).__name__}", path
        )

    if not all(isinstance(k, str) for k in meta):
        raise TemplateFormatError("front matter keys must be strings", path)

    if "name" in meta or "body" in meta:
        raise TemplateValidationError("front matter may not set 'name' or 'body'", path)

    try:
        return CommandTemplate(name=name, body=body, **meta)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'template'}: {err['msg']}"
            for err in exc.errors()
        )
        raise TemplateValidationError(problems, path) from exc


def parse_template_file(path: str | Path) -> CommandTemplate:
    """Read a ``.md`` template from disk; the file stem becomes its name."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    template = parse_template(text, name=path.stem, path=path)
    logger.debug("Parsed template %s from %s", template.name, path)
    return template
