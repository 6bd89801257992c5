"""Install, remove and inspect command templates in an agent runtime's config dir.

Only command templates are managed here; skills and agents are catalog
entries the runtime provides on its own.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from uxkit.catalog import command_names
from uxkit.errors import TemplateNotFound
from uxkit.paths import Destinations
from uxkit.schemas.install import (
    CommandStatus,
    ComponentStatus,
    InstallResult,
    UninstallResult,
)
from uxkit.store import CommandStore

logger = logging.getLogger(__name__)


def _write_atomic(dest: Path, content: str) -> None:
    """Write via a sibling .tmp file so a failed write never leaves half a file."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    tmp = dest.with_suffix(dest.suffix + ".tmp")
    try:
        tmp.write_text(content, encoding="utf-8")
        tmp.replace(dest)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise


def install(
    store: CommandStore,
    destinations: Destinations,
    *,
    names: Iterable[str] | None = None,
    force: bool = False,
) -> InstallResult:
    """Write templates from ``store`` into ``destinations.commands``.

    ``names`` restricts the run to specific commands (case-insensitive);
    unknown names are reported as errors. Existing files are skipped unless
    ``force`` is set.
    """
    result = InstallResult()

    if names:
        by_lower = {n.lower(): n for n in store.names()}
        selected: list[str] = []
        for requested in names:
            match = by_lower.get(requested.lower())
            if match is None:
                result.errors.append(f"command:{requested}: {TemplateNotFound(requested, store.names())}")
            elif match not in selected:
                selected.append(match)
    else:
        selected = store.names()

    for name in selected:
        dest = destinations.commands / f"{name}.md"
        if dest.exists() and not force:
            result.skipped.append(f"command:{name}")
            logger.debug("Skipped %s (already exists)", dest)
            continue
        try:
            _write_atomic(dest, store.get(name).to_markdown())
        except OSError as exc:
            result.errors.append(f"command:{name}: {exc}")
            logger.warning("Failed to install %s: %s", dest, exc)
            continue
        result.installed.append(f"command:{name}")
        logger.info("Installed %s", dest)

    return result


def uninstall(destinations: Destinations, names: Iterable[str] | None = None) -> UninstallResult:
    """Remove our command files; defaults to every catalog command."""
    result = UninstallResult()

    for name in names or command_names():
        dest = destinations.commands / f"{name}.md"
        if not dest.exists():
            result.not_found.append(f"command:{name}")
            logger.debug("Not found: %s", dest)
            continue
        try:
            dest.unlink()
        except OSError as exc:
            result.errors.append(f"command:{name}: {exc}")
            logger.warning("Failed to remove %s: %s", dest, exc)
            continue
        result.removed.append(f"command:{name}")
        logger.info("Removed %s", dest)

    return result


def status(
    destinations: Destinations,
    names: Iterable[str] | None = None,
    *,
    available: bool = True,
) -> CommandStatus:
    """Report which commands are present in ``destinations.commands``."""
    components: list[ComponentStatus] = []
    for name in names or command_names():
        path = destinations.commands / f"{name}.md"
        if path.is_file():
            components.append(
                ComponentStatus(
                    name=name,
                    installed=True,
                    path=str(path),
                    modified_at=datetime.fromtimestamp(path.stat().st_mtime),
                )
            )
        else:
            components.append(ComponentStatus(name=name, installed=False))

    return CommandStatus(
        config_dir=str(destinations.commands.parent),
        available=available,
        components=components,
    )
