"""Config directory resolution for the supported agent runtimes."""

from __future__ import annotations

import os
import platform
from pathlib import Path
from typing import NamedTuple

from uxkit.schemas.config import Scope, Target

_PACKAGE_DIR = Path(__file__).parent

# Environment variables that redirect the config directories
ENV_OVERRIDES = (
    "UX_TOOLKIT_CONFIG_DIR",
    "OPENCODE_CONFIG_DIR",
    "CLAUDE_CONFIG_DIR",
    "XDG_CONFIG_HOME",
)

_PROJECT_DIRNAMES: dict[str, str] = {
    "opencode": ".opencode",
    "claude": ".claude",
}


class Destinations(NamedTuple):
    skills: Path
    agents: Path
    commands: Path


def bundled_commands_dir() -> Path:
    """Directory holding the command templates shipped with the package."""
    return _PACKAGE_DIR / "commands"


def global_config_dir(target: Target = "opencode") -> Path:
    """User-level config directory for ``target``.

    ``UX_TOOLKIT_CONFIG_DIR`` wins over the runtime-specific variables.
    """
    override = os.environ.get("UX_TOOLKIT_CONFIG_DIR")
    if override:
        return Path(override).expanduser()

    if target == "claude":
        claude_dir = os.environ.get("CLAUDE_CONFIG_DIR")
        if claude_dir:
            return Path(claude_dir).expanduser()
        return Path.home() / ".claude"

    opencode_dir = os.environ.get("OPENCODE_CONFIG_DIR")
    if opencode_dir:
        return Path(opencode_dir).expanduser()
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg).expanduser() / "opencode"
    return Path.home() / ".config" / "opencode"


def project_config_dir(target: Target = "opencode", project_root: str | Path = ".") -> Path:
    return Path(project_root) / _PROJECT_DIRNAMES[target]


def destination_dirs(
    target: Target = "opencode",
    scope: Scope = "global",
    project_root: str | Path = ".",
) -> Destinations:
    """Where skills, agents and commands live for a target and scope."""
    if scope == "global":
        base = global_config_dir(target)
    else:
        base = project_config_dir(target, project_root)
    return Destinations(
        skills=base / "skills",
        agents=base / "agents",
        commands=base / "commands",
    )


def is_target_installed(target: Target) -> bool:
    """A runtime counts as installed when its global config dir exists."""
    return global_config_dir(target).is_dir()


def platform_info() -> dict:
    """Platform, interpreter and per-target config directory details."""
    info: dict = {
        "platform": platform.system().lower() or "unknown",
        "python_version": platform.python_version(),
        "overrides": {k: os.environ[k] for k in ENV_OVERRIDES if os.environ.get(k)},
    }
    for target in ("opencode", "claude"):
        config_dir = global_config_dir(target)
        info[target] = {"config_dir": str(config_dir), "exists": config_dir.is_dir()}
    return info
