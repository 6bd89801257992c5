"""YAML config loader — reads ux-toolkit.yml into ToolkitConfig."""

from pathlib import Path

import yaml

from uxkit.schemas.config import ToolkitConfig


def load_config(path: str | Path | None = None) -> ToolkitConfig:
    """Load and validate a toolkit config file.

    With no path, returns the defaults. Raises ``FileNotFoundError`` if the
    path doesn't exist and ``pydantic.ValidationError`` if the YAML content
    is invalid.
    """
    if path is None:
        return ToolkitConfig()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return ToolkitConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must be a YAML mapping, got {type(raw).__name__}")

    # A list with only commented-out items loads as None.
    if "command_dirs" in raw:
        if raw["command_dirs"] is None:
            raw["command_dirs"] = []
        elif isinstance(raw["command_dirs"], list):
            raw["command_dirs"] = [item for item in raw["command_dirs"] if item]

    # Relative paths are relative to the config file, not the cwd.
    if isinstance(raw.get("command_dirs"), list):
        raw["command_dirs"] = [
            str(d) if Path(d).is_absolute() else str(path.parent / d)
            for d in raw["command_dirs"]
        ]

    if raw.get("project_root") and not Path(str(raw["project_root"])).is_absolute():
        raw["project_root"] = str(path.parent / str(raw["project_root"]))

    return ToolkitConfig(**raw)
