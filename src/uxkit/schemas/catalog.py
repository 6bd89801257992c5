"""Pydantic models for the toolkit's component catalog."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

SkillCategory = Literal[
    "core",
    "structure",
    "component",
    "interaction",
    "editor",
    "game",
    "data",
    "framework",
]

AgentMode = Literal["analysis", "fix"]


class SkillInfo(BaseModel):
    """A knowledge bundle an agent can be told to load."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    category: SkillCategory


class AgentInfo(BaseModel):
    """An agent persona that executes resolved commands."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    mode: AgentMode  # "analysis" is read-only, "fix" edits code


class CommandInfo(BaseModel):
    """Catalog entry for a bundled command template."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
