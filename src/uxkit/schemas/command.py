"""Pydantic model for a single command template."""

from __future__ import annotations

import re

import yaml
from pydantic import BaseModel, ConfigDict, StrictBool, field_validator

PLACEHOLDER = "$ARGUMENTS"

_NAME_RE = re.compile(r"^[a-z0-9][a-z0-9-]*$")


class CommandTemplate(BaseModel):
    """A named instruction document with metadata and an argument placeholder.

    Front-matter keys map one to one onto ``description``, ``agent`` and
    ``subtask``; anything else in the front matter is rejected. The body
    must carry the ``$ARGUMENTS`` placeholder exactly once.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    description: str
    agent: str
    subtask: StrictBool
    body: str

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        if not _NAME_RE.match(v):
            raise ValueError(
                f"name must be lowercase letters, digits and hyphens, got {v!r}"
            )
        return v

    @field_validator("description", "agent")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must be a non-empty string")
        if "\n" in v:
            raise ValueError("must be a single line")
        return v

    @field_validator("body")
    @classmethod
    def check_placeholder(cls, v: str) -> str:
        count = v.count(PLACEHOLDER)
        if count != 1:
            raise ValueError(
                f"body must contain {PLACEHOLDER} exactly once, found {count}"
            )
        return v

    def render(self, argument_text: str) -> str:
        """Return the body with the placeholder replaced by ``argument_text``."""
        return self.body.replace(PLACEHOLDER, argument_text)

    def to_markdown(self) -> str:
        """Serialize back to the on-disk front-matter format."""
        front = yaml.safe_dump(
            {"description": self.description, "agent": self.agent, "subtask": self.subtask},
            sort_keys=False,
            allow_unicode=True,
            width=10**6,
        )
        return f"---\n{front}---\n{self.body}"
