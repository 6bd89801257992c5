"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from uxkit.paths import ENV_OVERRIDES

VALID_TEMPLATE = """\
---
description: Check the checkout flow
agent: ux-auditor
subtask: true
---
Audit the checkout flow of: $ARGUMENTS

1. Load the `ux-heuristics` skill.
2. Navigate to the page.
"""


def write_template(directory: Path, name: str, text: str = VALID_TEMPLATE) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.md"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A directory holding two valid templates."""
    d = tmp_path / "commands"
    write_template(d, "checkout-audit")
    write_template(
        d,
        "contrast-check",
        VALID_TEMPLATE.replace("ux-auditor", "accessibility-auditor").replace(
            "subtask: true", "subtask: false"
        ),
    )
    return d


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point HOME at a temp dir and clear config overrides for every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for key in ENV_OVERRIDES:
        monkeypatch.delenv(key, raising=False)
    return home
