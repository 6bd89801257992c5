"""Markdown catalog generator — renders skills, agents and commands."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from uxkit.catalog import AGENTS, COMMANDS, skills_by_category
from uxkit.store import CommandStore

_TEMPLATE_DIR = Path(__file__).parent / "templates"


def render_catalog(store: CommandStore) -> str:
    """Render the component catalog as a Markdown document.

    Commands come from ``store`` so agent and subtask metadata reflect the
    templates actually loaded; catalog descriptions fill in where a command
    has no template.
    """
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=False,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    template = env.get_template("catalog.md.j2")

    commands = []
    for info in COMMANDS:
        loaded = store.get(info.name) if info.name in store else None
        commands.append(
            {
                "name": info.name,
                "description": loaded.description if loaded else info.description,
                "agent": loaded.agent if loaded else "",
                "subtask": loaded.subtask if loaded else False,
            }
        )
    # Extra templates layered in from user directories
    for extra in store:
        if extra.name not in {c.name for c in COMMANDS}:
            commands.append(
                {
                    "name": extra.name,
                    "description": extra.description,
                    "agent": extra.agent,
                    "subtask": extra.subtask,
                }
            )

    return template.render(
        skills=skills_by_category(),
        agents=AGENTS,
        commands=commands,
    )
