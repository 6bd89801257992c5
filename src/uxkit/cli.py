"""Typer CLI — ``uxkit list``, ``resolve``, ``install`` and friends."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from uxkit.catalog import AGENTS, COMMANDS, SKILLS
from uxkit.config import load_config
from uxkit.errors import TemplateError, TemplateNotFound
from uxkit.schemas.config import ToolkitConfig

# Load .env file from the working directory (if it exists)
load_dotenv()

app = typer.Typer(
    name="uxkit",
    help="UX Toolkit — UX, accessibility and design review commands for AI agents.",
    no_args_is_help=True,
)
console = Console()

_TARGET_NAMES = {"opencode": "OpenCode", "claude": "Claude Code"}


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )


def _load(config: Path | None) -> ToolkitConfig:
    try:
        return load_config(config)
    except Exception as exc:
        console.print(f"[red]Config validation failed:[/] {escape(str(exc))}")
        raise typer.Exit(code=1)


def _load_store(cfg: ToolkitConfig):
    from uxkit.store import load_store

    try:
        return load_store(cfg)
    except (TemplateError, OSError) as exc:
        console.print(f"[red]Failed to load command templates:[/] {escape(str(exc))}")
        raise typer.Exit(code=1)


def _pick_target(cfg: ToolkitConfig, claude: bool, opencode: bool) -> str:
    if claude and opencode:
        console.print("[red]Error:[/] choose one of --claude or --opencode.")
        raise typer.Exit(code=1)
    if claude:
        return "claude"
    if opencode:
        return "opencode"
    return cfg.target


def _scope_label(scope: str) -> str:
    return "globally" if scope == "global" else "in project"


@app.command("list")
def list_components(
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """List available skills, agents and commands."""
    _setup_logging(verbose)

    console.print("\n[bold]Skills:[/]")
    for s in SKILLS:
        console.print(f"  {s.name:<30} {s.description}")

    console.print("\n[bold]Agents:[/]")
    for a in AGENTS:
        console.print(f"  {a.name:<30} {a.description}")

    console.print("\n[bold]Commands:[/]")
    for c in COMMANDS:
        console.print(f"  /{c.name:<29} {c.description}")


@app.command()
def show(
    name: str = typer.Argument(..., help="Command name, e.g. design-review"),
    config: Path = typer.Option(None, "--config", "-c", help="Path to ux-toolkit.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Show a command template's metadata and body."""
    _setup_logging(verbose)
    store = _load_store(_load(config))

    try:
        template = store.get(name)
    except TemplateNotFound as exc:
        console.print(f"[red]{escape(str(exc))}[/]")
        raise typer.Exit(code=1)

    console.print(f"[bold cyan]/{escape(template.name)}[/]")
    console.print(f"  Description: {escape(template.description)}")
    console.print(f"  Agent:       {escape(template.agent)}")
    console.print(f"  Subtask:     {'yes' if template.subtask else 'no'}\n")
    typer.echo(template.body, nl=not template.body.endswith("\n"))


@app.command()
def resolve(
    name: str = typer.Argument(..., help="Command name, e.g. design-review"),
    argument: list[str] = typer.Argument(..., help="Text substituted for the argument placeholder"),
    config: Path = typer.Option(None, "--config", "-c", help="Path to ux-toolkit.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Print a command body with the placeholder replaced by ARGUMENT.

    Example:

        uxkit resolve design-review the login page
    """
    _setup_logging(verbose)
    store = _load_store(_load(config))

    try:
        body = store.resolve(name, " ".join(argument))
    except TemplateNotFound as exc:
        console.print(f"[red]{escape(str(exc))}[/]")
        raise typer.Exit(code=1)

    # Plain output so the body can be piped straight into an agent
    typer.echo(body, nl=not body.endswith("\n"))


@app.command()
def validate(
    directory: Path = typer.Argument(None, help="Template directory (default: bundled commands)"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Validate every command template in a directory."""
    from uxkit.paths import bundled_commands_dir
    from uxkit.store import validate_directory

    _setup_logging(verbose)
    directory = directory or bundled_commands_dir()

    try:
        report = validate_directory(directory)
    except FileNotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}[/]")
        raise typer.Exit(code=1)

    for entry in report.files:
        mark = "[green]✓[/]" if entry.ok else "[red]✗[/]"
        console.print(f"  {mark} {escape(entry.name)}")
        for err in entry.errors:
            console.print(f"      [red]{escape(err)}[/]")
        for warn in entry.warnings:
            console.print(f"      [yellow]{escape(warn)}[/]")

    console.print(
        f"\n{len(report.files)} template(s), "
        f"{report.error_count} error(s), {report.warning_count} warning(s)"
    )
    if not report.ok:
        raise typer.Exit(code=1)


@app.command()
def install(
    claude: bool = typer.Option(False, "--claude", help="Target Claude Code (~/.claude)"),
    opencode: bool = typer.Option(False, "--opencode", help="Target OpenCode (~/.config/opencode)"),
    project: bool = typer.Option(False, "--project", "-p", help="Install into the project config dir"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing files"),
    command: list[str] = typer.Option(None, "--command", help="Install only this command (repeatable)"),
    config: Path = typer.Option(None, "--config", "-c", help="Path to ux-toolkit.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Install command templates into an agent runtime's config directory."""
    from uxkit.installer import install as run_install
    from uxkit.paths import destination_dirs

    _setup_logging(verbose)
    cfg = _load(config)
    store = _load_store(cfg)
    target = _pick_target(cfg, claude, opencode)
    scope = "project" if project else cfg.scope
    dest = destination_dirs(target, scope, cfg.project_root)

    console.print(f"\nInstalling UX Toolkit to {_TARGET_NAMES[target]} {_scope_label(scope)}...\n")
    result = run_install(store, dest, names=command or None, force=force or cfg.force)

    if result.installed:
        console.print(f"Installed {len(result.installed)} components:")
        for item in result.installed:
            console.print(f"  [green]+[/] {item}")
    if result.skipped:
        console.print(f"\nSkipped {len(result.skipped)} (already exist, use --force to overwrite):")
        for item in result.skipped:
            console.print(f"  - {item}")
    if result.errors:
        console.print("\n[red]Errors:[/]")
        for err in result.errors:
            console.print(f"  [red]![/] {escape(err)}")
        raise typer.Exit(code=1)

    console.print("\nDone!")


@app.command()
def uninstall(
    claude: bool = typer.Option(False, "--claude", help="Target Claude Code (~/.claude)"),
    opencode: bool = typer.Option(False, "--opencode", help="Target OpenCode (~/.config/opencode)"),
    project: bool = typer.Option(False, "--project", "-p", help="Remove from the project config dir"),
    config: Path = typer.Option(None, "--config", "-c", help="Path to ux-toolkit.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Remove installed command templates."""
    from uxkit.installer import uninstall as run_uninstall
    from uxkit.paths import destination_dirs

    _setup_logging(verbose)
    cfg = _load(config)
    target = _pick_target(cfg, claude, opencode)
    scope = "project" if project else cfg.scope
    dest = destination_dirs(target, scope, cfg.project_root)

    console.print(f"\nUninstalling UX Toolkit from {_TARGET_NAMES[target]} {_scope_label(scope)}...\n")
    result = run_uninstall(dest, _load_store(cfg).names())

    if result.removed:
        console.print(f"Removed {len(result.removed)} components:")
        for item in result.removed:
            console.print(f"  - {item}")
    if result.not_found and verbose:
        console.print(f"\nNot found ({len(result.not_found)}):")
        for item in result.not_found:
            console.print(f"  ? {item}")
    if result.errors:
        console.print("\n[red]Errors:[/]")
        for err in result.errors:
            console.print(f"  [red]![/] {escape(err)}")
        raise typer.Exit(code=1)

    console.print("\nDone!")


@app.command()
def status(
    project: bool = typer.Option(False, "--project", "-p", help="Check the project config dirs"),
    config: Path = typer.Option(None, "--config", "-c", help="Path to ux-toolkit.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Also list missing commands"),
) -> None:
    """Show which commands are installed for each agent runtime."""
    from uxkit.installer import status as command_status
    from uxkit.paths import destination_dirs, is_target_installed

    _setup_logging(verbose)
    cfg = _load(config)
    scope = "project" if project else cfg.scope
    names = _load_store(cfg).names()

    table = Table(title="UX Toolkit - Installation Status")
    table.add_column("Runtime", no_wrap=True)
    table.add_column("Config dir")
    table.add_column("Commands", justify="right", no_wrap=True)

    missing_by_target: dict[str, list[str]] = {}
    for target in ("opencode", "claude"):
        available = is_target_installed(target) if scope == "global" else True
        result = command_status(
            destination_dirs(target, scope, cfg.project_root), names, available=available
        )
        if not result.available:
            counts = "[dim]not installed[/]"
        elif result.installed == result.total:
            counts = f"[green]✓ {result.installed}/{result.total}[/]"
        elif result.installed:
            counts = f"[yellow]◐ {result.installed}/{result.total}[/]"
        else:
            counts = f"[red]✗ 0/{result.total}[/]"
        table.add_row(_TARGET_NAMES[target], escape(result.config_dir), counts)
        if result.available and result.missing:
            missing_by_target[target] = result.missing

    console.print(table)
    if verbose:
        for target, missing in missing_by_target.items():
            console.print(f"  {_TARGET_NAMES[target]} missing: {', '.join(missing)}")


@app.command()
def info() -> None:
    """Show platform and config directory information."""
    from uxkit.paths import platform_info

    details = platform_info()
    console.print("\n[bold]UX Toolkit - Platform Information[/]\n")
    console.print(f"  Platform:       {details['platform']}")
    console.print(f"  Python:         {details['python_version']}")

    for target in ("opencode", "claude"):
        console.print(f"\n  {_TARGET_NAMES[target]}:")
        console.print(f"    Config Dir:   {escape(details[target]['config_dir'])}")
        console.print(f"    Installed:    {'Yes' if details[target]['exists'] else 'No'}")

    if details["overrides"]:
        console.print("\n  Environment Overrides:")
        for key, value in details["overrides"].items():
            console.print(f"    {key}: {escape(value)}")

    console.print("\n  Components:")
    console.print(f"    Skills:   {len(SKILLS)}")
    console.print(f"    Agents:   {len(AGENTS)}")
    console.print(f"    Commands: {len(COMMANDS)}")


@app.command()
def catalog(
    output: Path = typer.Option(None, "--output", "-o", help="Write the catalog to this file instead of stdout"),
    config: Path = typer.Option(None, "--config", "-c", help="Path to ux-toolkit.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render the skill, agent and command catalog as Markdown."""
    from uxkit.output.catalog import render_catalog

    _setup_logging(verbose)
    store = _load_store(_load(config))
    text = render_catalog(store)

    if output is None:
        typer.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    console.print(f"[green]Catalog written to:[/] {escape(str(output))}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
