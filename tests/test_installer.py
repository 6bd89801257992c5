"""Tests for installing, removing and inspecting command files."""

from pathlib import Path

import pytest

from uxkit.catalog import command_names
from uxkit.installer import install, status, uninstall
from uxkit.paths import Destinations, destination_dirs
from uxkit.store import CommandStore
from uxkit.templates import parse_template_file


@pytest.fixture
def dest(tmp_path: Path) -> Destinations:
    return destination_dirs("opencode", "project", tmp_path / "project")


@pytest.fixture
def store() -> CommandStore:
    return CommandStore.bundled()


class TestInstall:

    def test_installs_every_command(self, store: CommandStore, dest: Destinations) -> None:
        result = install(store, dest)
        assert result.ok
        assert sorted(result.installed) == sorted(f"command:{n}" for n in command_names())
        for name in command_names():
            assert (dest.commands / f"{name}.md").is_file()

    def test_installed_files_parse_to_same_template(self, store: CommandStore, dest: Destinations) -> None:
        install(store, dest)
        for name in store.names():
            assert parse_template_file(dest.commands / f"{name}.md") == store.get(name)

    def test_existing_files_skipped(self, store: CommandStore, dest: Destinations) -> None:
        dest.commands.mkdir(parents=True)
        existing = dest.commands / "ux-audit.md"
        existing.write_text("user edited")

        result = install(store, dest)
        assert "command:ux-audit" in result.skipped
        assert existing.read_text() == "user edited"
        assert len(result.installed) == 3

    def test_force_overwrites(self, store: CommandStore, dest: Destinations) -> None:
        dest.commands.mkdir(parents=True)
        (dest.commands / "ux-audit.md").write_text("user edited")

        result = install(store, dest, force=True)
        assert not result.skipped
        assert "$ARGUMENTS" in (dest.commands / "ux-audit.md").read_text()

    def test_specific_names_case_insensitive(self, store: CommandStore, dest: Destinations) -> None:
        result = install(store, dest, names=["Design-Review"])
        assert result.installed == ["command:design-review"]
        assert not (dest.commands / "ux-audit.md").exists()

    def test_unknown_name_is_error(self, store: CommandStore, dest: Destinations) -> None:
        result = install(store, dest, names=["design-review", "bogus"])
        assert result.installed == ["command:design-review"]
        assert len(result.errors) == 1
        assert result.errors[0].startswith("command:bogus")
        assert not result.ok

    def test_no_tmp_files_left(self, store: CommandStore, dest: Destinations) -> None:
        install(store, dest)
        assert not list(dest.commands.glob("*.tmp"))


class TestUninstall:

    def test_removes_installed(self, store: CommandStore, dest: Destinations) -> None:
        install(store, dest)
        result = uninstall(dest)
        assert result.ok
        assert len(result.removed) == 4
        assert not list(dest.commands.glob("*.md"))

    def test_missing_reported_as_not_found(self, store: CommandStore, dest: Destinations) -> None:
        install(store, dest, names=["a11y-check"])
        result = uninstall(dest)
        assert result.removed == ["command:a11y-check"]
        assert len(result.not_found) == 3

    def test_leaves_foreign_files(self, store: CommandStore, dest: Destinations) -> None:
        install(store, dest)
        mine = dest.commands / "my-command.md"
        mine.write_text("keep me")
        uninstall(dest)
        assert mine.exists()


class TestStatus:

    def test_nothing_installed(self, dest: Destinations) -> None:
        result = status(dest)
        assert result.installed == 0
        assert result.total == 4
        assert sorted(result.missing) == sorted(command_names())

    def test_partial_install(self, store: CommandStore, dest: Destinations) -> None:
        install(store, dest, names=["ux-audit", "a11y-check"])
        result = status(dest)
        assert result.installed == 2
        assert sorted(result.missing) == ["design-review", "screenshot-review"]
        entry = next(c for c in result.components if c.name == "ux-audit")
        assert entry.path.endswith("ux-audit.md")
        assert entry.modified_at is not None

    def test_config_dir_reported(self, dest: Destinations) -> None:
        assert status(dest).config_dir == str(dest.commands.parent)
