"""Tests for front-matter parsing and the CommandTemplate schema."""

from pathlib import Path

import pytest

from uxkit.errors import TemplateFormatError, TemplateValidationError
from uxkit.schemas.command import CommandTemplate
from uxkit.templates import parse_template, parse_template_file, split_front_matter

from conftest import VALID_TEMPLATE, write_template


class TestSplitFrontMatter:

    def test_splits_meta_and_body(self) -> None:
        front, body = split_front_matter("---\na: 1\n---\nhello\n")
        assert front == "a: 1\n"
        assert body == "hello\n"

    def test_leading_blank_lines_dropped_from_body(self) -> None:
        _, body = split_front_matter("---\na: 1\n---\n\n\nhello")
        assert body == "hello"

    def test_crlf_markers(self) -> None:
        front, body = split_front_matter("---\r\na: 1\r\n---\r\nhello\r\n")
        assert front == "a: 1\r\n"
        assert body == "hello\r\n"

    def test_dashes_inside_body_are_kept(self) -> None:
        _, body = split_front_matter("---\na: 1\n---\nintro\n---\nmore\n")
        assert body == "intro\n---\nmore\n"

    def test_missing_front_matter(self) -> None:
        with pytest.raises(TemplateFormatError, match="missing front matter"):
            split_front_matter("no front matter here")

    def test_unterminated_front_matter(self) -> None:
        with pytest.raises(TemplateFormatError, match="unterminated"):
            split_front_matter("---\na: 1\nbody")


class TestParseTemplate:

    def test_valid_template(self) -> None:
        t = parse_template(VALID_TEMPLATE, name="checkout-audit")
        assert t.name == "checkout-audit"
        assert t.description == "Check the checkout flow"
        assert t.agent == "ux-auditor"
        assert t.subtask is True
        assert t.body.startswith("Audit the checkout flow of: $ARGUMENTS")

    def test_unknown_key_rejected(self) -> None:
        text = VALID_TEMPLATE.replace("subtask: true", "subtask: true\nmodel: fast")
        with pytest.raises(TemplateValidationError, match="model"):
            parse_template(text, name="x")

    def test_missing_key_rejected(self) -> None:
        text = VALID_TEMPLATE.replace("agent: ux-auditor\n", "")
        with pytest.raises(TemplateValidationError, match="agent"):
            parse_template(text, name="x")

    def test_string_subtask_rejected(self) -> None:
        text = VALID_TEMPLATE.replace("subtask: true", 'subtask: "true"')
        with pytest.raises(TemplateValidationError, match="subtask"):
            parse_template(text, name="x")

    def test_empty_description_rejected(self) -> None:
        text = VALID_TEMPLATE.replace("description: Check the checkout flow", 'description: "  "')
        with pytest.raises(TemplateValidationError, match="description"):
            parse_template(text, name="x")

    def test_missing_placeholder_rejected(self) -> None:
        text = VALID_TEMPLATE.replace("$ARGUMENTS", "the page")
        with pytest.raises(TemplateValidationError, match="exactly once, found 0"):
            parse_template(text, name="x")

    def test_repeated_placeholder_rejected(self) -> None:
        text = VALID_TEMPLATE + "\nAgain: $ARGUMENTS\n"
        with pytest.raises(TemplateValidationError, match="exactly once, found 2"):
            parse_template(text, name="x")

    def test_front_matter_cannot_set_name(self) -> None:
        text = VALID_TEMPLATE.replace("subtask: true", "subtask: true\nname: other")
        with pytest.raises(TemplateValidationError, match="name"):
            parse_template(text, name="x")

    def test_non_mapping_front_matter(self) -> None:
        with pytest.raises(TemplateFormatError, match="YAML mapping"):
            parse_template("---\n- a\n- b\n---\n$ARGUMENTS", name="x")

    def test_invalid_yaml(self) -> None:
        with pytest.raises(TemplateFormatError, match="invalid YAML"):
            parse_template("---\ndescription: [unclosed\n---\n$ARGUMENTS", name="x")

    def test_invalid_name_rejected(self) -> None:
        with pytest.raises(TemplateValidationError, match="name"):
            parse_template(VALID_TEMPLATE, name="Bad Name")


class TestParseTemplateFile:

    def test_name_comes_from_file_stem(self, tmp_path: Path) -> None:
        path = write_template(tmp_path, "form-review")
        assert parse_template_file(path).name == "form-review"

    def test_error_carries_path(self, tmp_path: Path) -> None:
        path = write_template(tmp_path, "broken", "just text")
        with pytest.raises(TemplateFormatError) as excinfo:
            parse_template_file(path)
        assert excinfo.value.path == path
        assert str(path) in str(excinfo.value)


class TestCommandTemplate:

    def _template(self) -> CommandTemplate:
        return parse_template(VALID_TEMPLATE, name="checkout-audit")

    def test_render_substitutes_placeholder(self) -> None:
        out = self._template().render("https://shop.example.com/cart")
        assert "https://shop.example.com/cart" in out
        assert "$ARGUMENTS" not in out

    def test_render_inserts_argument_verbatim(self) -> None:
        out = self._template().render(r"price $5 \1 \n")
        assert r"price $5 \1 \n" in out

    def test_frozen(self) -> None:
        t = self._template()
        with pytest.raises(Exception):
            t.agent = "someone-else"

    def test_to_markdown_parses_back(self) -> None:
        t = self._template()
        assert parse_template(t.to_markdown(), name=t.name) == t
