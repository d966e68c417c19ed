"""
Tests for template field substitution.

Text in → text out. Everything outside the six declared values must be
preserved byte-for-byte, and values must be inserted literally.
"""

import textwrap

import pytest

from exgen.core.data import DEFAULT_TEMPLATE
from exgen.core.errors import FormatError
from exgen.core.models import ExerciseFields
from exgen.core.services.template_fields import (
    FIELD_NAMES,
    find_declarations,
    substitute_field,
    substitute_fields,
)

TEMPLATE = textwrap.dedent("""\
    \\documentclass{article}
    \\exercisesetup{
        exSource = {section},
        exChapter = {0},
        exSection = { },
        exNumber = {0},
        exVariant = {},
        exTitle = {Untitled},
    }
    % exTitle = {commented out}
    \\begin{document}
    \\end{document}
""")


@pytest.fixture
def fields() -> ExerciseFields:
    return ExerciseFields(
        source="section",
        chapter="1",
        section="1.1",
        number="6",
        variant="",
        title="Functions and Relations",
    )


class TestSubstituteFields:
    def test_all_fields_replaced(self, fields):
        out = substitute_fields(TEMPLATE, fields)
        assert "    exSource = {section},\n" in out
        assert "    exChapter = {1},\n" in out
        assert "    exSection = {1.1},\n" in out
        assert "    exNumber = {6},\n" in out
        assert "    exVariant = {},\n" in out
        assert "    exTitle = {Functions and Relations},\n" in out

    def test_rest_preserved(self, fields):
        out = substitute_fields(TEMPLATE, fields)
        expected = (
            TEMPLATE.replace("exChapter = {0}", "exChapter = {1}")
            .replace("exSection = { }", "exSection = {1.1}")
            .replace("exNumber = {0}", "exNumber = {6}")
            .replace("exTitle = {Untitled}", "exTitle = {Functions and Relations}")
        )
        assert out == expected

    def test_comment_lines_untouched(self, fields):
        out = substitute_fields(TEMPLATE, fields)
        assert "% exTitle = {commented out}" in out

    def test_crlf_preserved(self, fields):
        crlf = TEMPLATE.replace("\n", "\r\n")
        out = substitute_fields(crlf, fields)
        assert "    exTitle = {Functions and Relations},\r\n" in out
        assert out.count("\r\n") == crlf.count("\r\n")

    def test_bundled_template_has_every_field(self, fields):
        text = DEFAULT_TEMPLATE.read_text(encoding="utf-8")
        out = substitute_fields(text, fields)
        assert "exTitle = {Functions and Relations}" in out

    def test_single_space_section(self, fields):
        out = substitute_fields(TEMPLATE, fields.model_copy(update={"section": " "}))
        assert "exSection = { }," in out


class TestLiteralReplacement:
    @pytest.mark.parametrize("title", [
        r"Back\1slash",
        r"Group \g<0> ref",
        r"\frac{1}{2} and \textbf{bold}",
        "Dollar $x$ and brace }",
        r"Trailing backslash \\",
    ])
    def test_value_inserted_verbatim(self, title):
        out = substitute_field(TEMPLATE, "exTitle", title)
        assert f"    exTitle = {{{title}}},\n" in out

    def test_variant_parentheses(self, fields):
        out = substitute_fields(TEMPLATE, fields.model_copy(update={"variant": "(a)"}))
        assert "exVariant = {(a)}," in out


class TestMissingOrDuplicate:
    @pytest.mark.parametrize("name", list(FIELD_NAMES))
    def test_missing_declaration(self, fields, name):
        broken = "\n".join(line for line in TEMPLATE.splitlines() if f"    {name} =" not in line)
        with pytest.raises(FormatError, match=name) as exc:
            substitute_fields(broken, fields)
        assert exc.value.field == name

    def test_duplicate_declaration(self, fields):
        doubled = TEMPLATE.replace("    exNumber = {0},\n", "    exNumber = {0},\n    exNumber = {1},\n")
        with pytest.raises(FormatError, match="2 times"):
            substitute_fields(doubled, fields)

    def test_prefix_name_not_matched(self):
        text = "exSourceKind = {x},\n"
        with pytest.raises(FormatError):
            substitute_field(text, "exSource", "review")


class TestFindDeclarations:
    def test_reports_current_values(self):
        found = find_declarations(TEMPLATE)
        assert found["exTitle"] == ["Untitled"]
        assert found["exSection"] == [" "]
        assert set(found) == set(FIELD_NAMES)

    def test_reports_missing(self):
        found = find_declarations("nothing here\n")
        assert all(values == [] for values in found.values())
