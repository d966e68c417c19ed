"""
Template field substitution — fill an exercise template's declarations.

Templates declare their metadata inside a key-value block, one field
per line::

    \\exercisesetup{
        exSource = {section},
        exChapter = {1},
        exSection = {1.1},
        exNumber = {6},
        exVariant = {},
        exTitle = {Functions and Relations},
    }

Only the brace content of each declaration is rewritten. Every other
byte of the template comes through untouched. Replacement values are
inserted literally: a title containing ``\\1``, ``\\g<0>`` or braces is
written as-is.
"""

from __future__ import annotations

import logging
import re

from exgen.core.errors import FormatError
from exgen.core.models.exercise import ExerciseFields

logger = logging.getLogger(__name__)

# Template field name → ExerciseFields attribute
FIELD_NAMES: dict[str, str] = {
    "exSource": "source",
    "exChapter": "chapter",
    "exSection": "section",
    "exNumber": "number",
    "exVariant": "variant",
    "exTitle": "title",
}


def _declaration_pattern(name: str) -> re.Pattern[str]:
    return re.compile(
        rf"^(?P<head>[ \t]*{re.escape(name)}[ \t]*=[ \t]*\{{)"
        r"(?P<value>.*)"
        r"(?P<tail>\}[ \t]*,?[ \t]*\r?)$",
        re.MULTILINE,
    )


_PATTERNS: dict[str, re.Pattern[str]] = {
    name: _declaration_pattern(name) for name in FIELD_NAMES
}


def find_declarations(text: str) -> dict[str, list[str]]:
    """Current values of every field declaration, keyed by field name."""
    return {
        name: [m.group("value") for m in pattern.finditer(text)]
        for name, pattern in _PATTERNS.items()
    }


def substitute_field(text: str, name: str, value: str) -> str:
    """Replace the value of one field declaration.

    Raises:
        FormatError: If ``name`` is declared zero times or more than once.
    """
    pattern = _PATTERNS.get(name) or _declaration_pattern(name)

    def _replace(m: re.Match) -> str:
        return m.group("head") + value + m.group("tail")

    result, count = pattern.subn(_replace, text)
    if count == 0:
        raise FormatError(
            f"Template has no declaration for field '{name}' (expected '{name} = {{...}}')",
            field=name,
        )
    if count > 1:
        raise FormatError(
            f"Template declares field '{name}' {count} times; expected exactly one",
            field=name,
        )
    logger.debug("Substituted %s = {%s}", name, value)
    return result


def substitute_fields(text: str, fields: ExerciseFields) -> str:
    """Fill all six field declarations of a template."""
    for name, attr in FIELD_NAMES.items():
        text = substitute_field(text, name, getattr(fields, attr))
    return text
