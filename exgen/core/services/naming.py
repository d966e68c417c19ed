"""
Exercise naming — validation and the pure derivations built on it.

Turns ``ExerciseMetadata`` into:
  - a canonical filename, e.g. ``abramson-2021-sec-01-01-ex-06-functions-and-relations.tex``
  - the six template field values (``ExerciseFields``)

Everything here is side-effect free. Same metadata in, same strings out.
"""

from __future__ import annotations

import re
import unicodedata

from exgen.core.errors import FormatError, ValidationError
from exgen.core.models.config import DEFAULT_PREFIX
from exgen.core.models.exercise import ExerciseFields, ExerciseMetadata, SourceKind

_SLUG_JUNK = re.compile(r"[^a-z0-9]+")
_SECTION_SEP = re.compile(r"[.-]")
_DIGITS = re.compile(r"[0-9]+")
_VARIANT = re.compile(r"[a-z]")

FILE_SUFFIX = ".tex"


# ── Normalizers ─────────────────────────────────────────────────


def pad2(value: int) -> str:
    """Render an integer as at least two zero-padded digits."""
    return f"{value:02d}"


def normalize_slug(slug: str) -> str:
    """Lowercase kebab-case: runs of non-alphanumerics collapse to one hyphen.

    Accented letters are folded to ASCII first (``"Möbius"`` → ``"mobius"``);
    letters with no ASCII decomposition count as separators.
    """
    decomposed = unicodedata.normalize("NFKD", slug)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _SLUG_JUNK.sub("-", stripped.lower()).strip("-")


def normalize_variant(variant: str | None) -> tuple[str, str]:
    """Return ``(display, suffix)`` for a variant letter.

    ``"a"``, ``"A"``, ``"(a)"`` and ``"(A)"`` all give ``("(a)", "a")``.
    An absent or blank variant gives ``("", "")``.

    Raises:
        ValidationError: If the value is not a single letter.
    """
    if variant is None or not variant.strip():
        return "", ""

    letter = variant.strip().strip("()").strip().lower()
    if not _VARIANT.fullmatch(letter):
        raise ValidationError(
            f"Invalid variant {variant!r}: expected a single letter such as 'a' or '(a)'",
            field="variant",
        )
    return f"({letter})", letter


def split_section(section: str) -> tuple[int, int]:
    """Parse a ``"<int>.<int>"`` section id (``-`` also accepted).

    Raises:
        FormatError: Unless the value splits into exactly two numeric parts.
    """
    parts = _SECTION_SEP.split(section.strip())
    if len(parts) < 2:
        raise FormatError(
            f"Malformed section {section!r}: expected two components like '1.1'",
            field="section",
        )
    if len(parts) > 2:
        raise FormatError(
            f"Malformed section {section!r}: expected exactly two components, got {len(parts)}",
            field="section",
        )
    for part in parts:
        if not _DIGITS.fullmatch(part):
            raise FormatError(
                f"Malformed section {section!r}: component {part!r} is not a number",
                field="section",
            )
    return int(parts[0]), int(parts[1])


# ── Validation ──────────────────────────────────────────────────


def validate_metadata(meta: ExerciseMetadata) -> None:
    """Reject metadata that cannot produce a well-formed exercise.

    Raises:
        ValidationError: Missing or out-of-range field.
        FormatError: Section id present but malformed.
    """
    if meta.chapter < 1:
        raise ValidationError(
            f"chapter must be a positive integer, got {meta.chapter}", field="chapter"
        )
    if meta.number < 1:
        raise ValidationError(
            f"number must be a positive integer, got {meta.number}", field="number"
        )

    if meta.source == SourceKind.SECTION:
        if not meta.section or not meta.section.strip():
            raise ValidationError(
                "section is required when source is 'section' (e.g. --section 1.1)",
                field="section",
            )
        split_section(meta.section)

    if not normalize_slug(meta.slug):
        raise ValidationError(
            f"slug {meta.slug!r} has no letters or digits", field="slug"
        )

    normalize_variant(meta.variant)


# ── Derivations ─────────────────────────────────────────────────


def title_from_slug(slug: str) -> str:
    """``"functions-and-relations"`` → ``"Functions And Relations"``."""
    return " ".join(tok[0].upper() + tok[1:] for tok in slug.split("-") if tok)


def resolve_title(meta: ExerciseMetadata) -> str:
    """The explicit title, or one derived from the normalized slug."""
    if meta.title:
        return meta.title
    return title_from_slug(normalize_slug(meta.slug))


def exercise_filename(meta: ExerciseMetadata, prefix: str = DEFAULT_PREFIX) -> str:
    """Derive the canonical filename for an exercise."""
    number = pad2(meta.number)
    _, suffix = normalize_variant(meta.variant)
    slug = normalize_slug(meta.slug)

    if meta.source == SourceKind.SECTION:
        sec_a, sec_b = split_section(meta.section or "")
        stem = f"{prefix}-sec-{pad2(sec_a)}-{pad2(sec_b)}-ex-{number}{suffix}-{slug}"
    else:
        stem = f"{prefix}-ch-{pad2(meta.chapter)}-review-ex-{number}{suffix}-{slug}"

    return stem + FILE_SUFFIX


def exercise_fields(meta: ExerciseMetadata) -> ExerciseFields:
    """Values for the template's six field declarations.

    Section is a single space when not applicable; variant is empty
    when absent.
    """
    display, _ = normalize_variant(meta.variant)

    if meta.source == SourceKind.SECTION:
        sec_a, sec_b = split_section(meta.section or "")
        section = f"{sec_a}.{sec_b}"
    else:
        section = " "

    return ExerciseFields(
        source=meta.source.value,
        chapter=str(meta.chapter),
        section=section,
        number=str(meta.number),
        variant=display,
        title=resolve_title(meta),
    )
