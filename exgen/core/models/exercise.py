"""
Exercise metadata — the caller-supplied description of one exercise.

Constructed per invocation, validated once, consumed to produce a
filename and a rendered document, then discarded.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator


class SourceKind(StrEnum):
    """Where an exercise originates."""

    SECTION = "section"
    REVIEW = "review"


class ExerciseMetadata(BaseModel):
    """Raw metadata for a single exercise.

    Only types are enforced here. Cross-field rules (section required
    for section exercises, positive numbers) live in
    ``exgen.core.services.naming.validate_metadata``.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    source: SourceKind
    chapter: int
    section: str | None = None
    number: int
    variant: str | None = None
    slug: str
    title: str | None = None

    @field_validator("chapter", "number", mode="before")
    @classmethod
    def reject_bool(cls, value: object) -> object:
        # bool is an int subclass
        if isinstance(value, bool):
            raise ValueError("expected an integer, got a boolean")
        return value


class ExerciseFields(BaseModel):
    """The six values written into a template's field declarations."""

    model_config = ConfigDict(frozen=True)

    source: str
    chapter: str
    section: str
    number: str
    variant: str
    title: str
