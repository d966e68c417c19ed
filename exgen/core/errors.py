"""
Error hierarchy for exercise generation.

Every failure surfaced to a caller derives from ``ExerciseError`` and
names the offending metadata field or filesystem path, so the CLI can
report it without inspecting the traceback.
"""

from __future__ import annotations

from pathlib import Path


class ExerciseError(Exception):
    """Base class for all generation failures."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        path: Path | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.path = path

    def to_dict(self) -> dict:
        return {
            "kind": type(self).__name__,
            "error": self.message,
            "field": self.field,
            "path": str(self.path) if self.path else None,
        }


class ValidationError(ExerciseError):
    """A required field is missing or out of range."""


class FormatError(ExerciseError):
    """A structured value (section id, template declaration) is malformed."""


class TemplateNotFoundError(ExerciseError):
    """The template file does not exist."""


class OutputError(ExerciseError):
    """The destination directory or file cannot be created or written."""


class ConfigError(ExerciseError):
    """Raised when exgen.yml is invalid or missing."""
