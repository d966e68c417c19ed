"""
Exercise generator — produce a new exercise document from a template.

Pipeline:
    raw values → ExerciseMetadata → validate → filename
               → read template → substitute fields → write (atomic)

``plan_exercise`` stops before the write and is what ``--dry-run`` uses.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from exgen.core.errors import ValidationError
from exgen.core.models.config import GeneratorConfig
from exgen.core.models.exercise import ExerciseMetadata
from exgen.core.models.template import GeneratedFile
from exgen.core.persistence.document_file import read_template, write_generated_file
from exgen.core.services.naming import exercise_fields, exercise_filename, validate_metadata
from exgen.core.services.template_fields import substitute_fields

logger = logging.getLogger(__name__)


def build_metadata(**values: Any) -> ExerciseMetadata:
    """Construct ``ExerciseMetadata`` from loose caller input.

    Type errors are reported as ``ValidationError`` naming the first
    offending field.
    """
    try:
        return ExerciseMetadata.model_validate(values)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first.get("loc", ())) or None
        raise ValidationError(
            f"Invalid {field or 'metadata'}: {first.get('msg', e)}", field=field
        ) from e


def plan_exercise(meta: ExerciseMetadata, config: GeneratorConfig) -> GeneratedFile:
    """Render an exercise in memory without touching the output directory.

    Returns:
        GeneratedFile whose ``path`` is the full output path.

    Raises:
        ValidationError, FormatError: Bad metadata or template declarations.
        TemplateNotFoundError: Template file missing.
    """
    validate_metadata(meta)

    filename = exercise_filename(meta, prefix=config.prefix)
    template = config.resolved_template()
    logger.info("Generating %s from %s", filename, template)

    text = read_template(template)
    content = substitute_fields(text, exercise_fields(meta))

    return GeneratedFile(
        path=str(Path(config.output_dir) / filename),
        content=content,
        overwrite=config.overwrite,
        reason=f"New {meta.source.value} exercise from {template.name}",
    )


def generate_exercise(meta: ExerciseMetadata, config: GeneratorConfig) -> GeneratedFile:
    """Render an exercise and write it to the configured output directory.

    Returns:
        The written GeneratedFile (``path`` is the written location).

    Raises:
        Everything ``plan_exercise`` raises, plus OutputError when the
        destination cannot be written.
    """
    planned = plan_exercise(meta, config)
    written = write_generated_file(planned)
    return planned.model_copy(update={"path": str(written)})
