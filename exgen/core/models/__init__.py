"""
Domain models — Pydantic types for exercise generation.

All models are re-exported here for convenient access:

    from exgen.core.models import ExerciseMetadata, GeneratorConfig, GeneratedFile
"""

from exgen.core.models.config import DEFAULT_PREFIX, GeneratorConfig
from exgen.core.models.exercise import ExerciseFields, ExerciseMetadata, SourceKind
from exgen.core.models.template import GeneratedFile

__all__ = [
    # config.py
    "DEFAULT_PREFIX",
    "GeneratorConfig",
    # exercise.py
    "ExerciseFields",
    "ExerciseMetadata",
    "SourceKind",
    # template.py
    "GeneratedFile",
]
