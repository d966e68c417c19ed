"""
Config check use case — validate exgen.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from exgen.core.config.loader import find_config_file, load_config
from exgen.core.errors import ConfigError, ExerciseError
from exgen.core.models.config import GeneratorConfig
from exgen.core.persistence.document_file import read_template
from exgen.core.services.naming import normalize_slug
from exgen.core.services.template_fields import find_declarations


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: GeneratorConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "prefix": self.config.prefix if self.config else None,
            "template": str(self.config.resolved_template()) if self.config else None,
            "output_dir": str(self.config.output_dir) if self.config else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate generator configuration and the template it points at.

    Args:
        config_path: Optional explicit path to exgen.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
    if config_path is None:
        result.warnings.append("No exgen.yml found; using built-in defaults.")
    result.config_path = config_path

    try:
        config = load_config(config_path)
        result.config = config
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    if normalize_slug(config.prefix) != config.prefix:
        result.warnings.append(
            f"Prefix '{config.prefix}' is not lowercase kebab-case; "
            f"filenames will not match '{normalize_slug(config.prefix)}'."
        )

    # The template must exist and declare each field exactly once
    template = config.resolved_template()
    try:
        text = read_template(template)
    except ExerciseError as e:
        result.errors.append(str(e))
        return result

    for name, values in find_declarations(text).items():
        if not values:
            result.errors.append(f"Template {template} has no declaration for '{name}'")
        elif len(values) > 1:
            result.errors.append(f"Template {template} declares '{name}' {len(values)} times")

    if config.output_dir.exists() and not config.output_dir.is_dir():
        result.errors.append(f"Output path {config.output_dir} exists but is not a directory")

    result.valid = len(result.errors) == 0
    return result
