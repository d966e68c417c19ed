"""
Generator configuration — loaded from exgen.yml, overridden by CLI flags.

Passed explicitly into every generation call; nothing reads the
current working directory or a hard-coded template path behind the
caller's back.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from exgen.core.data import DEFAULT_TEMPLATE

DEFAULT_PREFIX = "abramson-2021"


class GeneratorConfig(BaseModel):
    """Where templates come from and where exercises go."""

    prefix: str = DEFAULT_PREFIX
    template_path: Path | None = None
    default_template: Path = Field(default=DEFAULT_TEMPLATE)
    output_dir: Path = Field(default_factory=lambda: Path("."))
    overwrite: bool = False

    def resolved_template(self) -> Path:
        """The template in effect: explicit path, else the fallback."""
        return self.template_path if self.template_path is not None else self.default_template
