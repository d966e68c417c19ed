"""
Shared test fixtures and configuration.
"""

import logging
import shutil
from pathlib import Path

import pytest

from exgen.core.data import DEFAULT_TEMPLATE
from exgen.core.models import ExerciseMetadata, GeneratorConfig, SourceKind


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    """A private copy of the bundled template."""
    path = tmp_path / "templates" / "exercise.tex"
    path.parent.mkdir()
    shutil.copyfile(DEFAULT_TEMPLATE, path)
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Output directory (not yet created)."""
    return tmp_path / "out" / "chapter-01"


@pytest.fixture
def generator_config(template_file: Path, output_dir: Path) -> GeneratorConfig:
    return GeneratorConfig(template_path=template_file, output_dir=output_dir)


@pytest.fixture
def section_meta() -> ExerciseMetadata:
    return ExerciseMetadata(
        source=SourceKind.SECTION,
        chapter=1,
        section="1.1",
        number=6,
        slug="functions-and-relations",
        title="Functions and Relations",
    )


@pytest.fixture
def review_meta() -> ExerciseMetadata:
    return ExerciseMetadata(
        source=SourceKind.REVIEW,
        chapter=1,
        number=1,
        variant="a",
        slug="determine-function",
        title="Review - Function or Not",
    )


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory so no stray exgen.yml is discovered."""
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)
