"""
Document file persistence — template reads and atomic output writes.

Output is rendered fully in memory by the caller and written here in
one step (write to temp file, then rename), so a failed generation
never leaves a partial document in the output directory.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from exgen.core.errors import OutputError, TemplateNotFoundError
from exgen.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)


def read_template(path: Path) -> str:
    """Load template text.

    Raises:
        TemplateNotFoundError: If ``path`` is not an existing file.
        OutputError: If the file exists but cannot be read.
    """
    try:
        exists = path.is_file()
    except OSError as e:
        raise OutputError(f"Cannot access template {path}: {e}", path=path) from e
    if not exists:
        raise TemplateNotFoundError(f"Template not found: {path}", path=path)

    logger.debug("Reading template %s", path)
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise OutputError(f"Cannot read template {path}: {e}", path=path) from e


def write_generated_file(file: GeneratedFile, root: Path | None = None) -> Path:
    """Write a generated document (atomic write).

    Args:
        file: The rendered document. Relative paths resolve against ``root``.
        root: Output root directory (default: the file path as given).

    Returns:
        The path that was written.

    Raises:
        OutputError: If the target exists and ``file.overwrite`` is False,
            or if the directory or file cannot be created.
    """
    target = Path(file.path)
    if root is not None and not target.is_absolute():
        target = root / target

    if target.exists() and not file.overwrite:
        raise OutputError(
            f"Refusing to overwrite existing file: {target} (use --force)", path=target
        )

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(f"Cannot create output directory {target.parent}: {e}", path=target.parent) from e

    # Atomic write: temp file in same directory, then rename
    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=target.parent,
            prefix=".exgen_",
            suffix=".tmp",
        )
    except OSError as e:
        raise OutputError(f"Cannot write to {target.parent}: {e}", path=target.parent) from e

    tmp = Path(tmp_path)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(file.content)
        # mkstemp creates 0600; documents are shared sources
        tmp.chmod(0o644)
        tmp.replace(target)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        logger.error("Failed to write %s: %s", target, e)
        raise OutputError(f"Cannot write {target}: {e}", path=target) from e

    logger.info("Wrote %s (%d bytes)", target, len(file.content.encode("utf-8")))
    return target
