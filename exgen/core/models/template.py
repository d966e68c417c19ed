"""
Generated file model — used by all generators.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A document produced by a generator, not yet written.

    Attributes:
        path:      Output path (relative to the output root, or absolute).
        content:   Full rendered file content.
        overwrite: Whether to replace the file if it already exists.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    overwrite: bool = False
    reason: str = ""
