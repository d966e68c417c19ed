"""
Bundled static data — the default exercise template.
"""

from __future__ import annotations

from pathlib import Path

_DATA_DIR = Path(__file__).parent

DEFAULT_TEMPLATE = _DATA_DIR / "exercise_template.tex"
