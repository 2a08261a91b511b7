"""
codetally - source line counts and project dependencies for source trees

For every file below a source root, codetally counts source lines (blank
lines and comments excluded; an enhanced count also drops block comments
and trivial getters/setters) and lists the projects, i.e. first-level
directories of the root, the file depends on through its imports and the
imports of the files it imports.
"""

__version__ = "0.1.0"

from .api import analyze  # noqa: E402
from .models import AnalysisResult, FileReport  # noqa: E402
from .scanning.lines import LineCount  # noqa: E402

__all__ = [
    "analyze",
    "AnalysisResult",
    "FileReport",
    "LineCount",
]
