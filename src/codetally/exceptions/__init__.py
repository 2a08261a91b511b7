"""Exception hierarchy for codetally."""

from .analysis import (
    AnalysisError,
    FailureKind,
    FileAccessError,
    FileNotAccessibleError,
    LineCountError,
    ReadFailureError,
    SourceFileNotFoundError,
    UnsupportedLanguageError,
)
from .base import CodeTallyError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "CodeTallyError",
    "AnalysisError",
    "FailureKind",
    "FileAccessError",
    "LineCountError",
    "FileNotAccessibleError",
    "SourceFileNotFoundError",
    "ReadFailureError",
    "UnsupportedLanguageError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
