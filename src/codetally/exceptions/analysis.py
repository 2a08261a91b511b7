"""Analysis-related exceptions: file access, line counting, languages."""

from enum import Enum
from pathlib import Path
from typing import List

from .base import CodeTallyError


class FailureKind(Enum):
    """Why a file could not be line-counted.

    The value is the legacy sentinel emitted where an integer count is
    expected (tables, CSV).
    """

    NOT_ACCESSIBLE = -42
    NOT_FOUND = -37
    READ_FAILURE = -73

    @property
    def sentinel(self) -> int:
        return self.value


class AnalysisError(CodeTallyError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class LineCountError(FileAccessError):
    """A file could not be line-counted. ``kind`` says why."""

    kind: FailureKind = FailureKind.READ_FAILURE


class FileNotAccessibleError(LineCountError):
    """The file exists but may not be read (permissions)."""

    kind = FailureKind.NOT_ACCESSIBLE


class SourceFileNotFoundError(LineCountError):
    """The file vanished between discovery and reading."""

    kind = FailureKind.NOT_FOUND


class ReadFailureError(LineCountError):
    """Any other I/O failure while reading."""

    kind = FailureKind.READ_FAILURE


class UnsupportedLanguageError(AnalysisError):
    """Raised when attempting to analyze an unsupported language."""

    def __init__(self, language: str, supported_languages: List[str]):
        super().__init__(
            f"Unsupported language: {language}",
            details={"language": language, "supported": ", ".join(supported_languages)},
        )
        self.language = language
        self.supported_languages = supported_languages
