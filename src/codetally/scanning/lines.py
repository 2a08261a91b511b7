"""Source line counting.

A small per-line state machine decides for every physical line whether it
is a source line. Two modes exist:

- baseline: blank lines and lines that are only a line comment are dropped.
- enhanced: additionally drops block comments and, optionally, trivial
  getters/setters.

Multi-line string literals (text blocks) are tracked in both modes so that
their content is never mistaken for comments. Each physical line adds at
most one to the count, and the enhanced scan only counts lines the
baseline scan counts too.
"""

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional

from ..exceptions import (
    FailureKind,
    FileNotAccessibleError,
    LineCountError,
    ReadFailureError,
    SourceFileNotFoundError,
)
from .accessors import find_accessor_lines
from .languages import LanguageConfig


class CountMode(Enum):
    BASELINE = "baseline"
    ENHANCED = "enhanced"


@dataclass(frozen=True)
class LineCount:
    """Outcome of counting one file: a count or the reason there is none."""

    value: Optional[int] = None
    failure: Optional[FailureKind] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def as_int(self) -> int:
        """The count, or the failure's legacy negative sentinel."""
        if self.failure is not None:
            return self.failure.sentinel
        return self.value or 0

    @classmethod
    def failed(cls, kind: FailureKind) -> "LineCount":
        return cls(value=None, failure=kind)

    def __str__(self) -> str:
        return str(self.as_int())


@dataclass(frozen=True)
class _Patterns:
    text_block_start: "re.Pattern[str]"
    block_comment_start: "re.Pattern[str]"
    block_comment_end: "re.Pattern[str]"


@lru_cache(maxsize=None)
def _patterns(config: LanguageConfig) -> _Patterns:
    line_comment = re.escape(config.line_comment)
    block_open = re.escape(config.block_comment_open)
    block_close = re.escape(config.block_comment_close)
    delimiter = re.escape(config.text_block_delimiter)
    # The opener may not be glued to a preceding character of the line
    # comment marker ("//*" is a line comment).
    glued = re.escape(config.line_comment[-1])
    return _Patterns(
        text_block_start=re.compile(rf"(?:(?!{line_comment}|{block_open}).)*{delimiter}.*"),
        block_comment_start=re.compile(
            rf"(?:(?:(?!{line_comment}).)*[^{glued}]|)(?P<open>{block_open}).*"
        ),
        block_comment_end=re.compile(rf".*(?P<close>{block_close}).*"),
    )


class _LineClassifier:
    """Scan state of one pass over a file.

    With ``strip_block_comments`` off only text blocks are tracked, which is
    the baseline behaviour.
    """

    def __init__(self, config: LanguageConfig, strip_block_comments: bool):
        self._config = config
        self._patterns = _patterns(config)
        self._strip_block_comments = strip_block_comments
        self.in_text_block = False
        self.in_block_comment = False
        # whether the last classified line belonged to a text block
        self.string_line = False

    def classify(self, line: str) -> bool:
        """Advance over the trimmed ``line``; True if it is a source line."""
        patterns = self._patterns
        counted = False
        first_line = False
        opened_here = None
        self.string_line = self.in_text_block

        if not self.in_text_block and not self.in_block_comment:
            if patterns.text_block_start.fullmatch(line):
                self.in_text_block = True
                self.string_line = True
                first_line = True
            elif self._strip_block_comments:
                opened_here = patterns.block_comment_start.fullmatch(line)
                if opened_here:
                    self.in_block_comment = True
                    # code precedes the comment
                    counted = opened_here.start("open") != 0

        is_line_comment = line.startswith(self._config.line_comment) and not self.in_text_block
        if not self.in_block_comment and line and not is_line_comment:
            counted = True

        if self.in_text_block and not first_line and self._config.text_block_delimiter in line:
            self.in_text_block = False

        if self.in_block_comment:
            closed_here = patterns.block_comment_end.fullmatch(line)
            # "/**/" shares its "*" between opener and close and stays open
            if closed_here and not (
                opened_here is not None and closed_here.start("close") == opened_here.end("open")
            ):
                self.in_block_comment = False
                # one trailing character after the close marker, e.g. "*/}"
                if closed_here.end("close") == len(line) - 1:
                    counted = True

        return counted


def count_source_lines(
    lines: Iterable[str],
    config: LanguageConfig,
    mode: CountMode = CountMode.BASELINE,
    exclude_accessors: bool = True,
) -> int:
    """Count the source lines among ``lines``.

    In ENHANCED mode the baseline scan runs alongside the block-comment
    aware one, and a line counts only when both scans count it.

    Args:
        lines: Physical lines of one file, in order
        config: Language markers (comments, text blocks, accessors)
        mode: BASELINE or ENHANCED
        exclude_accessors: In ENHANCED mode, also drop trivial getters/setters

    Returns:
        Non-negative number of source lines
    """
    baseline = _LineClassifier(config, strip_block_comments=False)
    enhanced = None
    if mode is CountMode.ENHANCED:
        enhanced = _LineClassifier(config, strip_block_comments=True)

    trimmed: list[str] = []
    code_lines: list[int] = []
    count = 0

    for index, raw in enumerate(lines):
        line = raw.strip()
        trimmed.append(line)
        counted = baseline.classify(line)
        if enhanced is not None:
            counted = enhanced.classify(line) and counted
        if not counted:
            continue
        count += 1
        if enhanced is not None and not enhanced.string_line:
            code_lines.append(index)

    if enhanced is not None and exclude_accessors and code_lines:
        count -= len(find_accessor_lines(trimmed, code_lines, config))

    return count


def count_file_lines(
    filepath: Path,
    config: LanguageConfig,
    mode: CountMode = CountMode.BASELINE,
    encoding: str = "utf-8",
    exclude_accessors: bool = True,
) -> int:
    """Read ``filepath`` and count its source lines.

    The handle is opened for the duration of the read only.

    Raises:
        FileNotAccessibleError: Permission denied
        SourceFileNotFoundError: The file does not exist
        ReadFailureError: Any other I/O failure
    """
    try:
        with open(filepath, encoding=encoding, errors="replace") as f:
            return count_source_lines(f, config, mode, exclude_accessors=exclude_accessors)
    except PermissionError as e:
        raise FileNotAccessibleError(filepath, f"Permission denied: {e}")
    except FileNotFoundError as e:
        raise SourceFileNotFoundError(filepath, f"File not found: {e}")
    except OSError as e:
        raise ReadFailureError(filepath, f"OS error: {e}")


def measure_file(
    filepath: Path,
    config: LanguageConfig,
    mode: CountMode = CountMode.BASELINE,
    encoding: str = "utf-8",
    exclude_accessors: bool = True,
) -> LineCount:
    """Like :func:`count_file_lines` but folds failures into a ``LineCount``."""
    try:
        return LineCount(
            value=count_file_lines(
                filepath, config, mode, encoding=encoding, exclude_accessors=exclude_accessors
            )
        )
    except LineCountError as e:
        return LineCount.failed(e.kind)
