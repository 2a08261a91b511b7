"""Import extraction: one fully-qualified name per matching import line."""

import re
from functools import lru_cache
from pathlib import Path
from typing import Iterable

from ..logging_config import get_logger
from .languages import LanguageConfig

logger = get_logger(__name__)


@lru_cache(maxsize=None)
def _import_regex(pattern: str) -> "re.Pattern[str]":
    return re.compile(pattern)


def extract_imports_from_lines(lines: Iterable[str], config: LanguageConfig) -> list[str]:
    """Return imported names in file order.

    Only lines that consist of a single import statement match; wildcard and
    static imports do not.
    """
    regex = _import_regex(config.import_pattern)
    imports: list[str] = []
    for line in lines:
        match = regex.match(line.rstrip("\r\n"))
        if match:
            imports.append(match.group(1))
    return imports


def extract_imports(filepath: Path, config: LanguageConfig, encoding: str = "utf-8") -> list[str]:
    """Read ``filepath`` and extract its imports.

    An unreadable file yields no imports; the failure is only logged.
    """
    try:
        with open(filepath, encoding=encoding, errors="replace") as f:
            return extract_imports_from_lines(f, config)
    except OSError as e:
        logger.debug(f"No imports read from {filepath}: {e}")
        return []
