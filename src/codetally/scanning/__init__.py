"""Per-file scanners: imports, source lines, accessors."""

from .imports import extract_imports, extract_imports_from_lines
from .languages import LANGUAGES, LanguageConfig, get_language_config
from .lines import CountMode, LineCount, count_file_lines, count_source_lines, measure_file

__all__ = [
    "LANGUAGES",
    "LanguageConfig",
    "get_language_config",
    "extract_imports",
    "extract_imports_from_lines",
    "CountMode",
    "LineCount",
    "count_source_lines",
    "count_file_lines",
    "measure_file",
]
