"""Public API for codetally.

Example:
    >>> from codetally import analyze
    >>>
    >>> result = analyze("src/main/java")
    >>> for name, report in result.by_name().items():
    ...     print(name, report.source_lines, report.dependencies)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .config import load_config
from .core import CodebaseAnalyzer
from .logging_config import get_logger
from .models import AnalysisResult

logger = get_logger(__name__)


def analyze(
    path: Union[str, Path] = ".",
    config_file: Optional[Path] = None,
    **overrides,
) -> AnalysisResult:
    """Analyze a source tree.

    1. Load configuration (auto-discover TOML + apply overrides)
    2. Walk the tree and extract imports and direct dependencies
    3. Propagate dependencies along the dependent graph
    4. Count source lines per file

    Args:
        path: Root of the tree; its first-level directories are the roots
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g., enhanced=False)

    Returns:
        AnalysisResult with one FileReport per file

    Raises:
        CodeTallyError: If configuration or the root path is invalid
    """
    config = load_config(config_file=config_file, **overrides)
    logger.debug(f"Loaded config: {config}")
    return CodebaseAnalyzer(path, config=config).analyze()
