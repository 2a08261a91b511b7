"""Orchestration of one analysis run"""

from collections import defaultdict
from pathlib import Path
from typing import List, Optional, Union

from .config import AnalysisConfig, default_config
from .file_ops import discover_root_namespaces, validate_root_directory, walk_files
from .graph import build_dependency_graph, propagate_dependencies, root_namespace_of
from .logging_config import get_logger
from .models import AnalysisResult, FileReport
from .scanning import CountMode, extract_imports, get_language_config, measure_file

logger = get_logger(__name__)


class CodebaseAnalyzer:
    """Counts source lines and closes project dependencies for a tree.

    The first-level subdirectories of ``root_dir`` are the root namespaces;
    every file below ``root_dir`` is analyzed.
    """

    def __init__(
        self,
        root_dir: Union[str, Path],
        config: Optional[AnalysisConfig] = None,
    ):
        self.config = config or default_config
        self.root_dir = validate_root_directory(Path(root_dir))
        self.language = get_language_config(self.config.language)
        logger.debug(f"Initialized analyzer for {self.root_dir} ({self.language.name})")

    def analyze(self) -> AnalysisResult:
        """Run both passes and assemble the per-file reports."""
        cfg = self.config
        namespaces = discover_root_namespaces(self.root_dir, allow_hidden=cfg.allow_hidden_files)
        logger.info(f"Root namespaces: {', '.join(namespaces) or '(none)'}")

        files: List[Path] = list(
            walk_files(
                self.root_dir,
                exclude_patterns=cfg.exclude_patterns,
                follow_symlinks=cfg.follow_symlinks,
                allow_hidden=cfg.allow_hidden_files,
            )
        )

        # Pass 1: per-file extraction and resolution
        imports = {path: extract_imports(path, self.language, cfg.encoding) for path in files}
        graph = build_dependency_graph(
            imports, self.root_dir, namespaces, self.language.source_extension
        )

        # Pass 2: propagation over the whole graph
        closure = propagate_dependencies(graph)

        result = AnalysisResult(root_dir=self.root_dir, root_namespaces=namespaces)
        for path in files:
            result.reports[path] = self._report(
                path,
                sorted(closure.get(path, set())),
                sorted(graph.direct.get(path, set())),
                graph.imports[path],
                root_namespace_of(path, self.root_dir),
            )

        result.name_collisions = _find_name_collisions(files)
        for name, paths in result.name_collisions.items():
            logger.warning(f"File name {name!r} is shared by {len(paths)} files")

        failed = len(result.failed_files)
        logger.info(
            f"Analysis complete: {len(files)} files, {graph.edge_count} dependent edges, "
            f"{failed} unreadable"
        )
        return result

    def _report(
        self,
        path: Path,
        dependencies: List[str],
        direct: List[str],
        imports: List[str],
        namespace: Optional[str],
    ) -> FileReport:
        cfg = self.config
        source_lines = measure_file(path, self.language, CountMode.BASELINE, encoding=cfg.encoding)
        if not source_lines.ok:
            logger.warning(f"Cannot count lines of {path}: {source_lines.failure.name.lower()}")

        enhanced_lines = None
        if cfg.enhanced:
            enhanced_lines = measure_file(
                path,
                self.language,
                CountMode.ENHANCED,
                encoding=cfg.encoding,
                exclude_accessors=cfg.exclude_accessors,
            )

        return FileReport(
            path=path,
            source_lines=source_lines,
            enhanced_lines=enhanced_lines,
            dependencies=dependencies,
            direct_dependencies=direct,
            imports=list(imports),
            root_namespace=namespace,
        )


def _find_name_collisions(files: List[Path]) -> dict[str, List[Path]]:
    by_name: dict[str, List[Path]] = defaultdict(list)
    for path in files:
        by_name[path.name].append(path)
    return {name: paths for name, paths in by_name.items() if len(paths) > 1}
