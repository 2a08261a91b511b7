"""Dependency graph construction from import declarations."""

from pathlib import Path
from typing import Optional, Sequence

from ..logging_config import get_logger
from .models import DependencyGraph
from .resolver import resolve_direct_dependencies

logger = get_logger(__name__)


def build_dependency_graph(
    imports: dict[Path, list[str]],
    root_dir: Path,
    namespaces: Sequence[str],
    source_extension: str = ".java",
) -> DependencyGraph:
    """Build the dependency graph of a tree.

    Args:
        imports: Every known file mapped to its extracted import names
        root_dir: Root of the analyzed tree; imports resolve relative to it
        namespaces: Root namespaces (first-level directories of ``root_dir``)
        source_extension: Appended to a dotted import to find the imported file

    Imports that resolve to a path outside the known file set add no
    dependent edge.
    """
    direct: dict[Path, set[str]] = {}
    dependents: dict[Path, list[Path]] = {p: [] for p in imports}
    edge_count = 0

    for path, file_imports in imports.items():
        own = root_namespace_of(path, root_dir)
        others = [ns for ns in namespaces if ns != own]
        direct[path] = resolve_direct_dependencies(file_imports, others)

        for imp in file_imports:
            resolved = import_to_path(imp, root_dir, source_extension)
            if resolved is None or resolved == path or resolved not in dependents:
                continue
            dependents[resolved].append(path)
            edge_count += 1

    logger.debug(f"Dependency graph: {len(direct)} files, {edge_count} dependent edges")
    return DependencyGraph(
        direct=direct,
        dependents=dependents,
        imports=dict(imports),
        edge_count=edge_count,
    )


def root_namespace_of(path: Path, root_dir: Path) -> Optional[str]:
    """First directory below ``root_dir`` that contains ``path``.

    None for files directly in ``root_dir`` or outside of it.
    """
    try:
        parts = path.relative_to(root_dir).parts
    except ValueError:
        return None
    if len(parts) < 2:
        return None
    return parts[0]


def import_to_path(import_name: str, root_dir: Path, source_extension: str) -> Optional[Path]:
    """Map ``a.b.C`` to ``<root_dir>/a/b/C<ext>``."""
    parts = [p for p in import_name.split(".") if p]
    if not parts:
        return None
    return root_dir.joinpath(*parts[:-1], parts[-1] + source_extension)
