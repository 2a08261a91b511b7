"""Project dependency graph: resolution, construction, propagation."""

from .algorithms import propagate_dependencies
from .builder import build_dependency_graph, import_to_path, root_namespace_of
from .models import DependencyGraph
from .resolver import imports_namespace, resolve_direct_dependencies

__all__ = [
    "DependencyGraph",
    "build_dependency_graph",
    "import_to_path",
    "root_namespace_of",
    "imports_namespace",
    "resolve_direct_dependencies",
    "propagate_dependencies",
]
