"""Data models for the project dependency graph."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class DependencyGraph:
    """Import relationships between the files of one tree.

    ``direct[F]`` holds the root namespaces F imports from (never F's own
    root). ``dependents[B]`` lists the files that import something resolving
    to B, in discovery order. ``imports[F]`` keeps F's extracted import names.
    """

    direct: dict[Path, set[str]] = field(default_factory=dict)
    dependents: dict[Path, list[Path]] = field(default_factory=dict)
    imports: dict[Path, list[str]] = field(default_factory=dict)
    edge_count: int = 0
