"""Graph algorithms: dependency propagation along dependent edges."""

from pathlib import Path

from .models import DependencyGraph


def propagate_dependencies(graph: DependencyGraph) -> dict[Path, set[str]]:
    """Compute the closed dependency set of every file.

    A file's direct dependencies are pushed onto every file that imports it,
    then onto the files importing those, and so on: if A is imported by B
    and B by C, A's direct set ends up in B's and C's closure. Each file's
    closure also contains its own direct set.

    Uses an explicit stack and a visited set per propagation root, so import
    cycles terminate and deep chains do not hit the recursion limit.
    """
    closure: dict[Path, set[str]] = {node: set(deps) for node, deps in graph.direct.items()}

    for source, deps in graph.direct.items():
        if not deps:
            continue
        visited: set[Path] = {source}
        stack: list[Path] = list(graph.dependents.get(source, []))
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            closure.setdefault(node, set()).update(deps)
            stack.extend(n for n in graph.dependents.get(node, []) if n not in visited)

    return closure
