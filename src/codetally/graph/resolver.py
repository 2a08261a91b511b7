"""Direct dependency resolution: imports -> root namespaces."""

from typing import Iterable, Sequence


def imports_namespace(import_name: str, namespace: str) -> bool:
    """True if ``import_name`` is ``namespace`` or lives below it."""
    return import_name == namespace or import_name.startswith(namespace + ".")


def resolve_direct_dependencies(
    imports: Iterable[str], namespaces: Sequence[str]
) -> set[str]:
    """Return the namespaces that at least one import falls under.

    Args:
        imports: Fully-qualified import names of one file
        namespaces: Candidate root namespaces (the file's own root excluded)

    Returns:
        Subset of ``namespaces``; scanning stops once all of them matched
    """
    dependencies: set[str] = set()
    if not namespaces:
        return dependencies

    for import_name in imports:
        for namespace in namespaces:
            if namespace not in dependencies and imports_namespace(import_name, namespace):
                dependencies.add(namespace)
        if len(dependencies) == len(namespaces):
            break
    return dependencies
