"""Tests for direct dependency resolution."""

from codetally.graph.resolver import imports_namespace, resolve_direct_dependencies


class TestImportsNamespace:
    def test_prefix_on_dot_boundary(self):
        assert imports_namespace("alpha.core.Base", "alpha")

    def test_exact_name(self):
        assert imports_namespace("alpha", "alpha")

    def test_longer_segment_is_not_a_match(self):
        assert not imports_namespace("alphabet.Soup", "alpha")


class TestResolveDirectDependencies:
    def test_no_imports(self):
        assert resolve_direct_dependencies([], ["alpha", "beta"]) == set()

    def test_no_candidates(self):
        assert resolve_direct_dependencies(["alpha.A"], []) == set()

    def test_subset_of_candidates(self):
        imports = ["alpha.core.Base", "java.util.List", "alpha.core.Other"]
        assert resolve_direct_dependencies(imports, ["alpha", "beta"]) == {"alpha"}

    def test_all_candidates(self):
        imports = ["alpha.A", "beta.B", "gamma.C"]
        assert resolve_direct_dependencies(imports, ["alpha", "beta"]) == {"alpha", "beta"}

    def test_idempotent(self):
        imports = ["alpha.A", "beta.B", "java.io.File"]
        namespaces = ["alpha", "beta", "gamma"]
        first = resolve_direct_dependencies(imports, namespaces)
        second = resolve_direct_dependencies(imports, namespaces)
        assert first == second == {"alpha", "beta"}

    def test_stops_once_everything_matched(self):
        seen = []

        def imports():
            for name in ["alpha.A", "beta.B", "gamma.C"]:
                seen.append(name)
                yield name

        assert resolve_direct_dependencies(imports(), ["alpha"]) == {"alpha"}
        assert seen == ["alpha.A"]
