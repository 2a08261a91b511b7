"""Integration tests for CodebaseAnalyzer and the public analyze() API."""

import pytest

from codetally import analyze
from codetally.config import AnalysisConfig
from codetally.core import CodebaseAnalyzer
from codetally.exceptions import FailureKind, InvalidPathError, UnsupportedLanguageError


def _reports(result):
    return {p.relative_to(result.root_dir).as_posix(): r for p, r in result.reports.items()}


class TestSampleProject:
    @pytest.fixture
    def result(self, sample_project):
        return CodebaseAnalyzer(sample_project).analyze()

    def test_root_namespaces(self, result):
        assert result.root_namespaces == ["alpha", "beta", "gamma"]

    def test_every_file_reported(self, result):
        assert sorted(_reports(result)) == [
            "alpha/core/Base.java",
            "beta/app/App.java",
            "beta/service/Service.java",
            "gamma/util/Strings.java",
        ]

    def test_line_counts(self, result):
        reports = _reports(result)
        counts = {
            rel: (r.source_lines.as_int(), r.enhanced_lines.as_int())
            for rel, r in reports.items()
        }
        assert counts == {
            "alpha/core/Base.java": (17, 8),
            "beta/app/App.java": (11, 11),
            "beta/service/Service.java": (6, 6),
            "gamma/util/Strings.java": (4, 4),
        }

    def test_direct_dependencies(self, result):
        reports = _reports(result)
        assert reports["alpha/core/Base.java"].direct_dependencies == ["gamma"]
        assert reports["beta/service/Service.java"].direct_dependencies == ["alpha"]
        assert reports["beta/app/App.java"].direct_dependencies == []
        assert reports["gamma/util/Strings.java"].direct_dependencies == []

    def test_closed_dependencies(self, result):
        reports = _reports(result)
        assert reports["alpha/core/Base.java"].dependencies == ["gamma"]
        assert reports["beta/service/Service.java"].dependencies == ["alpha", "gamma"]
        assert reports["beta/app/App.java"].dependencies == ["alpha", "gamma"]
        assert reports["gamma/util/Strings.java"].dependencies == []

    def test_direct_is_subset_of_closure(self, result):
        for report in result.reports.values():
            assert set(report.direct_dependencies) <= set(report.dependencies)

    def test_imports_and_namespace_recorded(self, result):
        service = _reports(result)["beta/service/Service.java"]
        assert service.imports == ["alpha.core.Base", "java.util.List"]
        assert service.root_namespace == "beta"

    def test_enhanced_never_exceeds_baseline(self, result):
        for report in result.reports.values():
            assert report.enhanced_lines.as_int() <= report.source_lines.as_int()

    def test_by_name(self, result):
        assert sorted(result.by_name()) == ["App.java", "Base.java", "Service.java", "Strings.java"]
        assert result.name_collisions == {}


class TestConfiguration:
    def test_enhanced_disabled(self, sample_project):
        result = CodebaseAnalyzer(sample_project, AnalysisConfig(enhanced=False)).analyze()
        assert all(r.enhanced_lines is None for r in result.reports.values())

    def test_accessors_kept(self, sample_project):
        config = AnalysisConfig(exclude_accessors=False)
        result = CodebaseAnalyzer(sample_project, config).analyze()
        assert _reports(result)["alpha/core/Base.java"].enhanced_lines.as_int() == 14

    def test_exclude_patterns(self, sample_project):
        config = AnalysisConfig(exclude_patterns=["Service.java"])
        result = CodebaseAnalyzer(sample_project, config).analyze()
        reports = _reports(result)
        assert "beta/service/Service.java" not in reports
        # the chain through Service is gone
        assert reports["beta/app/App.java"].dependencies == []

    def test_unknown_language(self, sample_project):
        with pytest.raises(UnsupportedLanguageError):
            CodebaseAnalyzer(sample_project, AnalysisConfig(language="cobol"))

    def test_invalid_root(self, tmp_path):
        with pytest.raises(InvalidPathError):
            CodebaseAnalyzer(tmp_path / "missing")


class TestEdgeCases:
    def test_name_collisions_are_reported(self, make_tree):
        root = make_tree(
            {
                "alpha/Util.java": "import beta.Other;\nclass Util {}\n",
                "beta/Util.java": "class Util {}\n",
                "beta/Other.java": "class Other {}\n",
            }
        )
        result = CodebaseAnalyzer(root).analyze()
        assert len(result.reports) == 3
        assert list(result.name_collisions) == ["Util.java"]
        collided = [p.relative_to(result.root_dir).as_posix() for p in result.name_collisions["Util.java"]]
        assert collided == ["alpha/Util.java", "beta/Util.java"]
        # legacy view keeps the file walked last
        assert result.by_name()["Util.java"].root_namespace == "beta"

    def test_cyclic_imports_terminate(self, make_tree):
        root = make_tree(
            {
                "alpha/A.java": "import beta.B;\nimport gamma.G;\nclass A {}\n",
                "beta/B.java": "import alpha.A;\nclass B {}\n",
                "gamma/G.java": "class G {}\n",
            }
        )
        reports = _reports(CodebaseAnalyzer(root).analyze())
        # B imports A and A imports B, so each inherits the other's direct set
        assert reports["alpha/A.java"].dependencies == ["alpha", "beta", "gamma"]
        assert reports["beta/B.java"].dependencies == ["alpha", "beta", "gamma"]

    def test_empty_files(self, make_tree):
        root = make_tree({"alpha/Empty.java": ""})
        report = _reports(CodebaseAnalyzer(root).analyze())["alpha/Empty.java"]
        assert report.source_lines.as_int() == 0
        assert report.enhanced_lines.as_int() == 0
        assert report.dependencies == []

    def test_unreadable_file_does_not_stop_the_run(self, sample_project, monkeypatch):
        import codetally.core as core

        real_walk = core.walk_files
        ghost = sample_project.resolve() / "alpha" / "Ghost.java"

        def walk_with_ghost(*args, **kwargs):
            yield from real_walk(*args, **kwargs)
            yield ghost

        monkeypatch.setattr(core, "walk_files", walk_with_ghost)
        result = CodebaseAnalyzer(sample_project).analyze()

        assert result.reports[ghost].source_lines.failure is FailureKind.NOT_FOUND
        assert result.reports[ghost].source_lines.as_int() == -37
        assert result.failed_files == [ghost]
        assert len(result.reports) == 5


class TestAnalyzeApi:
    def test_analyze_with_overrides(self, sample_project, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.chdir(tmp_path)
        result = analyze(sample_project, enhanced=False)
        assert len(result.reports) == 4
        assert all(r.enhanced_lines is None for r in result.reports.values())
