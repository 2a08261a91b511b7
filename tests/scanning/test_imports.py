"""Tests for import extraction and language lookup."""

import pytest

from codetally.exceptions import UnsupportedLanguageError
from codetally.scanning.imports import extract_imports, extract_imports_from_lines
from codetally.scanning.languages import get_language_config


class TestExtractImportsFromLines:
    def test_simple_imports_in_order(self, java):
        lines = [
            "package alpha.core;",
            "",
            "import beta.service.Service;",
            "import java.util.List;",
            "public class A {}",
        ]
        assert extract_imports_from_lines(lines, java) == [
            "beta.service.Service",
            "java.util.List",
        ]

    def test_surrounding_whitespace_is_allowed(self, java):
        lines = ["   import a.b.C;   \n", "\timport d.E;\r\n"]
        assert extract_imports_from_lines(lines, java) == ["a.b.C", "d.E"]

    def test_underscores_are_part_of_names(self, java):
        assert extract_imports_from_lines(["import my_pkg.Some_Type;"], java) == [
            "my_pkg.Some_Type"
        ]

    @pytest.mark.parametrize(
        "line",
        [
            "import static java.lang.Math.max;",
            "import java.util.*;",
            "import a.b.C",
            "// import a.b.C;",
            "import a.b.C; // trailing comment",
            "import a.b2.C;",
            "String s = \"import a.b.C;\";",
        ],
    )
    def test_non_matching_lines_are_ignored(self, java, line):
        assert extract_imports_from_lines([line], java) == []


class TestExtractImports:
    def test_reads_file(self, java, tmp_path):
        path = tmp_path / "A.java"
        path.write_text("import x.Y;\nclass A {}\n", encoding="utf-8")
        assert extract_imports(path, java) == ["x.Y"]

    def test_unreadable_file_yields_nothing(self, java, tmp_path):
        assert extract_imports(tmp_path / "Missing.java", java) == []

    def test_directory_yields_nothing(self, java, tmp_path):
        assert extract_imports(tmp_path, java) == []


class TestLanguages:
    def test_lookup_is_case_insensitive(self):
        assert get_language_config("Java").name == "java"

    def test_unknown_language(self):
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            get_language_config("cobol")
        assert "java" in exc_info.value.supported_languages
