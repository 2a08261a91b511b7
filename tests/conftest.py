"""Shared test fixtures for codetally tests."""

import textwrap
from pathlib import Path

import pytest

from codetally.scanning.languages import get_language_config


@pytest.fixture
def java():
    """Java language configuration."""
    return get_language_config("java")


@pytest.fixture
def make_tree(tmp_path):
    """Factory writing ``{relative path: source}`` below a fresh root.

    Sources are dedented, so tests can indent them naturally.
    """

    def _make(files: dict, root_name: str = "java") -> Path:
        root = tmp_path / root_name
        root.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return root

    return _make


BASE_JAVA = """
    package alpha.core;

    import gamma.util.Strings;

    /**
     * Base type.
     */
    public class Base {
        private String name;

        // the name
        public String getName() {
            return name;
        }

        public void setName(String name) {
            this.name = name;
        }

        public String label() { /* short */
            return Strings.upper(name);
        }
    }
"""

SERVICE_JAVA = """
    package beta.service;

    import alpha.core.Base;
    import java.util.List;

    public class Service {
        private final Base base = new Base();
    }
"""

APP_JAVA = '''
    package beta.app;

    import beta.service.Service;

    public class App {
        public static void main(String[] args) {
            String banner = """
                // not a comment
                /* neither */
                """;
            new Service();
        }
    }
'''

STRINGS_JAVA = """
    package gamma.util;

    // helpers
    public final class Strings {
        public static String upper(String s) { return s.toUpperCase(); }
    }
"""


@pytest.fixture
def sample_project(make_tree):
    """Three projects: beta.app -> beta.service -> alpha.core -> gamma.util.

    Expected counts (baseline / enhanced):
        Base.java     17 / 8
        Service.java   6 / 6
        App.java      11 / 11
        Strings.java   4 / 4
    """
    return make_tree(
        {
            "alpha/core/Base.java": BASE_JAVA,
            "beta/service/Service.java": SERVICE_JAVA,
            "beta/app/App.java": APP_JAVA,
            "gamma/util/Strings.java": STRINGS_JAVA,
        }
    )
