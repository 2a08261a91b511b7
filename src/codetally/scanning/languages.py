"""Language configurations: the single source of truth for syntax markers.

Adding a new language:
  1. Add a LanguageConfig entry to LANGUAGES below.
  2. That's it. The extractor, classifier and accessor filter pick it up.
"""

from dataclasses import dataclass

from ..exceptions import UnsupportedLanguageError


@dataclass(frozen=True)
class LanguageConfig:
    """Everything the scanners need to know about a language."""

    name: str

    # Extension appended to a dotted import name to find the imported file.
    source_extension: str

    line_comment: str
    block_comment_open: str
    block_comment_close: str

    # Delimiter of multi-line string literals (text blocks).
    text_block_delimiter: str

    # Import detection regex, matched per line. Group 1 is the import name.
    import_pattern: str

    # Trivial accessor shapes: signature lines (ending in the opening brace)
    # and the single body statement they may contain.
    getter_signature: str = ""
    getter_body: str = ""
    setter_signature: str = ""
    setter_body: str = ""
    block_close: str = r"\}"


# ── Re-usable building blocks ──────────────────────────────────────

_MODIFIERS = r"(?:(?:public|protected|private|static|final|synchronized)\s+)*"
_TYPE = r"[\w$.]+(?:\s*<[\w$.,?<>\[\]\s]*>)?(?:\s*\[\s*\])*"
_IDENT = r"[A-Za-z_$][\w$]*"


# ── Language definitions ───────────────────────────────────────────

LANGUAGES = {
    "java": LanguageConfig(
        name="java",
        source_extension=".java",
        line_comment="//",
        block_comment_open="/*",
        block_comment_close="*/",
        text_block_delimiter='"""',
        import_pattern=r"^\s*import ([a-zA-Z_.]+);\s*$",
        getter_signature=(
            rf"{_MODIFIERS}{_TYPE}\s+(?:get|is)[A-Z][\w$]*\s*\(\s*\)\s*\{{"
        ),
        getter_body=rf"return\s+(?:this\.)?{_IDENT}\s*;",
        setter_signature=(
            rf"{_MODIFIERS}{_TYPE}\s+set[A-Z][\w$]*\s*\(\s*(?:final\s+)?{_TYPE}\s+{_IDENT}\s*\)\s*\{{"
        ),
        setter_body=rf"(?:this\.)?{_IDENT}\s*=\s*{_IDENT}\s*;",
    ),
}


def get_language_config(name: str) -> LanguageConfig:
    """Look up a registered language by name (case-insensitive)."""
    try:
        return LANGUAGES[name.lower()]
    except KeyError:
        raise UnsupportedLanguageError(name, sorted(LANGUAGES))
