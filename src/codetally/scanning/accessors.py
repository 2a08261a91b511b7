"""Trivial getter/setter detection for the enhanced line count.

Works on lines the classifier already counted. A getter or setter is
excluded only when it is pure boilerplate: a signature, one body statement
that returns or assigns a field, and the closing brace, either spread over
three counted lines or written on one.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Sequence

from .languages import LanguageConfig


@dataclass(frozen=True)
class _AccessorPatterns:
    signature: "re.Pattern[str]"
    body: "re.Pattern[str]"
    close: "re.Pattern[str]"
    one_line: "re.Pattern[str]"


@lru_cache(maxsize=None)
def _compile(config: LanguageConfig) -> list[_AccessorPatterns]:
    patterns = []
    for signature, body in (
        (config.getter_signature, config.getter_body),
        (config.setter_signature, config.setter_body),
    ):
        if not signature or not body:
            continue
        patterns.append(
            _AccessorPatterns(
                signature=re.compile(signature + r"$"),
                body=re.compile(body + r"$"),
                close=re.compile(config.block_close + r"$"),
                one_line=re.compile(
                    signature + r"\s*" + body + r"\s*" + config.block_close + r"$"
                ),
            )
        )
    return patterns


def find_accessor_lines(
    lines: Sequence[str], candidates: Sequence[int], config: LanguageConfig
) -> set[int]:
    """Return the indices (into ``lines``) belonging to trivial accessors.

    Args:
        lines: Trimmed physical lines of the file
        candidates: Ascending indices of counted code lines; anything else
            (blank lines, comments, string content) is never part of an
            accessor and is skipped when looking for the next part
        config: Language whose accessor shapes apply
    """
    patterns = _compile(config)
    if not patterns:
        return set()

    excluded: set[int] = set()
    pos = 0
    while pos < len(candidates):
        span = _match_at(lines, candidates, pos, patterns)
        if span is None:
            pos += 1
            continue
        excluded.update(candidates[pos:pos + span])
        pos += span
    return excluded


def _match_at(
    lines: Sequence[str],
    candidates: Sequence[int],
    pos: int,
    patterns: list[_AccessorPatterns],
) -> Optional[int]:
    """Number of candidate lines an accessor starting at ``pos`` spans, if any."""
    head = lines[candidates[pos]]
    for p in patterns:
        if p.one_line.match(head):
            return 1
        if pos + 2 >= len(candidates) or not p.signature.match(head):
            continue
        body = lines[candidates[pos + 1]]
        close = lines[candidates[pos + 2]]
        if p.body.match(body) and p.close.match(close):
            return 3
    return None
