"""Search staged files for leftover debugging statements.

This is a plain textual scan: whole-line comments are skipped, everything
else (including string literals and trailing comments) is searched.
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

COMMENT_RE = re.compile(r"^\s*(?:#|//)")


@dataclass(frozen=True)
class DebugRule:
    """A banned construct.

    Attributes:
        label: Short description shown next to each hit.
        pattern: Regex searched on each non-comment line.
        exclude: Optional regex; text it matches is removed before searching.
    """

    label: str
    pattern: re.Pattern
    exclude: Optional[re.Pattern] = None

    def matches(self, line: str) -> bool:
        if self.exclude is not None:
            line = self.exclude.sub("", line)
        return self.pattern.search(line) is not None


DEFAULT_RULES: tuple[DebugRule, ...] = (
    DebugRule("python print", re.compile(r"(?<![.\w])print\(")),
    DebugRule(
        "go print",
        re.compile(r"\bfmt\.Print\w*\(|(?<![.\w])print(?:ln)?\("),
        exclude=re.compile(r"printable", re.IGNORECASE),
    ),
    DebugRule(
        "debugger",
        re.compile(r"\bpdb\.set_trace\(|(?<![.\w])breakpoint\(\)|\bruntime\.Breakpoint\(\)"),
    ),
)


@dataclass(frozen=True)
class DebugHit:
    path: str
    line: int
    label: str

    def __str__(self) -> str:
        return f"{self.path}:{self.line}"


def scan_lines(
    path: str,
    lines: Iterable[str],
    rules: Sequence[DebugRule] = DEFAULT_RULES,
) -> list[DebugHit]:
    """Scan already-read lines; each line is reported at most once."""
    hits: list[DebugHit] = []
    for number, line in enumerate(lines, start=1):
        if COMMENT_RE.match(line):
            continue
        for rule in rules:
            if rule.matches(line):
                hits.append(DebugHit(path, number, rule.label))
                break
    return hits


def scan_file(
    root: Path,
    path: str,
    rules: Sequence[DebugRule] = DEFAULT_RULES,
) -> list[DebugHit]:
    """Scan one working-tree file. Binary (NUL byte) or missing files yield no hits.

    Bytes that are not valid UTF-8 are replaced, so files in other encodings
    are still searched.
    """
    try:
        data = (root / path).read_bytes()
    except OSError:
        return []
    if b"\0" in data:
        return []
    text = data.decode("utf-8", errors="replace")
    return scan_lines(path, text.splitlines(), rules)


def scan_files(
    root: Path,
    paths: Iterable[str],
    rules: Sequence[DebugRule] = DEFAULT_RULES,
) -> list[DebugHit]:
    hits: list[DebugHit] = []
    for path in paths:
        hits.extend(scan_file(root, path, rules))
    return hits
