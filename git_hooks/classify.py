"""Partition staged files into per-language buckets."""

from collections.abc import Iterable, Sequence
from fnmatch import fnmatch
from pathlib import PurePosixPath

LANGUAGE_SUFFIXES: dict[str, str] = {
    "python": ".py",
    "go": ".go",
}


def classify(paths: Iterable[str]) -> dict[str, list[str]]:
    """Split paths by language, keeping the input order inside each bucket.

    Every known language gets a bucket, possibly empty. Paths with an unknown
    suffix are dropped.
    """
    buckets: dict[str, list[str]] = {language: [] for language in LANGUAGE_SUFFIXES}
    for path in paths:
        for language, suffix in LANGUAGE_SUFFIXES.items():
            if path.endswith(suffix):
                buckets[language].append(path)
                break
    return buckets


def is_excluded(path: str, patterns: Sequence[str]) -> bool:
    """Match ``path`` against glob patterns by full path or by basename."""
    name = PurePosixPath(path).name
    return any(fnmatch(path, pattern) or fnmatch(name, pattern) for pattern in patterns)


def without_excluded(paths: Iterable[str], patterns: Sequence[str]) -> list[str]:
    """Drop generated files (e.g. protobuf ``*_pb2.py``) from a bucket."""
    return [path for path in paths if not is_excluded(path, patterns)]
