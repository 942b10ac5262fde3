"""Parsing of GitHub Actions ``$GITHUB_PATH`` files."""

from __future__ import annotations

import posixpath
from collections.abc import Iterable


def _clean(path: str) -> str:
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _should_ignore(line: str) -> bool:
    trimmed = line.strip()
    return not trimmed or trimmed.startswith("#")


def parse_path_file(stream: Iterable[str] | Iterable[bytes]) -> str:
    """Join newline-delimited directories into a ``PATH`` value."""
    path = ""
    for raw in stream:
        line = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        line = line.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]
        if _should_ignore(line):
            continue
        cleaned = _clean(line)
        if not path:
            path = cleaned
        elif cleaned not in path:
            path += ":" + cleaned
    return path