"""References to GitHub Actions as written in a step's ``uses``."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

ACTION_YAML_FILENAMES = ("action.yml", "action.yaml")


class UsesError(ValueError):
    """Raised when a ``uses`` reference is invalid or unusable."""


def _clean(path: str) -> str:
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


@dataclass(frozen=True)
class Uses:
    """A parsed ``uses`` reference: a path and an optional version."""

    path: str = ""
    version: str = ""

    def is_local(self) -> bool:
        """Return whether the reference is to an action on the local filesystem."""
        # A GitHub owner cannot start with ".", so "." and "./path" are local.
        return (
            self.path.startswith(".")
            or posixpath.isabs(self.path)
            or len(self.path.split("/")) < 2
        )

    def is_remote(self) -> bool:
        """Return whether the reference is to an action in a GitHub repository."""
        return not self.is_local()

    def owner(self) -> str:
        """Return the repository owner of a remote reference."""
        return self.path.split("/")[0] if self.is_remote() else ""

    def repository(self) -> str:
        """Return the repository name of a remote reference."""
        return self.path.split("/")[1] if self.is_remote() else ""

    def action_path(self) -> str:
        """Return the path of the action within its repository."""
        if self.is_remote():
            elements = self.path.split("/")
            if len(elements) > 2:
                joined = "/".join(e for e in elements[2:] if e)
                return _clean(joined) if joined else ""
        return ""

    def __str__(self) -> str:
        if self.version:
            return f"{self.path}@{self.version}"
        return self.path

    def to_json(self) -> str:
        """Return the reference as a JSON string literal."""
        return f'"{self}"'


def parse_uses(uses: str) -> Uses:
    """Parse a ``uses`` value such as ``owner/repo@v1``, ``./path`` or ``.``."""
    if uses.startswith("/"):
        return Uses(path=_clean(uses))
    if uses.startswith("."):
        path = _clean(uses)
        if path != ".":
            path = "./" + path
        return Uses(path=path)
    parts = uses.split("@")
    if len(parts) != 2:
        raise UsesError(f"parse uses: not a path or a versioned reference: {uses}")
    return Uses(path=_clean(parts[0]), version=parts[1])


def open_directory_metadata(directory: str | Path) -> TextIO:
    """Open the action metadata file found in ``directory``."""
    for filename in ACTION_YAML_FILENAMES:
        try:
            return open(Path(directory) / filename, encoding="utf-8")
        except OSError:
            continue
    raise FileNotFoundError(f"open action in directory: {directory}")


def open_uses_metadata(uses: Uses) -> TextIO:
    """Open the metadata file of a local action reference."""
    if uses.is_remote():
        raise UsesError(f"open remote action: {uses.path}")
    return open_directory_metadata(_clean(uses.path))