"""Core value types shared across forge."""

from __future__ import annotations

from dataclasses import dataclass

VERSION_CORE = "0.15.4"


@dataclass(frozen=True)
class Mount:
    """A mount of a volume or host path into a container."""

    source: str = ""
    destination: str = ""


def semver(revision: str | None = None, modified: bool = False) -> str:
    """Return the semantic version of forge.

    The version core is extended with the first seven characters of the
    given VCS revision (unless already present) and a trailing ``*`` when
    the working tree was modified.
    """
    version = VERSION_CORE
    if revision:
        short = revision[:7]
        if short not in version:
            version += "+" + short
    if modified:
        version += "*"
    return version