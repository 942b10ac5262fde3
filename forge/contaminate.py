"""State passed internally between ores, such as shared mounts and stdin."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import IO, Any

from forge.core import Mount


@dataclass(frozen=True)
class Contamination:
    """Immutable state carried from an ore to the ores it runs."""

    mounts: tuple[Mount, ...] = ()
    stdin: IO[Any] | None = None


def _of(ctx: Contamination | None) -> Contamination:
    return ctx if ctx is not None else Contamination()


def with_mounts(ctx: Contamination | None, *args: Mount) -> Contamination:
    """Return a copy of ``ctx`` with the given mounts appended."""
    current = _of(ctx)
    return replace(current, mounts=current.mounts + tuple(args))


def mounts_from(ctx: Contamination | None) -> list[Mount]:
    """Return the mounts carried by ``ctx``."""
    return list(_of(ctx).mounts)


def override_with_mounts_from(ctx: Contamination | None, *args: Mount) -> list[Mount]:
    """Return the given mounts, replacing any whose destination ``ctx`` also mounts."""
    carried = _of(ctx).mounts
    destinations = {mount.destination for mount in carried}
    kept = [mount for mount in args if mount.destination not in destinations]
    return kept + list(carried)


def with_stdin(ctx: Contamination | None, stdin: IO[Any] | None) -> Contamination:
    """Return a copy of ``ctx`` carrying ``stdin``."""
    return replace(_of(ctx), stdin=stdin)


def stdin_from(ctx: Contamination | None) -> IO[Any] | None:
    """Return the stdin carried by ``ctx``, if any."""
    return _of(ctx).stdin