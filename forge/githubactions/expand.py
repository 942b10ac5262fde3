"""Expansion of ``${{ name }}`` expressions."""

from __future__ import annotations

from collections.abc import Callable

ExpandFunc = Callable[[str], str]

_DOLLAR = ord("$")
_OPEN = ord("{")
_CLOSE = ord("}")


def _github_name(data: bytes) -> tuple[str, int]:
    """Return the name inside ``{{ }}`` at the start of ``data`` and its width.

    A width greater than zero with an empty name means the bytes should be
    consumed; a width of zero means the syntax was not recognised.
    """
    if len(data) > 3 and data[0] == _OPEN and data[1] == _OPEN:
        i = 2
        while i + 1 < len(data) and data[i] != _CLOSE:
            i += 1
        if data[i] == _CLOSE and i + 1 < len(data) and data[i + 1] != _CLOSE:
            return "", 0
        return data[2:i].decode("utf-8", errors="replace").strip(), i + 2
    return "", 0


def expand(data: bytes, lookup: ExpandFunc) -> bytes:
    """Replace each ``${{ name }}`` in ``data`` with ``lookup(name)``."""
    out: bytearray | None = None
    start = 0
    pos = 0
    length = len(data)
    while pos < length:
        if data[pos] == _DOLLAR:
            if out is None:
                out = bytearray()
            out += data[start:pos]
            name, width = _github_name(data[pos + 1:])
            if not name and width > 0:
                pass
            elif not name:
                out.append(data[pos])
            else:
                out += lookup(name).encode("utf-8")
            pos += width
            start = pos + 1
        pos += 1
    if out is None:
        return data
    out += data[min(start, length):]
    return bytes(out)


def expand_string(text: str, lookup: ExpandFunc) -> str:
    """Expand ``${{ name }}`` expressions in a string. See :func:`expand`."""
    return expand(text.encode("utf-8"), lookup).decode("utf-8")