"""Parsing of GitHub Actions environment files such as ``$GITHUB_ENV``."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

_VALUE_DELIMITER = (
    r"ghadelimiter_[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}"
    r"-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_VALUE_DELIMITER_RE = re.compile(_VALUE_DELIMITER)
_KEY_DELIMITER_RE = re.compile(r"(\w+)<<" + _VALUE_DELIMITER, re.ASCII)

_OLD_VALUE_DELIMITER = "_GitHubActionsFileCommandDelimeter_"
_OLD_VALUE_DELIMITER_RE = re.compile(_OLD_VALUE_DELIMITER)
_OLD_KEY_DELIMITER_RE = re.compile(r"(\w+)<<" + _OLD_VALUE_DELIMITER, re.ASCII)


class EnvFileError(ValueError):
    """Raised when an environment file cannot be parsed."""


def _lines(stream: Iterable[str] | Iterable[bytes]) -> Iterator[str]:
    for line in stream:
        if isinstance(line, bytes):
            line = line.decode("utf-8")
        line = line.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def _trim_value(value: str) -> str:
    if value.startswith('"') and value.endswith('"'):
        return value.strip('"')
    if value.startswith("'") and value.endswith("'"):
        return value.strip("'")
    return value


def parse_env_file(stream: Iterable[str] | Iterable[bytes]) -> dict[str, str]:
    """Parse ``KEY=value`` and delimited multiline entries into a dict."""
    values: dict[str, str] = {}
    lines = _lines(stream)
    for line in lines:
        if line.startswith("# ") or not line.strip():
            continue

        for key_re, value_re in (
            (_KEY_DELIMITER_RE, _VALUE_DELIMITER_RE),
            (_OLD_KEY_DELIMITER_RE, _OLD_VALUE_DELIMITER_RE),
        ):
            match = key_re.search(line)
            if match:
                value_line = next(lines, None)
                end_line = next(lines, None)
                if value_line is None or end_line is None or not value_re.search(end_line):
                    raise EnvFileError("invalid multiline environment file entry")
                values[match.group(1)] = value_line.split(" #", 1)[0]
                break
        else:
            key, sep, value = line.partition("=")
            if not sep:
                raise EnvFileError(f"parse environment file line: {line}")
            values[key] = _trim_value(value)

    return values