"""GitHub server, REST API and GraphQL URLs."""

from __future__ import annotations

import posixpath
from urllib.parse import urlsplit, urlunsplit

_GITHUB_HOST = "github.com"
_GITHUB_API_HOST = "api.github.com"


def _clean(path: str) -> str:
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _path_join(elements: list[str]) -> str:
    joined = "/".join(element for element in elements if element)
    return _clean(joined) if joined else ""


def _join_path(url: str, *elements: str) -> str:
    """Join path elements onto the path of ``url``, keeping a trailing slash."""
    parts = urlsplit(url)
    all_elements = [parts.path, *elements]
    if not all_elements[0].startswith("/"):
        all_elements[0] = "/" + all_elements[0]
        path = _path_join(all_elements)[1:]
    else:
        path = _path_join(all_elements)
    if all_elements[-1].endswith("/") and not path.endswith("/"):
        path += "/"
    if path and not path.startswith("/") and parts.netloc:
        path = "/" + path
    return urlunsplit(parts._replace(path=path))


def api_url_from_base_url(base: str) -> str:
    """Return the REST API URL for the GitHub server at ``base``."""
    parts = urlsplit(base)
    if parts.hostname == _GITHUB_HOST:
        userinfo, at, _ = parts.netloc.rpartition("@")
        netloc = f"{userinfo}{at}{_GITHUB_API_HOST}"
        return urlunsplit(parts._replace(netloc=netloc))
    return _join_path(base, "/api/v3")


def graphql_url_from_base_url(base: str) -> str:
    """Return the GraphQL API URL for the GitHub server at ``base``."""
    return _join_path(api_url_from_base_url(base), "/graphql")


DEFAULT_URL = "https://github.com/"
DEFAULT_API_URL = api_url_from_base_url(DEFAULT_URL)
DEFAULT_GRAPHQL_URL = graphql_url_from_base_url(DEFAULT_URL)