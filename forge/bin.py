"""Paths inside containers and archives copied into them."""

from __future__ import annotations

import gzip
import io
import posixpath
import re
import tarfile
import uuid
from datetime import datetime, timezone

# Directory in containers where forge's shim, sockets and actions are placed.
WORKING_DIR = "/" + str(uuid.uuid4())
FORGE_SOCK = WORKING_DIR + "/forge.sock"

SHIM_NAME = "shim"
SHIM_PATH = posixpath.join(WORKING_DIR, SHIM_NAME)
SHIM_ENTRYPOINT = [SHIM_PATH]

SCRIPT_NAME = "script"
SCRIPT_PATH = posixpath.join(WORKING_DIR, SCRIPT_NAME)
SCRIPT_ENTRYPOINT = [SCRIPT_PATH]

TAR_ARCHIVE_COMPRESSION = 9
MOD_TIME = datetime(1985, 10, 26, 8, 15, 0, tzinfo=timezone.utc)
MODE = 0o777

_SHEBANG_RE = re.compile(r"[\t\n\f\r ]*#!.+\n")


def has_shebang(script: str) -> bool:
    """Return whether ``script`` begins with a ``#!`` line."""
    return _SHEBANG_RE.match(script) is not None


def new_tar_archive(name: str, content: str | bytes) -> bytes:
    """Return a gzipped tar archive holding one executable file."""
    payload = content.encode("utf-8") if isinstance(content, str) else content
    buffer = io.BytesIO()
    with gzip.GzipFile(
        fileobj=buffer, mode="wb", compresslevel=TAR_ARCHIVE_COMPRESSION, mtime=0
    ) as gz:
        with tarfile.open(fileobj=gz, mode="w") as archive:
            info = tarfile.TarInfo(name)
            info.size = len(payload)
            info.mode = MODE
            info.mtime = int(MOD_TIME.timestamp())
            archive.addfile(info, io.BytesIO(payload))
    return buffer.getvalue()


def new_script_tar_archive(script: str) -> bytes:
    """Return a gzipped tar archive holding ``script`` as an executable file."""
    return new_tar_archive(SCRIPT_NAME, script)