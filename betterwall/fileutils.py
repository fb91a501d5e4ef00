"""Filesystem helpers for wallpaper files."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Union

PathLike = Union[str, os.PathLike]

_MIME_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "webm": "video/webm",
    "mp4": "video/mp4",
    "gif": "image/gif",
    "pkg": "application/x-wallpaper-engine",
}
_DEFAULT_MIME = "application/octet-stream"
_CHUNK = 1 << 16


def exists(path: PathLike) -> bool:
    return Path(path).exists()


def create_directories(path: PathLike) -> bool:
    """Create ``path`` and its parents; True only if something was created."""
    target = Path(path)
    if target.is_dir():
        return False
    try:
        target.mkdir(parents=True)
    except OSError:
        return False
    return True


def read_file(path: PathLike) -> str:
    """Whole file as text, or an empty string if it cannot be read."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read()
    except OSError:
        return ""


def write_file(path: PathLike, content: str) -> bool:
    """Write ``content``, creating parent directories; False on failure."""
    target = Path(path)
    create_directories(target.parent)
    try:
        with open(target, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
    except OSError:
        return False
    return True


def _home_directory() -> str | None:
    home = os.environ.get("HOME")
    if home is not None:
        return home
    try:
        import pwd
    except ImportError:
        return None
    try:
        return pwd.getpwuid(os.getuid()).pw_dir
    except KeyError:
        return None


def expand_path(value: str) -> Path:
    """Expand a leading ``~`` to the home directory.

    ``~name`` is treated as ``~/name``.
    """
    if not value:
        return Path()
    if value.startswith("~"):
        home = _home_directory()
        if home is not None:
            rest = value[1:]
            if rest and not rest.startswith("/"):
                rest = "/" + rest
            return Path(home + rest)
    return Path(value)


def extension(path: PathLike) -> str:
    """File extension without the leading dot, or an empty string."""
    return Path(path).suffix[1:]


def mime_type(path: PathLike) -> str:
    """MIME type guessed from the extension."""
    return _MIME_TYPES.get(extension(path).lower(), _DEFAULT_MIME)


def calculate_hash(path: PathLike) -> str:
    """Hex SHA-256 digest of the file, or an empty string if unreadable."""
    digest = hashlib.sha256()
    try:
        with open(path, "rb") as handle:
            for chunk in iter(lambda: handle.read(_CHUNK), b""):
                digest.update(chunk)
    except OSError:
        return ""
    return digest.hexdigest()