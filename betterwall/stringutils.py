"""Small string helpers used across the wallpaper manager."""

from __future__ import annotations

import re
import string
from urllib.parse import quote

_WHITESPACE = " \t\n\v\f\r"
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_LEADING_HEX = re.compile(rb"[0-9A-Fa-f]+")
_PERCENT = ord("%")
_PLUS = ord("+")
_SPACE = ord(" ")


def trim(text: str) -> str:
    """Strip leading and trailing ASCII whitespace."""
    return text.strip(_WHITESPACE)


def to_lower(text: str) -> str:
    """Lower-case ASCII letters only; other characters are kept."""
    return text.translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Upper-case ASCII letters only; other characters are kept."""
    return text.translate(_TO_UPPER)


def split(text: str, delimiter: str) -> list[str]:
    """Split on a single-character delimiter; a trailing empty field is dropped."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    parts = text.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def join(parts: list[str], delimiter: str) -> str:
    return delimiter.join(parts)


def url_encode(text: str) -> str:
    """Percent-encode everything except ASCII letters, digits and ``-_.~``."""
    return quote(text, safe="")


def _hex_value(chunk: bytes) -> int | None:
    match = _LEADING_HEX.match(chunk.lstrip(_WHITESPACE.encode()))
    return int(match.group(), 16) if match else None


def url_decode(text: str) -> str:
    """Decode percent escapes and ``+`` as space; a bad escape keeps its ``%``."""
    data = text.encode("utf-8")
    out = bytearray()
    position = 0
    while position < len(data):
        byte = data[position]
        if byte != _PERCENT:
            out.append(_SPACE if byte == _PLUS else byte)
            position += 1
            continue
        value = _hex_value(data[position + 1 : position + 3])
        if value is None:
            out.append(_PERCENT)
            position += 1
        else:
            # The two bytes after '%' are always consumed, even if only one was hex.
            out.append(value & 0xFF)
            position += 3
    return out.decode("utf-8", errors="replace")


def starts_with(text: str, prefix: str) -> bool:
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    return text.endswith(suffix)


def replace_all(text: str, old: str, new: str) -> str:
    """Replace every occurrence of ``old``; an empty ``old`` leaves text as is."""
    if not old:
        return text
    return text.replace(old, new)