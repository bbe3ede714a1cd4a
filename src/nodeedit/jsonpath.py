from __future__ import annotations

import re
from typing import Iterable

from .errors import InvalidPathError
from .rows import Path, Segment

ROOT = "$"

_INDEX_RX = re.compile(r"\[(\d+)\]")


def path_to_string(path: Iterable[Segment] | None) -> str:
    """Return the bracket form of *path*, e.g. ``$["customer"][0]["name"]``."""
    if not path:
        return ROOT
    parts = []
    for seg in path:
        if isinstance(seg, int) and not isinstance(seg, bool):
            parts.append(f"[{seg}]")
        else:
            parts.append(f'["{seg}"]')
    return ROOT + "".join(parts)


def _segments_from(text: str, pos: int) -> Path | None:
    if pos == len(text):
        return ()
    m = _INDEX_RX.match(text, pos)
    if m is not None:
        rest = _segments_from(text, m.end())
        return None if rest is None else (int(m.group(1)),) + rest
    if not text.startswith('["', pos):
        return None
    # Keys are written unescaped, so a key may itself contain '"]'.  Try each
    # closing '"]' in turn and keep the first one after which the rest parses.
    start = pos + 2
    end = text.find('"]', start)
    while end != -1:
        rest = _segments_from(text, end + 2)
        if rest is not None:
            return (text[start:end],) + rest
        end = text.find('"]', end + 1)
    return None


def parse_path(raw: str | Path) -> Path:
    """Parse a bracket path produced by :func:`path_to_string`.

    A key containing the sequence ``"]["`` is ambiguous in the bracket form;
    the shortest leading key wins.
    """
    if isinstance(raw, tuple):
        return raw
    text = raw.strip()
    if not text.startswith(ROOT):
        raise InvalidPathError(f"Malformed path '{raw}'")
    segments = _segments_from(text, len(ROOT))
    if segments is None:
        raise InvalidPathError(f"Malformed path '{raw}'")
    return segments


__all__ = ["ROOT", "parse_path", "path_to_string"]
