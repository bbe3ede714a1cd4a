from __future__ import annotations

import math


def _as_number(raw: str) -> int | float | None:
    try:
        number: int | float = int(raw)
    except ValueError:
        try:
            number = float(raw)
        except ValueError:
            return None
        if not math.isfinite(number):
            return None
    # Only accept text that survives the round trip unchanged, so "007",
    # "1e3" or " 5" keep the form the user typed.
    if str(number) != raw:
        return None
    return number


def coerce(raw: str) -> None | bool | int | float | str:
    """Map edited text to a typed scalar.

    ``null``, ``true`` and ``false`` map to their JSON values and numbers are
    accepted only when re-rendering them reproduces *raw* exactly.  Everything
    else is returned unchanged as a string.
    """
    if raw == "null":
        return None
    if raw == "true":
        return True
    if raw == "false":
        return False
    number = _as_number(raw)
    if number is not None:
        return number
    return raw


__all__ = ["coerce"]
