"""Best-effort conversion of raw XML strings into primitive values."""

from __future__ import annotations

import re

from .values import Scalar, VBool, VFloat, VInteger, VString

_BOOL_LITERALS = {"true": True, "false": False}
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)


def _clean(raw: str) -> str:
    # Only newlines and spaces are dropped; tabs and other whitespace stay.
    return raw.replace("\n", "").replace(" ", "")


def coerce(raw: str, enabled: bool) -> Scalar:
    """Convert *raw* to VBool / VInteger / VFloat when *enabled*.

    The first match wins, in this order: boolean literal, integer, float.
    Anything else (and everything when *enabled* is false) comes back as
    the original, uncleaned VString.
    """
    if not enabled:
        return VString(raw)

    cleaned = _clean(raw)
    if cleaned.lower() in _BOOL_LITERALS:
        return VBool(_BOOL_LITERALS[cleaned.lower()])
    if _INTEGER_RE.fullmatch(cleaned):
        return VInteger(int(cleaned))
    if _FLOAT_RE.fullmatch(cleaned):
        return VFloat(float(cleaned))
    return VString(raw)
