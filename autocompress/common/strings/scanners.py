# autocompress/common/strings/scanners.py
"""
Tiny scanner helpers for labeled values in human-readable tool output.

Every helper works as: find marker -> skip blanks -> scan to a delimiter.
A miss is reported as None; callers decide on their own sentinel.
"""
from __future__ import annotations

from typing import Iterable, Optional

_BLANKS = " \t"


def line_after(text: str, marker: str) -> Optional[str]:
    """Rest of the line following the FIRST occurrence of `marker`, or None."""
    if not text or not marker:
        return None
    idx = text.find(marker)
    if idx < 0:
        return None
    rest = text[idx + len(marker):]
    return rest.splitlines()[0] if rest else ""


def token_after(text: str, marker: str, stops: Iterable[str] = (",", " ", "\t")) -> Optional[str]:
    """
    Token following `marker` (leading blanks skipped) up to the first stop char.
    Returns None when the marker is absent or nothing follows it.
    """
    rest = line_after(text, marker)
    if rest is None:
        return None
    rest = rest.lstrip(_BLANKS)
    stop_set = set(stops)
    end = 0
    while end < len(rest) and rest[end] not in stop_set:
        end += 1
    token = rest[:end]
    return token or None


def value_before_unit(segment: str, unit: str) -> Optional[str]:
    """
    Text between the start of `segment` and the first `unit`, stripped.
    e.g. value_before_unit(" 1234 kb/s", "kb/s") -> "1234"
    """
    if segment is None:
        return None
    idx = segment.find(unit)
    if idx < 0:
        return None
    return segment[:idx].strip() or None


def digits_before_unit(segment: str, unit: str) -> Optional[str]:
    """
    Run of digits immediately preceding the first `unit` in `segment`
    (blanks between the digits and the unit are skipped).
    e.g. digits_before_unit("stereo, fltp, 128 kb/s", "kb/s") -> "128"
    """
    if segment is None:
        return None
    idx = segment.find(unit)
    if idx < 0:
        return None
    end = idx
    while end > 0 and segment[end - 1] in _BLANKS:
        end -= 1
    start = end
    while start > 0 and segment[start - 1].isdigit():
        start -= 1
    return segment[start:end] or None
