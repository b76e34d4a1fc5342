# autocompress/services/probe/diagnostics.py
"""
Extract duration and bitrates from ffmpeg's human-readable input summary, e.g.

    Duration: 00:01:00.00, start: 0.000000, bitrate: 1205 kb/s
      Stream #0:0(und): Video: h264 (High) ..., 1072 kb/s, 30 fps, ...
      Stream #0:1(und): Audio: aac (LC) ..., 44100 Hz, stereo, fltp, 128 kb/s

Only the FIRST occurrence of each marker is read: with several audio
streams, the first one wins. Every extractor returns 0 on a miss; the
decision whether a miss is fatal lives in parse_probe_output().
"""
from __future__ import annotations

import math
from typing import Optional

from autocompress.common.logging import get_logger
from autocompress.common.strings.scanners import (
    digits_before_unit,
    line_after,
    token_after,
    value_before_unit,
)
from autocompress.domain.entities.probe import ProbeResult
from autocompress.domain.errors import ProbeParseError

logger = get_logger()

DURATION_MARKER = "Duration:"
BITRATE_MARKER = "bitrate:"
AUDIO_MARKER = "Audio:"
UNIT_KBPS = "kb/s"

DEFAULT_AUDIO_BITRATE_KBPS = 128


def _lenient_float(x: str) -> float:
    try:
        value = float(x)
    except ValueError:
        return 0.0
    # "nan" and "inf" parse as floats but are not timecode fields
    return value if math.isfinite(value) else 0.0


def _maybe_int(x: Optional[str]) -> int:
    if not x:
        return 0
    try:
        return int(x)
    except ValueError:
        return 0


def extract_duration(text: str) -> float:
    """`Duration: HH:MM:SS.ss` -> seconds; 0 when missing or not a timecode."""
    token = token_after(text, DURATION_MARKER)
    if not token:
        return 0
    parts = token.split(":")
    if len(parts) != 3:
        return 0
    hours, minutes, seconds = (_lenient_float(p) for p in parts)
    return hours * 3600 + minutes * 60 + seconds


def extract_video_bitrate(text: str) -> int:
    """`bitrate: 1234 kb/s` -> 1234; 0 when missing or `N/A`."""
    rest = line_after(text, BITRATE_MARKER)
    if rest is None:
        return 0
    return _maybe_int(value_before_unit(rest, UNIT_KBPS))


def extract_audio_bitrate(text: str) -> int:
    """Bitrate of the first `Audio:` stream line; 0 when it carries none."""
    rest = line_after(text, AUDIO_MARKER)
    if rest is None:
        return 0
    return _maybe_int(digits_before_unit(rest, UNIT_KBPS))


def parse_probe_output(text: str, *, default_audio_kbps: int = DEFAULT_AUDIO_BITRATE_KBPS) -> ProbeResult:
    """
    Build a ProbeResult from the full diagnostic text of one file.
    Missing duration or bitrate is fatal; a missing audio bitrate falls back
    to `default_audio_kbps`.
    """
    duration = extract_duration(text)
    if not math.isfinite(duration) or duration <= 0:
        raise ProbeParseError("could not parse duration")

    video_kbps = extract_video_bitrate(text)
    if video_kbps <= 0:
        raise ProbeParseError("could not parse video bitrate")

    audio_kbps = extract_audio_bitrate(text)
    if audio_kbps <= 0:
        logger.debug("no audio bitrate found; assuming %d kbps", default_audio_kbps)
        audio_kbps = default_audio_kbps

    return ProbeResult(
        duration_sec=duration,
        video_bitrate_kbps=video_kbps,
        audio_bitrate_kbps=audio_kbps,
    )
