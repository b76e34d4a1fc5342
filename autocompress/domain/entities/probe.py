# autocompress/domain/entities/probe.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProbeResult:
    """
    Normalized, framework-free result of a media probe.
    Produced by an adapter from ffmpeg's diagnostic text; only the three
    facts the bitrate budget needs. Bitrates are kbps; 0 means "not found".
    """
    duration_sec: float = 0.0
    video_bitrate_kbps: int = 0
    audio_bitrate_kbps: int = 0
