# autocompress/domain/policies/bitrate_budget.py
from __future__ import annotations

import math

from autocompress.domain.entities.budget import BitrateBudget, SizeTarget
from autocompress.domain.entities.probe import ProbeResult
from autocompress.domain.errors import BitrateTooLowError

# Below this the encode is not worth running.
MIN_VIDEO_BITRATE_KBPS = 100


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def total_bitrate_kbps(duration_sec: float, desired_size_mb: int) -> float:
    """Whole-file bitrate (kbps) that fills `desired_size_mb` in `duration_sec`."""
    if not math.isfinite(duration_sec) or duration_sec <= 0:
        raise ValueError(f"duration must be positive, got {duration_sec}")
    desired_size_kb = float(desired_size_mb * 1024)
    return (desired_size_kb * 8) / duration_sec


def calculate_video_bitrate(
    duration_sec: float,
    desired_size_mb: int,
    audio_bitrate_kbps: int,
    *,
    min_video_bitrate_kbps: int = MIN_VIDEO_BITRATE_KBPS,
) -> int:
    """
    Video bitrate (kbps) that makes the output approximately `desired_size_mb`
    once `audio_bitrate_kbps` is accounted for.

    The floor is checked on the unrounded value; a budget under it raises
    BitrateTooLowError instead of being clamped. There is no upper bound.
    """
    video = total_bitrate_kbps(duration_sec, desired_size_mb) - float(audio_bitrate_kbps)
    if video < min_video_bitrate_kbps:
        raise BitrateTooLowError(
            f"calculated video bitrate ({int(video)} kbps) is too low, desired output size may be too small",
            video_bitrate_kbps=int(video),
            min_video_bitrate_kbps=min_video_bitrate_kbps,
        )
    return _round_half_up(video)


def plan_budget(
    probe: ProbeResult,
    size: SizeTarget,
    *,
    min_video_bitrate_kbps: int = MIN_VIDEO_BITRATE_KBPS,
) -> BitrateBudget:
    video = calculate_video_bitrate(
        probe.duration_sec,
        size.desired_size_mb,
        probe.audio_bitrate_kbps,
        min_video_bitrate_kbps=min_video_bitrate_kbps,
    )
    return BitrateBudget(
        video_bitrate_kbps=video,
        audio_bitrate_kbps=probe.audio_bitrate_kbps,
        total_bitrate_kbps=total_bitrate_kbps(probe.duration_sec, size.desired_size_mb),
    )
