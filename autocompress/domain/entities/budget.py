# autocompress/domain/entities/budget.py
from __future__ import annotations

from dataclasses import dataclass

from autocompress.domain.errors import InvalidSizeArgument


@dataclass(frozen=True)
class SizeTarget:
    """Desired output size in MB (1 MB = 1024 KB)."""
    desired_size_mb: int

    def __post_init__(self) -> None:
        if isinstance(self.desired_size_mb, bool) or not isinstance(self.desired_size_mb, int):
            raise InvalidSizeArgument(f"invalid output size: {self.desired_size_mb!r} is not an integer")
        if self.desired_size_mb <= 0:
            raise InvalidSizeArgument(f"invalid output size: {self.desired_size_mb} MB must be positive")

    @classmethod
    def parse(cls, raw: str) -> "SizeTarget":
        text = str(raw).strip()
        # ASCII digits with one optional sign; int() alone also takes "1_0" and non-ASCII digits
        digits = text[1:] if text[:1] in ("+", "-") else text
        if not (digits.isascii() and digits.isdigit()):
            raise InvalidSizeArgument(f"invalid output size: {raw!r} is not an integer")
        return cls(int(text))

    @property
    def desired_size_kb(self) -> int:
        return self.desired_size_mb * 1024


@dataclass(frozen=True)
class BitrateBudget:
    video_bitrate_kbps: int
    audio_bitrate_kbps: int
    total_bitrate_kbps: float
