from __future__ import annotations
from pathlib import Path
from typing import Protocol


class VideoEncoderPort(Protocol):
    def encode(self, input_path: Path, output_path: Path, video_bitrate_kbps: int) -> Path: ...
