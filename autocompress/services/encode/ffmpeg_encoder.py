# autocompress/services/encode/ffmpeg_encoder.py
from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional

from autocompress.common.settings import get_settings
from autocompress.common.logging import get_logger
from autocompress.common.probe.ffmpeg_helpers import build_encode_cmd, resolve_ffmpeg
from autocompress.domain.errors import EncodeInvocationError
from autocompress.domain.ports.encoder import VideoEncoderPort
from autocompress.domain.ports.process import ProcessRunnerPort
from autocompress.services.process.subprocess_runner import SubprocessRunner

logger = get_logger()


class FFmpegEncoder(VideoEncoderPort):
    """Re-encode with a fixed video bitrate; ffmpeg's output goes straight to the terminal."""

    def __init__(
        self,
        runner: Optional[ProcessRunnerPort] = None,
        ffmpeg_bin: Optional[str] = None,
        timeout_sec: Optional[int] = None,
        overwrite: Optional[bool] = None,
    ):
        cfg = get_settings()
        self.runner = runner or SubprocessRunner()
        self.ffmpeg_bin = ffmpeg_bin or cfg.ffmpeg_bin
        self.timeout_sec = timeout_sec if timeout_sec is not None else cfg.encode_timeout_sec
        self.overwrite = cfg.ffmpeg_overwrite if overwrite is None else overwrite

    def encode(self, input_path: Path, output_path: Path, video_bitrate_kbps: int) -> Path:
        binary = resolve_ffmpeg(self.ffmpeg_bin)
        if not binary:
            raise EncodeInvocationError(f"{self.ffmpeg_bin} not found on PATH; set FFMPEG_BIN or install ffmpeg.")

        cmd = build_encode_cmd(
            binary, input_path, output_path, video_bitrate_kbps, overwrite=self.overwrite
        )
        try:
            outcome = self.runner.run(cmd, capture=False, timeout_sec=self.timeout_sec)
        except FileNotFoundError as e:
            raise EncodeInvocationError(f"{self.ffmpeg_bin} not found; set FFMPEG_BIN or install ffmpeg.") from e
        except subprocess.TimeoutExpired as e:
            raise EncodeInvocationError(f"ffmpeg compression timed out after {self.timeout_sec}s") from e
        except OSError as e:
            raise EncodeInvocationError(f"ffmpeg compression failed: {e}", stderr=str(e)) from e

        if outcome.returncode != 0:
            raise EncodeInvocationError(
                f"ffmpeg compression failed: exit status {outcome.returncode}",
                stderr=outcome.output or None,
                rc=outcome.returncode,
            )
        logger.debug("encoded %s -> %s at %dk", input_path, output_path, video_bitrate_kbps)
        return Path(output_path)
