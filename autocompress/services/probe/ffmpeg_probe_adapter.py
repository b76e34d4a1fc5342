# autocompress/services/probe/ffmpeg_probe_adapter.py
from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional

from autocompress.common.settings import get_settings
from autocompress.common.logging import get_logger
from autocompress.common.probe.ffmpeg_helpers import build_probe_cmd, resolve_ffmpeg
from autocompress.domain.entities.probe import ProbeResult
from autocompress.domain.errors import ProbeInvocationError
from autocompress.domain.ports.probe import MediaProbePort
from autocompress.domain.ports.process import ProcessRunnerPort
from autocompress.services.probe.diagnostics import parse_probe_output
from autocompress.services.process.subprocess_runner import SubprocessRunner

logger = get_logger()


class FFmpegProbeAdapter(MediaProbePort):
    """
    Infrastructure adapter implementing MediaProbePort with `ffmpeg -i`.
    ffmpeg exits non-zero when it is given no output file; that exit code is
    expected and ignored. Only failing to run at all is an error here.
    """

    def __init__(
        self,
        runner: Optional[ProcessRunnerPort] = None,
        ffmpeg_bin: Optional[str] = None,
        timeout_sec: Optional[int] = None,
        default_audio_kbps: Optional[int] = None,
    ):
        cfg = get_settings()
        self.runner = runner or SubprocessRunner()
        self.ffmpeg_bin = ffmpeg_bin or cfg.ffmpeg_bin
        self.timeout_sec = timeout_sec if timeout_sec is not None else cfg.probe_timeout_sec
        self.default_audio_kbps = default_audio_kbps or cfg.budget.default_audio_bitrate_kbps

    # ---- Port API -------------------------------------------------------------
    def probe(self, path: Path) -> ProbeResult:
        text = self.read_diagnostics(path)
        return parse_probe_output(text, default_audio_kbps=self.default_audio_kbps)

    def read_diagnostics(self, path: Path) -> str:
        if not path:
            raise ProbeInvocationError("No path provided to probe().")

        binary = resolve_ffmpeg(self.ffmpeg_bin)
        if not binary:
            raise ProbeInvocationError(f"{self.ffmpeg_bin} not found on PATH; set FFMPEG_BIN or install ffmpeg.")

        cmd = build_probe_cmd(binary, path)
        try:
            outcome = self.runner.run(cmd, capture=True, timeout_sec=self.timeout_sec)
        except FileNotFoundError as e:
            raise ProbeInvocationError(f"{self.ffmpeg_bin} not found; set FFMPEG_BIN or install ffmpeg.") from e
        except subprocess.TimeoutExpired as e:
            raise ProbeInvocationError(f"ffmpeg timed out after {self.timeout_sec}s", stderr=str(e)) from e
        except OSError as e:
            raise ProbeInvocationError(f"failed to execute ffmpeg: {e}", stderr=str(e)) from e

        if outcome.returncode != 0:
            logger.debug("ffmpeg probe exited with %d (expected without an output file)", outcome.returncode)
        return outcome.output
