# autocompress/services/compress/service.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from autocompress.common.settings import get_settings
from autocompress.common.logging import get_logger
from autocompress.common.path.safe import prefixed_output_path
from autocompress.domain.dataclasses.reports import CompressReport
from autocompress.domain.entities.budget import SizeTarget
from autocompress.domain.errors import EncodeInvocationError
from autocompress.domain.policies.bitrate_budget import plan_budget
from autocompress.domain.ports.encoder import VideoEncoderPort
from autocompress.domain.ports.probe import MediaProbePort
from autocompress.services.encode.ffmpeg_encoder import FFmpegEncoder
from autocompress.services.probe.ffmpeg_probe_adapter import FFmpegProbeAdapter

logger = get_logger()


@dataclass(frozen=True)
class RunConfig:
    input_path: Path
    size: SizeTarget
    workdir: Path = field(default_factory=Path.cwd)
    dry_run: bool = False


class CompressService:
    """
    Probe -> budget -> encode, strictly in that order.
    Progress lines go through `echo` (print by default) so the CLI shows them
    between the probe and ffmpeg's own encode output.
    """

    def __init__(
        self,
        prober: Optional[MediaProbePort] = None,
        encoder: Optional[VideoEncoderPort] = None,
        echo: Callable[[str], None] = print,
    ):
        self.cfg = get_settings()
        self.prober = prober or FFmpegProbeAdapter()
        self.encoder = encoder or FFmpegEncoder()
        self.echo = echo

    def output_path_for(self, config: RunConfig) -> Path:
        try:
            return prefixed_output_path(config.input_path, config.workdir, self.cfg.output_prefix)
        except ValueError as e:
            raise EncodeInvocationError(f"cannot name output file: {e}") from e

    def run(self, config: RunConfig) -> CompressReport:
        rpt = CompressReport(input_path=Path(config.input_path), size=config.size, dry_run=config.dry_run)
        rpt.start()

        probe = self.prober.probe(Path(config.input_path))
        rpt.probe = probe
        self.echo(f"video duration: {probe.duration_sec:.2f} seconds")
        self.echo(f"original video bitrate: {probe.video_bitrate_kbps} kbps")
        self.echo(f"audio bitrate: {probe.audio_bitrate_kbps} kbps")

        budget = plan_budget(
            probe,
            config.size,
            min_video_bitrate_kbps=self.cfg.budget.min_video_bitrate_kbps,
        )
        rpt.budget = budget
        self.echo(f"calculated video bitrate for desired output size: {budget.video_bitrate_kbps} kbps")

        if config.dry_run:
            logger.info("dry run: skipping encode of %s", config.input_path)
            rpt.stop()
            return rpt

        out = self.output_path_for(config)
        rpt.output_path = self.encoder.encode(Path(config.input_path), out, budget.video_bitrate_kbps)
        self.echo(
            f"video compressed successfully to {rpt.output_path.name} "
            f"with bitrate {budget.video_bitrate_kbps} kbps"
        )
        rpt.stop()
        return rpt
