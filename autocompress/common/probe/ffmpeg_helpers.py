# autocompress/common/probe/ffmpeg_helpers.py
from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Sequence
import shlex
import shutil


def resolve_ffmpeg(candidate: Optional[str]) -> Optional[str]:
    """
    Absolute path of the ffmpeg binary (explicit file path or PATH lookup),
    or None when it cannot be found.
    """
    name = candidate or "ffmpeg"
    if Path(name).is_file():
        return str(name)
    return shutil.which(name)


def build_probe_cmd(ffmpeg_bin: str, input_path: str | Path) -> List[str]:
    """
    ffmpeg without an output prints the input's stream summary and exits
    non-zero ("At least one output file must be specified"). That summary is
    what the diagnostics parser reads.
    """
    return [ffmpeg_bin, "-hide_banner", "-i", str(input_path)]


def build_encode_cmd(
    ffmpeg_bin: str,
    input_path: str | Path,
    output_path: str | Path,
    video_bitrate_kbps: int,
    *,
    overwrite: bool = False,
) -> List[str]:
    cmd = [ffmpeg_bin]
    if overwrite:
        cmd.append("-y")
    cmd += ["-i", str(input_path), "-b:v", f"{int(video_bitrate_kbps)}k", str(output_path)]
    return cmd


def format_cmd(cmd: Sequence[str]) -> str:
    return " ".join(shlex.quote(p) for p in cmd)
