# tests/conftest.py
from __future__ import annotations
import subprocess
from typing import List, Optional, Sequence

import pytest

from autocompress.common import settings as settings_mod
from autocompress.common.probe import ffmpeg_helpers
from autocompress.domain.ports.process import RunOutcome

# ffmpeg 6.x `ffmpeg -hide_banner -i clip.mp4` on a 60s clip
SAMPLE_DIAGNOSTICS = """\
Input #0, mov,mp4,m4a,3gp,3g2,mj2, from 'clip.mp4':
  Metadata:
    major_brand     : isom
    minor_version   : 512
    compatible_brands: isomiso2avc1mp41
    encoder         : Lavf60.3.100
  Duration: 00:01:00.00, start: 0.000000, bitrate: 1205 kb/s
  Stream #0:0[0x1](und): Video: h264 (High) (avc1 / 0x31637661), yuv420p(progressive), 1280x720 [SAR 1:1 DAR 16:9], 1072 kb/s, 30 fps, 30 tbr, 15360 tbn (default)
    Metadata:
      handler_name    : VideoHandler
      vendor_id       : [0][0][0][0]
  Stream #0:1[0x2](und): Audio: aac (LC) (mp4a / 0x6134706D), 44100 Hz, stereo, fltp, 128 kb/s (default)
    Metadata:
      handler_name    : SoundHandler
      vendor_id       : [0][0][0][0]
At least one output file must be specified
"""


class FakeRunner:
    """ProcessRunnerPort double: records every call and replays a canned outcome."""

    def __init__(self, output: str = "", returncode: int = 0, raises: Optional[BaseException] = None):
        self.output = output
        self.returncode = returncode
        self.raises = raises
        self.calls: List[dict] = []

    def run(self, cmd: Sequence[str], *, capture: bool = True, timeout_sec: Optional[int] = None) -> RunOutcome:
        self.calls.append({"cmd": list(cmd), "capture": capture, "timeout_sec": timeout_sec})
        if self.raises is not None:
            raise self.raises
        return RunOutcome(output=self.output if capture else "", returncode=self.returncode)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Each test starts from defaults; env tweaks via monkeypatch apply after cache_clear()."""
    for var in ("LOG_LEVEL", "FFMPEG_BIN", "PROBE_TIMEOUT_SEC", "ENCODE_TIMEOUT_SEC", "FFMPEG_OVERWRITE", "OUTPUT_PREFIX"):
        monkeypatch.delenv(var, raising=False)
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _ffmpeg_on_path(monkeypatch):
    """Pretend every ffmpeg name resolves to itself; tests never run the real binary."""
    monkeypatch.setattr(ffmpeg_helpers.shutil, "which", lambda name: name, raising=True)


@pytest.fixture()
def diagnostics() -> str:
    return SAMPLE_DIAGNOSTICS


@pytest.fixture()
def probe_runner() -> FakeRunner:
    # ffmpeg exits 1 when only probing
    return FakeRunner(output=SAMPLE_DIAGNOSTICS, returncode=1)


@pytest.fixture()
def encode_runner() -> FakeRunner:
    return FakeRunner(returncode=0)


@pytest.fixture()
def timeout_error() -> subprocess.TimeoutExpired:
    return subprocess.TimeoutExpired(cmd=["ffmpeg"], timeout=5)


@pytest.fixture()
def make_runner():
    return FakeRunner
