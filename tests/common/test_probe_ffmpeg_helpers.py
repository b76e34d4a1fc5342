from pathlib import Path
from autocompress.common.probe.ffmpeg_helpers import build_encode_cmd, build_probe_cmd, format_cmd, resolve_ffmpeg


def test_build_probe_cmd_has_input_only(tmp_path):
    f = tmp_path / "video.mp4"
    cmd = build_probe_cmd("ffmpeg", f)
    assert cmd[0] == "ffmpeg"
    assert cmd[-2:] == ["-i", str(f)]
    # no output file: ffmpeg prints the summary and stops
    assert "-b:v" not in cmd


def test_build_encode_cmd_bitrate_and_output():
    cmd = build_encode_cmd("ffmpeg", Path("in.mp4"), Path("compressed_in.mp4"), 555)
    assert cmd == ["ffmpeg", "-i", "in.mp4", "-b:v", "555k", "compressed_in.mp4"]


def test_build_encode_cmd_overwrite():
    cmd = build_encode_cmd("/opt/ffmpeg", "in.mp4", "out.mp4", 691, overwrite=True)
    assert cmd == ["/opt/ffmpeg", "-y", "-i", "in.mp4", "-b:v", "691k", "out.mp4"]


def test_format_cmd_quotes_spaces():
    assert format_cmd(["ffmpeg", "-i", "my clip.mp4"]) == "ffmpeg -i 'my clip.mp4'"


def test_resolve_ffmpeg_explicit_file(tmp_path):
    binary = tmp_path / "ffmpeg"
    binary.write_bytes(b"")
    assert resolve_ffmpeg(str(binary)) == str(binary)


def test_resolve_ffmpeg_path_lookup(monkeypatch):
    import autocompress.common.probe.ffmpeg_helpers as helpers

    monkeypatch.setattr(helpers.shutil, "which", lambda name: f"/usr/local/bin/{name}")
    assert resolve_ffmpeg(None) == "/usr/local/bin/ffmpeg"
    monkeypatch.setattr(helpers.shutil, "which", lambda name: None)
    assert resolve_ffmpeg("ffmpeg") is None
