# autocompress/common/path/safe.py
from __future__ import annotations

from pathlib import Path


def resolve_root(root: Path | str) -> Path:
    """Resolve a working directory."""
    return Path(root).expanduser().resolve()


def prefixed_output_path(input_path: Path | str, workdir: Path | str, prefix: str) -> Path:
    """
    `<workdir>/<prefix><basename of input>`.
    Only the directory part is resolved; an existing file or symlink at the
    output name is left for ffmpeg to deal with.
    Raises ValueError if the input has no file name or the prefix would
    place the result outside of `workdir`.
    """
    name = Path(input_path).name
    if not name:
        raise ValueError(f"input path {input_path!s} has no file name")
    root = resolve_root(workdir)
    out = root / f"{prefix}{name}"
    if out.parent.resolve() != root:
        raise ValueError(f"output {out} escapes working directory {root}")
    return out
