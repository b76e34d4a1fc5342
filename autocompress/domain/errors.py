# autocompress/domain/errors.py
"""
Error taxonomy for a compress run.

Every error is terminal for the run: the CLI reports it and exits non-zero.
Adapters attach the process context (stderr/rc) when there is one.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class CompressorError(RuntimeError):
    message: str

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class UsageError(CompressorError):
    """Wrong command line; `usage` is the text to show the user."""
    usage: str = ""


class InvalidSizeArgument(CompressorError):
    pass


@dataclass(eq=False)
class ProbeInvocationError(CompressorError):
    """ffmpeg could not be started, timed out, or failed at the OS level."""
    stderr: Optional[str] = None
    rc: Optional[int] = None


class ProbeParseError(CompressorError):
    """Duration or bitrate missing from ffmpeg's diagnostic output."""


@dataclass(eq=False)
class BitrateTooLowError(CompressorError):
    # truncated toward zero, for display
    video_bitrate_kbps: int = 0
    min_video_bitrate_kbps: int = 0


@dataclass(eq=False)
class EncodeInvocationError(CompressorError):
    stderr: Optional[str] = None
    rc: Optional[int] = None
