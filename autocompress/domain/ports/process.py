# autocompress/domain/ports/process.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence


@dataclass(frozen=True)
class RunOutcome:
    output: str          # captured stdout+stderr; "" when passed through
    returncode: int


class ProcessRunnerPort(Protocol):
    """
    Runs an external command to completion.
    A non-zero exit is reported in the outcome, not raised; failing to run at
    all raises (OSError, subprocess.TimeoutExpired).
    """
    def run(
        self,
        cmd: Sequence[str],
        *,
        capture: bool = True,
        timeout_sec: Optional[int] = None,
    ) -> RunOutcome: ...
