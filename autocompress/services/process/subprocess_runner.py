# autocompress/services/process/subprocess_runner.py
from __future__ import annotations

import subprocess
from typing import Optional, Sequence

from autocompress.common.logging import get_logger
from autocompress.common.probe.ffmpeg_helpers import format_cmd
from autocompress.domain.ports.process import ProcessRunnerPort, RunOutcome

logger = get_logger()


class SubprocessRunner(ProcessRunnerPort):
    """
    ProcessRunnerPort on top of subprocess.run.
    capture=True merges stderr into stdout (ffmpeg reports on stderr);
    capture=False inherits the caller's terminal.
    """

    def run(
        self,
        cmd: Sequence[str],
        *,
        capture: bool = True,
        timeout_sec: Optional[int] = None,
    ) -> RunOutcome:
        logger.debug("exec: %s", format_cmd(cmd))
        if capture:
            cp = subprocess.run(
                list(cmd),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                stdin=subprocess.DEVNULL,
                text=True,
                errors="replace",
                timeout=timeout_sec,
                check=False,  # callers decide what a non-zero exit means
            )
            return RunOutcome(output=cp.stdout or "", returncode=cp.returncode)

        cp = subprocess.run(list(cmd), timeout=timeout_sec, check=False)
        return RunOutcome(output="", returncode=cp.returncode)
