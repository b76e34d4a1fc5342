# autocompress/domain/dataclasses/reports.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from autocompress.domain.entities.budget import BitrateBudget, SizeTarget
from autocompress.domain.entities.probe import ProbeResult


@dataclass
class CompressReport:
    """One compress run:
    - timing: started_at / finished_at
    - what was measured (probe) and decided (budget)
    - output_path is None for dry runs
    """
    input_path: Path
    size: SizeTarget
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    probe: Optional[ProbeResult] = None
    budget: Optional[BitrateBudget] = None
    output_path: Optional[Path] = None
    dry_run: bool = False

    def start(self) -> None:
        if self.started_at is None:
            self.started_at = datetime.now()

    def stop(self) -> None:
        self.finished_at = datetime.now()
