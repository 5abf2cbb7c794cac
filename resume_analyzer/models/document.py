"""
Batch processing records.

Each pipeline stage walks a directory and produces one ProcessedFile per
eligible input; the BatchReport collects them so the CLI can print a run
summary.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class ProcessedFile:
    """Outcome of processing one input file."""
    source: Path
    output: Optional[Path] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchReport:
    """All per-file outcomes of one batch run, in processing order."""
    stage: str
    files: list[ProcessedFile] = field(default_factory=list)

    def record(self, item: ProcessedFile) -> ProcessedFile:
        self.files.append(item)
        return item

    @property
    def succeeded(self) -> list[ProcessedFile]:
        return [f for f in self.files if f.ok]

    @property
    def failed(self) -> list[ProcessedFile]:
        return [f for f in self.files if not f.ok]

    @property
    def ok(self) -> bool:
        return not self.failed
