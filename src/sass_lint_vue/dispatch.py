from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .engine import LintEngine
from .extract import ExtractionRecord
from .issue import DiagnosticBatch


def shift_lines(batch: DiagnosticBatch, offset: int) -> DiagnosticBatch:
    for message in batch.messages:
        message.line += offset
    return batch


def dispatch_records(
    records: Iterable[ExtractionRecord],
    engine: LintEngine,
    path: Path,
) -> list[DiagnosticBatch]:
    """Lint each record and move its diagnostics back to file coordinates.

    Batches without messages are dropped.
    """
    batches: list[DiagnosticBatch] = []
    for record in records:
        batch = engine.lint_text(record.content, record.dialect, path)
        if not batch.messages:
            continue
        batches.append(shift_lines(batch, record.line_offset))
    return batches
