from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"


@dataclass
class Diagnostic:
    line: int
    column: int
    severity: str
    rule_id: str
    message: str
    path: Path

    @property
    def is_error(self) -> bool:
        return self.severity == SEVERITY_ERROR


@dataclass
class DiagnosticBatch:
    """Messages the engine reported for one extracted style block."""

    path: Path
    messages: list[Diagnostic] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for message in self.messages if message.is_error)

    @property
    def warning_count(self) -> int:
        return sum(1 for message in self.messages if message.severity == SEVERITY_WARNING)


LintErrorSet = list[DiagnosticBatch]
