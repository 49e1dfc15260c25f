from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from sass_lint_vue.document import Dialect
from sass_lint_vue.issue import Diagnostic, DiagnosticBatch


@dataclass
class FakeEngine:
    """Reports one warning per listed line for every block it is given."""

    lines: list[int] = field(default_factory=list)
    severity: str = "warning"
    only_dialect: Dialect | None = None
    calls: list[tuple[str, Dialect, Path]] = field(default_factory=list)

    def lint_text(self, text: str, dialect: Dialect, path: Path) -> DiagnosticBatch:
        self.calls.append((text, dialect, path))
        batch = DiagnosticBatch(path=path)
        if self.only_dialect is not None and dialect != self.only_dialect:
            return batch
        for index, line in enumerate(self.lines):
            batch.messages.append(
                Diagnostic(
                    line=line,
                    column=1,
                    severity=self.severity,
                    rule_id="fake-rule",
                    message=f"problem {index}",
                    path=path,
                )
            )
        return batch


@pytest.fixture
def fake_engine():
    return FakeEngine


@pytest.fixture
def write_component(tmp_path: Path):
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
