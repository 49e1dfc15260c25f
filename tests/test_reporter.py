from pathlib import Path

import pytest

from sass_lint_vue.issue import Diagnostic, DiagnosticBatch
from sass_lint_vue.reporter import format_diagnostic, report


def _diagnostic(tmp_path: Path, severity: str, line: int = 4) -> Diagnostic:
    return Diagnostic(
        line=line,
        column=3,
        severity=severity,
        rule_id="color-named",
        message="Unexpected named color",
        path=tmp_path / "src" / "App.vue",
    )


def test_format_diagnostic_uses_relative_path(tmp_path: Path) -> None:
    text = format_diagnostic(_diagnostic(tmp_path, "error"), tmp_path)

    assert text == "src/App.vue:4:3 [error] Unexpected named color (color-named)"


def test_report_without_batches_succeeds(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    assert report([], tmp_path) == 0
    assert "No issues found." in capsys.readouterr().out


def test_report_errors_fail(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    batch = DiagnosticBatch(path=tmp_path / "src" / "App.vue", messages=[_diagnostic(tmp_path, "error")])

    assert report([batch], tmp_path) == 1
    assert "1 problem(s) found (1 error(s), 0 warning(s))." in capsys.readouterr().out


def test_report_warnings_respect_max_warnings(tmp_path: Path) -> None:
    batch = DiagnosticBatch(
        path=tmp_path / "src" / "App.vue",
        messages=[_diagnostic(tmp_path, "warning", 1), _diagnostic(tmp_path, "warning", 2)],
    )

    assert report([batch], tmp_path) == 0
    assert report([batch], tmp_path, max_warnings=2) == 0
    assert report([batch], tmp_path, max_warnings=1) == 1
