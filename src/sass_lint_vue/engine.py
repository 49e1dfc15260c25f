"""Adapters for the external style-linting engine.

An engine receives one extracted block and reports diagnostics whose line
numbers count from 1 at the first line of that block.
"""

from __future__ import annotations

import json
import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from .document import Dialect
from .errors import EngineError
from .issue import SEVERITY_WARNING, Diagnostic, DiagnosticBatch

logger = logging.getLogger(__name__)

DEFAULT_STYLELINT = "stylelint"
CUSTOM_SYNTAX = {
    Dialect.SCSS: "postcss-scss",
    Dialect.SASS: "postcss-sass",
}
# 2 means lint problems were found.
STYLELINT_OK_CODES = (0, 2)


class LintEngine(Protocol):
    def lint_text(self, text: str, dialect: Dialect, path: Path) -> DiagnosticBatch:
        ...


@dataclass
class StylelintEngine:
    """Runs the ``stylelint`` command line tool on stdin."""

    executable: str = DEFAULT_STYLELINT
    config_file: Path | None = None
    extra_args: list[str] = field(default_factory=list)

    def command(self, dialect: Dialect, path: Path) -> list[str]:
        args = [
            self.executable,
            "--stdin-filename",
            str(path),
            "--custom-syntax",
            CUSTOM_SYNTAX[dialect],
            "--formatter",
            "json",
        ]
        if self.config_file is not None:
            args.extend(["--config", str(self.config_file)])
        args.extend(self.extra_args)
        return args

    def lint_text(self, text: str, dialect: Dialect, path: Path) -> DiagnosticBatch:
        args = self.command(dialect, path)
        logger.debug("running %s", " ".join(args))
        try:
            completed = subprocess.run(args, input=text, capture_output=True, text=True, check=False)
        except OSError as exc:
            raise EngineError(f"cannot run {self.executable}: {exc}") from exc
        if completed.returncode not in STYLELINT_OK_CODES:
            detail = completed.stderr.strip() or completed.stdout.strip()
            raise EngineError(f"{self.executable} exited with status {completed.returncode}: {detail}")
        # Newer stylelint versions write the JSON report to stderr.
        output = completed.stdout.strip() or completed.stderr.strip()
        return parse_stylelint_output(output, path)


def parse_stylelint_output(output: str, path: Path) -> DiagnosticBatch:
    try:
        results = json.loads(output) if output else []
    except json.JSONDecodeError as exc:
        raise EngineError(f"unreadable stylelint output: {exc}") from exc
    if not isinstance(results, list):
        raise EngineError("unexpected stylelint output: expected a list of results")

    batch = DiagnosticBatch(path=path)
    for result in results:
        for option_warning in result.get("invalidOptionWarnings", []):
            logger.warning("stylelint option warning: %s", option_warning.get("text", option_warning))
        for warning in result.get("warnings", []):
            batch.messages.append(_diagnostic(warning, path))
    return batch


def _diagnostic(warning: dict[str, Any], path: Path) -> Diagnostic:
    return Diagnostic(
        line=int(warning.get("line", 1)),
        column=int(warning.get("column", 1)),
        severity=str(warning.get("severity", SEVERITY_WARNING)),
        rule_id=str(warning.get("rule", "")),
        message=str(warning.get("text", "")),
        path=path,
    )
