from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from .issue import Diagnostic, DiagnosticBatch


def report(
    batches: Iterable[DiagnosticBatch],
    base_dir: Path,
    max_warnings: int | None = None,
) -> int:
    """Print every diagnostic and return the process exit status."""
    errors = 0
    warnings = 0
    for batch in batches:
        for message in batch.messages:
            print(format_diagnostic(message, base_dir))
        errors += batch.error_count
        warnings += batch.warning_count

    total = errors + warnings
    if not total:
        print("No issues found.")
        return 0
    print(f"{total} problem(s) found ({errors} error(s), {warnings} warning(s)).")
    if errors:
        return 1
    if max_warnings is not None and warnings > max_warnings:
        print(f"Too many warnings: {warnings} > {max_warnings}.")
        return 1
    return 0


def format_diagnostic(message: Diagnostic, base_dir: Path) -> str:
    path = _rel_path(message.path, base_dir)
    location = f"{path}:{message.line}:{message.column}"
    text = f"{location} [{message.severity}] {message.message}"
    if message.rule_id:
        text += f" ({message.rule_id})"
    return text


def _rel_path(path: Path, base_dir: Path) -> str:
    try:
        return os.path.relpath(path, base_dir)
    except ValueError:
        return str(path)
