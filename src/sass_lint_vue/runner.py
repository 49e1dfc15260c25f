from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .config import Config
from .discovery import iter_vue_files
from .dispatch import dispatch_records
from .document import read_document
from .engine import LintEngine
from .errors import FileError
from .extract import extract_file_templates
from .issue import DiagnosticBatch, LintErrorSet

logger = logging.getLogger(__name__)


def lint_file(path: Path, engine: LintEngine, config: Config) -> list[DiagnosticBatch]:
    """Lint the style blocks of one component file.

    Read and parse failures are raised as ``ReadError``/``ParseError``.
    """
    document = read_document(path)
    records = extract_file_templates(document, config)
    return dispatch_records(records, engine, document.path)


def run(paths: Iterable[Path], engine: LintEngine, config: Config) -> LintErrorSet:
    """Lint every component file under ``paths`` and collect the batches.

    A file that cannot be read or parsed is logged and contributes nothing.
    """
    results: LintErrorSet = []
    for path in iter_vue_files(paths):
        logger.debug("linting %s", path)
        try:
            batches = lint_file(path.resolve(), engine, config)
        except FileError as exc:
            logger.error("skipping %s", exc)
            continue
        results.extend(batches)
    return results
