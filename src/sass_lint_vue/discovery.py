from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator

from .document import COMPONENT_SUFFIX
from .errors import DiscoveryError

logger = logging.getLogger(__name__)


def is_component_file(path: Path) -> bool:
    return path.suffix == COMPONENT_SUFFIX


def iter_vue_files(paths: Iterable[Path]) -> Iterator[Path]:
    """Yield the component files named by ``paths``, walking directories.

    Paths that cannot be traversed are logged and skipped.
    """
    for path in paths:
        if path.is_file():
            if is_component_file(path):
                yield path
            continue
        if not path.is_dir():
            _log_discovery_error(DiscoveryError(path, "no such file or directory"))
            continue
        yield from _walk(path)


def _walk(root: Path) -> Iterator[Path]:
    def on_error(exc: OSError) -> None:
        failed = Path(exc.filename) if exc.filename else root
        _log_discovery_error(DiscoveryError(failed, exc.strerror or str(exc)))

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error, followlinks=False):
        dirnames.sort()
        for filename in sorted(filenames):
            candidate = Path(dirpath) / filename
            if is_component_file(candidate):
                yield candidate


def _log_discovery_error(error: DiscoveryError) -> None:
    logger.error("invalid lint path: %s", error)
