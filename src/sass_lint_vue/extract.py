from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import Config
from .document import Dialect, SourceDocument, find_style_blocks
from .text import line_offset, strip_base_indent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionRecord:
    content: str
    dialect: Dialect
    line_offset: int


def extract_templates(
    text: str,
    base_indent: int | None = None,
    path: Path | None = None,
) -> list[ExtractionRecord]:
    """Pull every lintable style block out of a component's text.

    The line offset is located with the raw block text,
    before any indent is stripped.
    """
    records: list[ExtractionRecord] = []
    for block in find_style_blocks(text, path):
        records.append(
            ExtractionRecord(
                content=strip_base_indent(block.content, base_indent),
                dialect=block.dialect,
                line_offset=line_offset(block.content, text),
            )
        )
    logger.debug("extracted %d style block(s) from %s", len(records), path or "<text>")
    return records


def extract_file_templates(document: SourceDocument, config: Config) -> list[ExtractionRecord]:
    return extract_templates(document.text, config.base_indent, document.path)
