from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from .errors import ParseError, ReadError

logger = logging.getLogger(__name__)

COMPONENT_SUFFIX = ".vue"
STYLE_TAG = "style"
DIALECT_ATTRIBUTE = "lang"


class Dialect(StrEnum):
    SCSS = "scss"
    SASS = "sass"

    @classmethod
    def parse(cls, value: str | None) -> "Dialect | None":
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# Blocks are collected one dialect at a time, in this order.
EXTRACTION_ORDER = (Dialect.SCSS, Dialect.SASS)


@dataclass(frozen=True)
class SourceDocument:
    path: Path
    text: str


@dataclass(frozen=True)
class StyleBlock:
    content: str
    dialect: Dialect


def read_document(path: Path) -> SourceDocument:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ReadError(path, exc.strerror or str(exc)) from exc
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(path, f"not valid UTF-8 ({exc.reason})") from exc
    return SourceDocument(path=path, text=text)


def find_style_blocks(text: str, path: Path | None = None) -> list[StyleBlock]:
    """Return the SCSS and Sass style blocks of a component's markup.

    All SCSS blocks come first, then all Sass blocks, each group in document
    order. ``<style>`` tags without a supported ``lang`` are skipped.
    """
    try:
        soup = BeautifulSoup(text, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(path or Path("<text>"), str(exc)) from exc

    grouped: dict[Dialect, list[StyleBlock]] = {dialect: [] for dialect in EXTRACTION_ORDER}
    for tag in soup.find_all(STYLE_TAG):
        dialect = Dialect.parse(tag.get(DIALECT_ATTRIBUTE))
        if dialect is None:
            continue
        if not tag.contents:
            logger.debug("skipping empty %s block in %s", dialect, path or "<text>")
            continue
        grouped[dialect].append(StyleBlock(content=str(tag.contents[0]), dialect=dialect))
    return [block for dialect in EXTRACTION_ORDER for block in grouped[dialect]]
