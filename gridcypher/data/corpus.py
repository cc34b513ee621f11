"""Corpus loading: raw text split into pages and rows."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

from ..core.exceptions import CorpusLoadError
from ..engine.grid import CorpusGrid
from ..io.http_source import fetch_bytes, is_remote
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class CorpusConfig:
    """Where the corpus lives and how to decode it."""

    source: Path | str
    encoding: str = "utf-8"
    timeout_seconds: float = 30.0


def read_source(config: CorpusConfig) -> bytes:
    source = str(config.source)
    if is_remote(source):
        return fetch_bytes(source, timeout_seconds=config.timeout_seconds)

    path = Path(source)
    if not path.exists():
        raise CorpusLoadError(f"Missing corpus file: {path}")
    try:
        return path.read_bytes()
    except OSError as exc:
        raise CorpusLoadError(f"Cannot read corpus file {path}: {exc}") from exc


def parse_corpus(data: bytes, encoding: str = "utf-8") -> CorpusGrid:
    """Decode ``data``; pages are separated by a blank line, rows by a newline."""

    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise CorpusLoadError(f"Corpus is not valid {encoding}: {exc}") from exc
    return CorpusGrid.from_text(text)


def load_corpus(config: CorpusConfig) -> CorpusGrid:
    started = time.perf_counter()
    grid = parse_corpus(read_source(config), config.encoding)
    LOGGER.info(
        "Finished loading corpus %s: %d pages in %.1fms",
        config.source,
        grid.page_count,
        (time.perf_counter() - started) * 1000,
    )
    return grid


def load_corpus_path(source: Path | str) -> CorpusGrid:
    return load_corpus(CorpusConfig(source=source))
