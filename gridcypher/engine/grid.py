"""Paginated character grid and ray extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

PAGE_SEPARATOR = "\n\n"
ROW_SEPARATOR = "\n"


def extract_ray(rows: Sequence[str], row: int, col: int, step_row: int, step_col: int) -> str:
    """Return the characters read from ``(row, col)`` along the step until leaving the page.

    Bounds are checked against each row's own length, so a short row ends the
    ray even if rows beyond it are long enough.
    """

    letters: List[str] = []
    r, c = row, col
    while 0 <= r < len(rows) and 0 <= c < len(rows[r]):
        letters.append(rows[r][c])
        r += step_row
        c += step_col
    return "".join(letters)


@dataclass(frozen=True)
class CorpusGrid:
    """Immutable collection of pages, each a tuple of rows of unequal length."""

    pages: Tuple[Tuple[str, ...], ...]

    @classmethod
    def from_pages(cls, pages: Sequence[Sequence[str]]) -> "CorpusGrid":
        return cls(pages=tuple(tuple(str(row) for row in page) for page in pages))

    @classmethod
    def from_text(cls, text: str) -> "CorpusGrid":
        """Split on blank lines into pages and on newlines into rows."""

        normalized = text.replace("\r\n", "\n")
        pages = [group.split(ROW_SEPARATOR) for group in normalized.split(PAGE_SEPARATOR)]
        LOGGER.debug("Split corpus text into %d pages", len(pages))
        return cls.from_pages(pages)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def cell_count(self) -> int:
        return sum(len(row) for page in self.pages for row in page)

    def rows(self, page: int) -> Tuple[str, ...]:
        return self.pages[page]

    def ray(self, page: int, row: int, col: int, step_row: int, step_col: int) -> str:
        if not 0 <= page < len(self.pages):
            return ""
        return extract_ray(self.pages[page], row, col, step_row, step_col)

    def cells(self) -> Iterator[Tuple[int, int, int, str]]:
        """Yield ``(page, row, col, char)`` in page, row, column order."""

        for page_index, page in enumerate(self.pages):
            for row_index, row in enumerate(page):
                for col_index, char in enumerate(row):
                    yield page_index, row_index, col_index, char
