"""Build a :class:`CypherTrie` over every reading ray of a grid."""

from __future__ import annotations

import logging
import time
from typing import Optional

from ..core.constants import Direction, steps_for
from ..core.exceptions import InvalidCharacterError
from .grid import CorpusGrid, extract_ray
from .selection import SelectionStrategy
from .trie import CypherTrie
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def build_trie(
    grid: CorpusGrid,
    directions: Direction,
    selection: Optional[SelectionStrategy] = None,
) -> CypherTrie:
    """Index every cell of ``grid`` for each flag in ``directions``.

    Cells are visited page by page, row by row, column by column; for each
    cell the flags are walked in enumeration order, and a combined diagonal
    flag walks its four vectors in order. That visiting order is the candidate
    order the deterministic selection strategy relies on.

    A non-letter anywhere on a walked ray aborts the whole build with
    :class:`InvalidCharacterError` pointing at the offending cell.
    """

    directions = Direction(directions)
    walks = [(flag, steps_for(flag)) for flag in directions.flags()]
    trie = CypherTrie(selection=selection)

    LOGGER.info(
        "Building index over %d pages, %d cells, directions=%s",
        grid.page_count,
        grid.cell_count,
        str(directions) or "none",
    )
    started = time.perf_counter()
    for page_index, page in enumerate(grid.pages):
        for row_index, row in enumerate(page):
            for col_index in range(len(row)):
                for flag, steps in walks:
                    for step_row, step_col in steps:
                        letters = extract_ray(page, row_index, col_index, step_row, step_col)
                        try:
                            trie.insert_ray(flag, page_index, row_index, col_index, letters)
                        except InvalidCharacterError as exc:
                            located = InvalidCharacterError(
                                exc.char,
                                page_index,
                                row_index + step_row * exc.offset,
                                col_index + step_col * exc.offset,
                            )
                            LOGGER.error("Index build aborted: %s", located)
                            raise located from exc

    elapsed_ms = (time.perf_counter() - started) * 1000
    LOGGER.info("Finished building index in %.1fms", elapsed_ms)
    if LOGGER.isEnabledFor(logging.DEBUG):
        LOGGER.debug(
            "Index holds %d nodes and %d locations",
            trie.node_count(),
            trie.location_count(),
        )
    return trie
