"""Pretty-print helpers for cypher results and corpus pages."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Sequence, Set, Tuple

from ..core.models import CypherPart, DisplayOffsets

if TYPE_CHECKING:
    from ..engine.grid import CorpusGrid


def format_parts(parts: Sequence[CypherPart], offsets: Optional[DisplayOffsets] = None) -> str:
    """Render parts as ``page row col length`` groups separated by spaces."""

    offsets = offsets or DisplayOffsets()
    groups = []
    for part in parts:
        shown = offsets.apply(part)
        groups.append(f"{shown.page} {shown.row} {shown.col} {shown.length}")
    return " ".join(groups)


def parts_to_jsonable(
    parts: Iterable[CypherPart], offsets: Optional[DisplayOffsets] = None
) -> List[Dict[str, Any]]:
    return [part.to_jsonable(offsets) for part in parts]


def covered_cells(parts: Iterable[CypherPart], page: int) -> Set[Tuple[int, int]]:
    """Start cells of the parts that live on ``page``."""

    return {(part.row, part.col) for part in parts if part.page == page}


def format_page(
    grid: CorpusGrid,
    page: int,
    offsets: Optional[DisplayOffsets] = None,
    marked: Optional[Set[Tuple[int, int]]] = None,
) -> str:
    """Render one page with row and column headers; marked cells are uppercased."""

    offsets = offsets or DisplayOffsets()
    marked = marked or set()
    rows = grid.rows(page)
    width = max((len(row) for row in rows), default=0)
    header_cells = [f"{c + offsets.col:>3}" for c in range(width)]
    lines = [f"page {page + offsets.page}", "     " + "".join(header_cells)]
    lines.append("     " + "-" * (3 * width))
    for r, row in enumerate(rows):
        symbols = [
            char.upper() if (r, c) in marked else char.lower() for c, char in enumerate(row)
        ]
        lines.append(f"{r + offsets.row:>3} |" + "".join(f"{symbol:>3}" for symbol in symbols))
    return "\n".join(lines)


def print_cypher(
    parts: Sequence[CypherPart],
    offsets: Optional[DisplayOffsets] = None,
    *,
    stream=None,
) -> None:
    stream = stream or sys.stdout
    print("Generated cypher:", file=stream)
    print(format_parts(parts, offsets), file=stream)
