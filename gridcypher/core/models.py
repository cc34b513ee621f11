"""Data records shared by the index, the reconstruction algorithms and the boundary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, NamedTuple

from .constants import Direction


class Location(NamedTuple):
    """Reading ``length`` characters from this cell spells the owning node's letters."""

    page: int
    row: int
    col: int
    length: int


class CypherPart(NamedTuple):
    """A location tagged with the direction it is read in."""

    page: int
    row: int
    col: int
    length: int
    direction: Direction

    def to_jsonable(self, offsets: "DisplayOffsets | None" = None) -> Dict[str, Any]:
        offsets = offsets or DisplayOffsets(page=0, row=0, col=0)
        return {
            "page": self.page + offsets.page,
            "row": self.row + offsets.row,
            "col": self.col + offsets.col,
            "length": self.length,
            "direction": str(self.direction),
        }


class SearchResult(NamedTuple):
    matched: int
    candidates: List[CypherPart]


class LongestMatch(NamedTuple):
    """Best run found by the longest-run scan, starting at phrase offset ``index``."""

    index: int
    matched: int
    candidates: List[CypherPart]


@dataclass(frozen=True)
class DisplayOffsets:
    """Offsets added to zero-based coordinates when presenting results."""

    page: int = 1
    row: int = 1
    col: int = 1

    def apply(self, part: CypherPart) -> CypherPart:
        return part._replace(
            page=part.page + self.page,
            row=part.row + self.row,
            col=part.col + self.col,
        )
