"""Long-lived binding around a loaded corpus.

The service owns the grid and the index built for the most recently requested
direction set. Asking for another set builds a fresh trie and swaps it in;
callers already holding the previous trie keep using it undisturbed. Text and
record renderers translate failures into the ``"error"`` and ``"not found"``
sentinels expected by front ends.
"""

from __future__ import annotations

import hashlib
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from ..core.constants import ConstructionMode, Direction
from ..core.exceptions import CypherError
from ..core.models import CypherPart, DisplayOffsets
from ..data.normalization import clean_query
from .builder import build_trie
from .grid import CorpusGrid
from .selection import RandomSelection, SelectionStrategy, first_candidate
from .trie import CypherTrie
from ..utils.logger import get_logger
from ..utils.pretty import format_parts, parts_to_jsonable


LOGGER = get_logger(__name__)

ERROR_SENTINEL = "error"
NOT_FOUND_SENTINEL = "not found"


@dataclass
class ServiceConfig:
    directions: Direction = Direction.RIGHT
    mode: ConstructionMode = ConstructionMode.LTR
    offsets: DisplayOffsets = field(default_factory=DisplayOffsets)
    random_selection: bool = False
    seed: Optional[int] = None
    build_on_start: bool = True

    def make_selection(self) -> SelectionStrategy:
        if self.random_selection:
            return RandomSelection(self.seed)
        return first_candidate


class CypherService:
    """Builds, caches and queries the index for one corpus."""

    def __init__(self, grid: CorpusGrid, config: Optional[ServiceConfig] = None) -> None:
        self.grid = grid
        self.config = config or ServiceConfig()
        self.selection = self.config.make_selection()
        self._lock = threading.Lock()
        self._index: Optional[Tuple[Direction, CypherTrie]] = None
        if self.config.build_on_start:
            self.trie_for(self.config.directions)

    @property
    def directions(self) -> Optional[Direction]:
        index = self._index
        return index[0] if index else None

    def trie_for(self, directions: Direction) -> CypherTrie:
        """Return the trie for ``directions``, rebuilding when the set changed."""

        directions = Direction(directions)
        index = self._index
        if index is not None and index[0] == directions:
            return index[1]
        with self._lock:
            index = self._index
            if index is not None and index[0] == directions:
                return index[1]
            if index is not None:
                LOGGER.info("Direction set changed %s -> %s; rebuilding index", str(index[0]), str(directions))
            trie = build_trie(self.grid, directions, self.selection)
            self._index = (directions, trie)
            return trie

    def generate(
        self,
        query: str,
        directions: Optional[Direction] = None,
        mode: Optional[ConstructionMode] = None,
    ) -> List[CypherPart]:
        """Encode ``query``; non-letters are dropped first. Core errors propagate."""

        directions = self.config.directions if directions is None else Direction(directions)
        mode = ConstructionMode(mode or self.config.mode)
        phrase = clean_query(query)
        LOGGER.info("Query %r w/ options (%s, %s)", phrase, str(directions), mode.value)

        trie = self.trie_for(directions)
        started = time.perf_counter()
        if mode == ConstructionMode.LTR:
            parts = trie.construct_ltr(phrase, directions)
        else:
            parts = trie.construct_longest(phrase, directions)
        LOGGER.info(
            "Finished generating cypher: %d parts in %.1fms",
            len(parts),
            (time.perf_counter() - started) * 1000,
        )
        return parts

    def generate_text(
        self,
        query: str,
        directions: Optional[Direction] = None,
        mode: Optional[ConstructionMode] = None,
    ) -> str:
        try:
            parts = self.generate(query, directions, mode)
        except CypherError as exc:
            LOGGER.info("Failed to generate cypher for %r: %s", query, exc)
            return ERROR_SENTINEL
        if not parts:
            return NOT_FOUND_SENTINEL
        return format_parts(parts, self.config.offsets) + "\n"

    def generate_records(
        self,
        query: str,
        directions: Optional[Direction] = None,
        mode: Optional[ConstructionMode] = None,
    ) -> Union[List[Dict[str, Any]], str]:
        try:
            parts = self.generate(query, directions, mode)
        except CypherError as exc:
            LOGGER.info("Failed to generate cypher for %r: %s", query, exc)
            return ERROR_SENTINEL
        if not parts:
            return NOT_FOUND_SENTINEL
        return parts_to_jsonable(parts, self.config.offsets)

    @staticmethod
    def digest(text: str) -> str:
        """SHA-512 hex digest of ``text``, exposed alongside the index."""

        return hashlib.sha512(text.encode("utf-8")).hexdigest()
