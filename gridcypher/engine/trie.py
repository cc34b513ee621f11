"""Direction-aware trie over grid rays, with phrase reconstruction.

Every node stands for a lowercase letter sequence. For each reading
direction it keeps, in insertion order, the grid locations from which walking
that direction for the node's depth spells the sequence. A phrase is rebuilt
from the index either greedily left to right (:meth:`CypherTrie.construct_ltr`)
or by repeatedly taking the longest run anywhere in the remaining span and
resolving both sides (:meth:`CypherTrie.construct_longest`).
"""

from __future__ import annotations

import string
from typing import Dict, List, Optional, Union

from ..core.constants import DIRECTION_STEPS, Direction
from ..core.exceptions import (EmptyPhraseError, InvalidCharacterError, LetterNotFoundError,
                               PhraseUnmatchableError)
from ..core.models import CypherPart, Location, LongestMatch, SearchResult
from .selection import RandomSelection, SelectionStrategy, clamp_choice, first_candidate


ALPHABET_SIZE = 26

# Both cases map to the same slot; anything else is not indexable.
LETTER_INDEX: Dict[str, int] = {
    **{char: index for index, char in enumerate(string.ascii_lowercase)},
    **{char: index for index, char in enumerate(string.ascii_uppercase)},
}


def strip_phrase(phrase: str) -> str:
    return phrase.replace(" ", "").lower()


class TrieNode:
    __slots__ = ("children", "directions", "locations")

    def __init__(self) -> None:
        self.children: List[Optional[TrieNode]] = [None] * ALPHABET_SIZE
        self.directions: int = 0
        self.locations: Dict[Direction, List[Location]] = {}

    def add_location(self, direction: Direction, page: int, row: int, col: int, length: int) -> None:
        self.locations.setdefault(direction, []).append(Location(page, row, col, length))
        self.directions |= direction

    def locations_for(self, directions: Direction) -> List[CypherPart]:
        """Tagged locations of every requested direction, in enumeration order."""

        parts: List[CypherPart] = []
        for flag in Direction(directions).flags():
            for location in self.locations.get(flag, ()):
                parts.append(CypherPart(*location, direction=flag))
        return parts


class CypherTrie:
    """Prefix index of grid rays; read-only once built."""

    def __init__(self, selection: Optional[SelectionStrategy] = None) -> None:
        self.root = TrieNode()
        self._selection: SelectionStrategy = selection or first_candidate

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    @property
    def selection(self) -> SelectionStrategy:
        return self._selection

    def set_selection(self, selection: SelectionStrategy) -> None:
        self._selection = selection

    def with_random_selection(self, seed: Optional[int] = None) -> "CypherTrie":
        self._selection = RandomSelection(seed)
        return self

    def _select(self, candidates: List[CypherPart]) -> CypherPart:
        return candidates[clamp_choice(self._selection(len(candidates)), len(candidates))]

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------
    def insert_row(self, direction: Direction, page: int, row: int, letters: str) -> None:
        """Insert every suffix of ``letters``, the suffix at ``i`` starting in column ``i``."""

        for col in range(len(letters)):
            self.insert_ray(direction, page, row, col, letters[col:])

    def insert_ray(self, direction: Direction, page: int, row: int, col: int, letters: str) -> None:
        """Record ``(page, row, col, k)`` at the node reached after each ``k`` letters."""

        if direction not in DIRECTION_STEPS:
            raise ValueError(f"{direction!r} is not a single direction flag")
        flag = Direction(direction)
        current = self.root
        for depth, char in enumerate(letters, start=1):
            index = LETTER_INDEX.get(char)
            if index is None:
                raise InvalidCharacterError(char, page, row, col, offset=depth - 1)
            child = current.children[index]
            if child is None:
                child = current.children[index] = TrieNode()
            current = child
            current.add_location(flag, page, row, col, depth)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def search(self, term: str, directions: Direction) -> SearchResult:
        """Walk ``term`` as far as the index allows for ``directions``.

        Returns the matched length and the candidates of the deepest node
        reached. A child whose direction mask misses ``directions`` ends the
        walk just like a missing child.
        """

        return self._walk(term.lower(), 0, directions)

    def _walk(self, lowered: str, start: int, directions: Direction) -> SearchResult:
        mask = int(directions)
        current = self.root
        for position in range(start, len(lowered)):
            index = LETTER_INDEX.get(lowered[position])
            child = current.children[index] if index is not None else None
            if child is None or not child.directions & mask:
                return SearchResult(position - start, current.locations_for(directions))
            current = child
        return SearchResult(len(lowered) - start, current.locations_for(directions))

    def find_longest(self, phrase: str, directions: Direction) -> LongestMatch:
        """Longest run over ascending offsets, stopping once a run exceeds half the phrase.

        The first offset wins ties. The early stop means a longer run further
        along may be missed.
        """

        lowered = phrase.lower()
        best = LongestMatch(index=0, matched=0, candidates=[])
        half = len(lowered) // 2
        for offset in range(len(lowered)):
            matched, candidates = self._walk(lowered, offset, directions)
            if matched > best.matched:
                best = LongestMatch(index=offset, matched=matched, candidates=candidates)
            if matched > half:
                break
        return best

    # ------------------------------------------------------------------
    # Phrase reconstruction
    # ------------------------------------------------------------------
    def construct_ltr(self, phrase: str, directions: Direction) -> List[CypherPart]:
        """Cover the phrase left to right, always taking the longest run at the cursor."""

        stripped = strip_phrase(phrase)
        if not stripped:
            raise EmptyPhraseError(phrase)

        parts: List[CypherPart] = []
        cursor = 0
        while cursor < len(stripped):
            matched, candidates = self._walk(stripped, cursor, directions)
            if matched < 1 or not candidates:
                raise LetterNotFoundError(stripped[cursor])
            parts.append(self._select(candidates))
            cursor += matched
        return parts

    def construct_longest(self, phrase: str, directions: Direction) -> List[CypherPart]:
        """Take the longest run in the span, then resolve the prefix and the suffix around it.

        Pending work is kept on an explicit stack: pushing suffix, chosen run,
        then prefix makes pops follow prefix-run-suffix order, so the output
        matches a depth-first recursive split.
        """

        stripped = strip_phrase(phrase)
        if not stripped:
            raise EmptyPhraseError(phrase)

        parts: List[CypherPart] = []
        pending: List[Union[str, CypherPart]] = [stripped]
        while pending:
            task = pending.pop()
            if not isinstance(task, str):
                parts.append(task)
                continue

            match = self.find_longest(task, directions)
            if not match.candidates:
                raise PhraseUnmatchableError(task)
            chosen = self._select(match.candidates)
            if match.matched == len(task):
                parts.append(chosen)
                continue

            prefix = task[:match.index]
            suffix = task[match.index + match.matched:]
            if suffix:
                pending.append(suffix)
            pending.append(chosen)
            if prefix:
                pending.append(prefix)
        return parts

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------
    def node_count(self) -> int:
        """Number of nodes below the root."""

        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            for child in node.children:
                if child is not None:
                    count += 1
                    stack.append(child)
        return count

    def location_count(self) -> int:
        total = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            total += sum(len(locations) for locations in node.locations.values())
            stack.extend(child for child in node.children if child is not None)
        return total
