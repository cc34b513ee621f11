"""Custom exception hierarchy for the grid cypher index."""

from __future__ import annotations


class CypherError(Exception):
    """Base exception for index and reconstruction failures."""


class CorpusLoadError(CypherError):
    """Raised when the corpus text cannot be read, fetched or decoded."""


class InvalidCharacterError(CypherError):
    """Raised when a grid cell outside a-z is met while building the index.

    ``offset`` counts the steps from the reported cell along the ray being
    inserted; it is zero once the exact cell is known.
    """

    def __init__(self, char: str, page: int, row: int, col: int, offset: int = 0) -> None:
        where = f"page {page}, row {row}, col {col}"
        if offset:
            where += f" (+{offset} along ray)"
        super().__init__(f"invalid character {char!r} in source at {where}")
        self.char = char
        self.page = page
        self.row = row
        self.col = col
        self.offset = offset


class EmptyPhraseError(CypherError):
    """Raised when a phrase has no letters left to encode."""

    def __init__(self, phrase: str) -> None:
        super().__init__(f"invalid phrase {phrase!r}")
        self.phrase = phrase


class LetterNotFoundError(CypherError):
    """Raised by greedy reconstruction when no run starts with the next letter."""

    def __init__(self, letter: str) -> None:
        super().__init__(f"letter {letter!r} not found")
        self.letter = letter


class PhraseUnmatchableError(CypherError):
    """Raised by longest-run reconstruction when no offset yields a candidate."""

    def __init__(self, phrase: str) -> None:
        super().__init__(f"unable to complete phrase {phrase!r}")
        self.phrase = phrase
