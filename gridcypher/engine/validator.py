"""Deterministic checks run over a corpus before indexing it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..core.exceptions import InvalidCharacterError
from .grid import CorpusGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def is_index_letter(char: str) -> bool:
    lowered = char.lower()
    return len(lowered) == 1 and "a" <= lowered <= "z"


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class CorpusValidator:
    """Reports every cell the index builder would reject."""

    def __init__(self, max_messages: Optional[int] = None) -> None:
        self.max_messages = max_messages

    def validate(self, grid: CorpusGrid) -> ValidationResult:
        messages: List[str] = []
        total = 0
        for page, row, col, char in grid.cells():
            if is_index_letter(char):
                continue
            total += 1
            if self.max_messages is None or len(messages) < self.max_messages:
                messages.append(f"Invalid character {char!r} at page {page}, row {row}, col {col}")
        if total > len(messages):
            messages.append(f"... {total - len(messages)} more invalid characters")
        if total:
            LOGGER.error("Corpus validation found %d invalid characters", total)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def ensure_valid(self, grid: CorpusGrid) -> None:
        for page, row, col, char in grid.cells():
            if not is_index_letter(char):
                raise InvalidCharacterError(char, page, row, col)
