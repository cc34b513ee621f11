"""Shared constants and enumerations for the grid cypher index."""

from __future__ import annotations

from enum import Enum, IntFlag
from types import MappingProxyType
from typing import List, Mapping, Tuple

Step = Tuple[int, int]


class Direction(IntFlag):
    """Reading directions; members combine with ``|`` into a direction set."""

    RIGHT = 1
    LEFT = 2
    UP = 4
    DOWN = 8
    DIAGONAL = 16
    RIGHT_UP = 32
    RIGHT_DOWN = 64
    LEFT_UP = 128
    LEFT_DOWN = 256

    def flags(self) -> List["Direction"]:
        """Split the set into single flags, in enumeration order."""

        return [flag for flag in DIRECTION_ORDER if self & flag]

    def __str__(self) -> str:
        return "|".join(DIRECTION_NAMES[flag] for flag in self.flags())

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """Parse ``"right|left"`` or ``"right,left"`` into a direction set."""

        result = cls(0)
        for token in text.replace(",", "|").split("|"):
            name = token.strip().lower()
            if not name:
                continue
            if name not in _FLAGS_BY_NAME:
                raise ValueError(
                    f"Unknown direction {token!r}; expected one of {sorted(_FLAGS_BY_NAME)}"
                )
            result |= _FLAGS_BY_NAME[name]
        return result


class DiagonalMode(str, Enum):
    """How diagonals are indexed when every direction is requested."""

    COMBINED = "combined"
    SEPARATE = "separate"


class ConstructionMode(str, Enum):
    """Phrase reconstruction algorithms."""

    LTR = "ltr"
    LONGEST = "longest"


# Tie-break order whenever several directions are queried together.
DIRECTION_ORDER: Tuple[Direction, ...] = (
    Direction.RIGHT,
    Direction.LEFT,
    Direction.UP,
    Direction.DOWN,
    Direction.DIAGONAL,
    Direction.RIGHT_UP,
    Direction.RIGHT_DOWN,
    Direction.LEFT_UP,
    Direction.LEFT_DOWN,
)

DIRECTION_NAMES: Mapping[Direction, str] = MappingProxyType(
    {
        Direction.RIGHT: "right",
        Direction.LEFT: "left",
        Direction.UP: "up",
        Direction.DOWN: "down",
        Direction.DIAGONAL: "diagonal",
        Direction.RIGHT_UP: "right-up",
        Direction.RIGHT_DOWN: "right-down",
        Direction.LEFT_UP: "left-up",
        Direction.LEFT_DOWN: "left-down",
    }
)

_FLAGS_BY_NAME: Mapping[str, Direction] = MappingProxyType(
    {name: flag for flag, name in DIRECTION_NAMES.items()}
)

ORTHOGONAL_STEPS: Tuple[Step, ...] = ((0, 1), (0, -1), (-1, 0), (1, 0))
DIAGONAL_STEPS: Tuple[Step, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))

DIRECTION_STEPS: Mapping[Direction, Tuple[Step, ...]] = MappingProxyType(
    {
        Direction.RIGHT: (ORTHOGONAL_STEPS[0],),
        Direction.LEFT: (ORTHOGONAL_STEPS[1],),
        Direction.UP: (ORTHOGONAL_STEPS[2],),
        Direction.DOWN: (ORTHOGONAL_STEPS[3],),
        Direction.DIAGONAL: DIAGONAL_STEPS,
        Direction.RIGHT_UP: ((-1, 1),),
        Direction.RIGHT_DOWN: ((1, 1),),
        Direction.LEFT_UP: ((-1, -1),),
        Direction.LEFT_DOWN: ((1, -1),),
    }
)

ORTHOGONAL_DIRECTIONS = Direction.RIGHT | Direction.LEFT | Direction.UP | Direction.DOWN
SEPARATE_DIAGONALS = (
    Direction.RIGHT_UP | Direction.RIGHT_DOWN | Direction.LEFT_UP | Direction.LEFT_DOWN
)


def steps_for(direction: Direction) -> Tuple[Step, ...]:
    """Return the (row, col) step vectors walked for a single flag."""

    try:
        return DIRECTION_STEPS[Direction(direction)]
    except KeyError:
        raise ValueError(f"{direction!r} is not a single direction flag") from None


def all_directions(mode: DiagonalMode = DiagonalMode.COMBINED) -> Direction:
    """Every orthogonal direction plus the diagonals in the requested mode."""

    if DiagonalMode(mode) == DiagonalMode.SEPARATE:
        return ORTHOGONAL_DIRECTIONS | SEPARATE_DIAGONALS
    return ORTHOGONAL_DIRECTIONS | Direction.DIAGONAL
