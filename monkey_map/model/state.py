"""Core value types and state snapshots for Monkey Map simulation."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Optional, Tuple


class Tile(IntEnum):
    """Cell classification. Values are the codes stored in the grid array."""
    VOID = 0
    OPEN = 1
    WALL = 2

    @classmethod
    def from_char(cls, char: str) -> Optional["Tile"]:
        """Return the tile for a map character, or None if unrecognised."""
        return _TILE_CHARS.get(char)

    @property
    def char(self) -> str:
        return _CHAR_TILES[self]


_TILE_CHARS = {' ': Tile.VOID, '.': Tile.OPEN, '#': Tile.WALL}
_CHAR_TILES = {tile: char for char, tile in _TILE_CHARS.items()}


class Turn(Enum):
    """Rotation applied after an instruction's steps."""
    LEFT = "L"
    RIGHT = "R"
    NONE = ""


class Heading(IntEnum):
    """
    Facing direction. The integer value is the password facing code.
    """
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def offset(self) -> Tuple[int, int]:
        """Unit (dx, dy) step for this heading, y growing downward."""
        return _OFFSETS[self]

    @property
    def reversed(self) -> "Heading":
        return _OPPOSITE[self]

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    def turned(self, turn: Turn) -> "Heading":
        """Rotate 90 degrees: LEFT counter-clockwise, RIGHT clockwise."""
        if turn is Turn.LEFT:
            return _COUNTER_CLOCKWISE[self]
        if turn is Turn.RIGHT:
            return _CLOCKWISE[self]
        return self


_OFFSETS = {
    Heading.RIGHT: (1, 0),
    Heading.DOWN: (0, 1),
    Heading.LEFT: (-1, 0),
    Heading.UP: (0, -1),
}

_OPPOSITE = {
    Heading.RIGHT: Heading.LEFT,
    Heading.DOWN: Heading.UP,
    Heading.LEFT: Heading.RIGHT,
    Heading.UP: Heading.DOWN,
}

_CLOCKWISE = {
    Heading.RIGHT: Heading.DOWN,
    Heading.DOWN: Heading.LEFT,
    Heading.LEFT: Heading.UP,
    Heading.UP: Heading.RIGHT,
}

_COUNTER_CLOCKWISE = {after: before for before, after in _CLOCKWISE.items()}

_SYMBOLS = {
    Heading.RIGHT: '>',
    Heading.DOWN: 'v',
    Heading.LEFT: '<',
    Heading.UP: '^',
}


@dataclass(frozen=True)
class Position:
    """Grid cell coordinate: col grows rightward, row grows downward."""
    col: int
    row: int

    def moved(self, heading: Heading) -> "Position":
        dx, dy = heading.offset
        return Position(self.col + dx, self.row + dy)

    def __str__(self) -> str:
        return f"({self.col}, {self.row})"


@dataclass(frozen=True)
class Instruction:
    """Walk `steps` tiles forward, then apply `turn`."""
    steps: int
    turn: Turn = Turn.NONE

    def __str__(self) -> str:
        return f"{self.steps}{self.turn.value}"


class Player:
    """Mutable walker state owned by a Simulator."""

    def __init__(self, position: Position, heading: Heading = Heading.RIGHT):
        self.position = position
        self.heading = heading

    def __repr__(self) -> str:
        return f"Player(pos={self.position}, heading={self.heading.name})"


@dataclass(frozen=True)
class SimulationState:
    """Snapshot of the run after one instruction has been applied."""
    step: int
    instruction: Instruction
    moved: int       # tiles actually walked for this instruction
    wrapped: int     # edge transitions taken for this instruction
    blocked: bool    # True if a wall cut the instruction short
    position: Position
    heading: Heading
    metrics: Dict[str, int]

    def to_csv_row(self) -> Dict:
        """Convert to CSV-compatible format."""
        return {
            "step": self.step,
            "steps": self.instruction.steps,
            "turn": self.instruction.turn.value or "-",
            "moved": self.moved,
            "wrapped": self.wrapped,
            "blocked": int(self.blocked),
            "col": self.position.col,
            "row": self.position.row,
            "heading": self.heading.name.lower(),
        }
