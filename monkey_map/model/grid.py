"""Grid map management for Monkey Map simulation."""

import numpy as np
from typing import Dict, Iterator, List, Optional, Tuple

from ..errors import NoStartError, OutOfRangeError
from .state import Heading, Position, Tile


class Grid:
    """
    Rectangular tile map padded with VOID.

    Coordinate convention: Position(col, row) for API, [row, col] for array indexing.
    """

    def __init__(self, rows: List[List[Tile]]):
        self.height = len(rows)
        self.width = max((len(row) for row in rows), default=0)

        # Ragged rows are right-padded with VOID
        self.tiles = np.full((self.height, self.width), Tile.VOID, dtype=np.int8)
        for y, row in enumerate(rows):
            self.tiles[y, :len(row)] = [int(tile) for tile in row]

    def in_range(self, position: Position) -> bool:
        return 0 <= position.col < self.width and 0 <= position.row < self.height

    def tile_at(self, position: Position) -> Tile:
        """Return the tile at position; VOID is in range, off-grid is an error."""
        if not self.in_range(position):
            raise OutOfRangeError(position, self.width, self.height)
        return Tile(int(self.tiles[position.row, position.col]))

    def starting_position(self) -> Position:
        """Leftmost open tile in row 0."""
        if self.height:
            open_cols = np.flatnonzero(self.tiles[0] == Tile.OPEN)
            if open_cols.size:
                return Position(int(open_cols[0]), 0)
        raise NoStartError("Row 0 has no open tile")

    def is_boundary_exit(self, position: Position, heading: Heading) -> bool:
        """True if one step in heading leaves the grid or lands on VOID."""
        target = position.moved(heading)
        return not self.in_range(target) or self.tile_at(target) is Tile.VOID

    def boundary_exits(self) -> Iterator[Tuple[Position, Heading]]:
        """Yield every (position, heading) that steps off the map footprint."""
        rows, cols = np.nonzero(self.tiles != Tile.VOID)
        for row, col in zip(rows, cols):
            position = Position(int(col), int(row))
            for heading in Heading:
                if self.is_boundary_exit(position, heading):
                    yield position, heading

    def render(self, marks: Optional[Dict[Position, str]] = None) -> str:
        """Map text, with marks overriding the tile character at their cells."""
        marks = marks or {}
        lines = []
        for y in range(self.height):
            chars = [
                marks.get(Position(x, y), Tile(int(self.tiles[y, x])).char)
                for x in range(self.width)
            ]
            lines.append("".join(chars).rstrip())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
