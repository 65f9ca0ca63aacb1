"""Notes parsing: map section and path line to Grid and instructions."""

from pathlib import Path
from typing import List, Optional, Tuple

from ..errors import MalformedInputError
from .grid import Grid
from .state import Instruction, Tile, Turn


def parse_map(lines: List[str], first_line: int = 1) -> Grid:
    """Build a Grid from map rows; line numbers in errors start at first_line."""
    rows = []
    for line_no, line in enumerate(lines, start=first_line):
        row = []
        for col, char in enumerate(line, start=1):
            tile = Tile.from_char(char)
            if tile is None:
                raise MalformedInputError(
                    f"Unrecognised map character {char!r}", line_no, col)
            row.append(tile)
        rows.append(row)
    if not rows:
        raise MalformedInputError("Map section is empty")
    return Grid(rows)


def parse_path(text: str, line_no: Optional[int] = None) -> List[Instruction]:
    """
    Tokenize a path such as "10R5L5" into instructions.

    Every digit run becomes one Instruction carrying the turn letter that
    follows it; the final run carries Turn.NONE.
    """
    text = text.strip()
    if not text:
        raise MalformedInputError("Path is empty", line_no)

    instructions = []
    number = None
    for col, char in enumerate(text, start=1):
        if '0' <= char <= '9':
            number = (number or 0) * 10 + int(char)
            continue

        if char not in ('L', 'R'):
            raise MalformedInputError(f"Unknown turn {char!r}", line_no, col)
        if number is None:
            raise MalformedInputError(f"Turn {char!r} has no step count", line_no, col)
        instructions.append(Instruction(number, Turn(char)))
        number = None

    if number is None:
        raise MalformedInputError("Path must end with a step count", line_no)
    instructions.append(Instruction(number, Turn.NONE))
    return instructions


def parse_notes(text: str) -> Tuple[Grid, List[Instruction]]:
    """Split notes into the map section and the path line."""
    lines = text.splitlines()

    # Map runs up to the first blank line
    blank = next((i for i, line in enumerate(lines) if not line.strip()), None)
    if blank is None:
        raise MalformedInputError("Notes have no blank line before the path")

    grid = parse_map(lines[:blank])

    path_lines = [(i, line) for i, line in enumerate(lines[blank + 1:], start=blank + 2)
                  if line.strip()]
    if not path_lines:
        raise MalformedInputError("Notes have no path line")
    if len(path_lines) > 1:
        raise MalformedInputError("Unexpected text after the path", path_lines[1][0])

    line_no, path = path_lines[0]
    return grid, parse_path(path, line_no)


def load_notes(notes_path: Path) -> Tuple[Grid, List[Instruction]]:
    """Read and parse a notes file."""
    with open(notes_path) as f:
        return parse_notes(f.read())
