"""Password computation from the final player state."""

from .state import Heading, Position


def heading_code(heading: Heading) -> int:
    """Facing code: right 0, down 1, left 2, up 3."""
    return int(heading)


def score(position: Position, heading: Heading) -> int:
    """1000 * row + 4 * column + facing, with 1-based row and column."""
    return 1000 * (position.row + 1) + 4 * (position.col + 1) + heading_code(heading)
