"""Exception types for Monkey Map simulation."""

from typing import Optional


class MonkeyMapError(Exception):
    """Base class for every fault raised while loading or simulating a map."""


class MalformedInputError(MonkeyMapError):
    """Notes text contains an unknown map character or path token."""

    def __init__(self, message: str, line: Optional[int] = None,
                 column: Optional[int] = None):
        self.line = line
        self.column = column
        if line is not None:
            location = f"line {line}" if column is None else f"line {line}, column {column}"
            message = f"{message} ({location})"
        super().__init__(message)


class NoStartError(MonkeyMapError):
    """Row 0 of the map has no open tile to start on."""


class OutOfRangeError(MonkeyMapError, IndexError):
    """A tile read addressed a cell outside the backing rectangle."""

    def __init__(self, position, width: int, height: int):
        self.position = position
        super().__init__(f"Position {position} is outside the {width}x{height} grid")


class UnmappedEdgeError(MonkeyMapError, KeyError):
    """The active edge table has no entry for a boundary exit."""

    def __init__(self, position, heading):
        self.position = position
        self.heading = heading
        super().__init__(position, heading)

    def __str__(self) -> str:
        return f"No edge transition for {self.position} heading {self.heading.name.lower()}"
