"""
Edge transition resolution for Monkey Map simulation.

A step that would leave the map footprint is re-routed by one of two
resolvers, both answering resolve(position, heading) -> (position, heading):

- FlatWrap scans back from the opposite side of the same row or column.
- CubeWrap looks the exit up in a table expanded from the segment pairs of a
  folded cube net.

Neither resolver checks the destination tile; the Simulator rejects walls.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, TYPE_CHECKING

import numpy as np

from ..errors import OutOfRangeError, UnmappedEdgeError
from .grid import Grid
from .state import Heading, Position, Tile

if TYPE_CHECKING:
    from ..config import CubeNetConfig, SimulationConfig

logger = logging.getLogger(__name__)

Transition = Tuple[Position, Heading]


class Edge(Enum):
    """Side of a cube face in the flat net."""
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def exit_heading(self) -> Heading:
        """Heading that walks off the face across this edge."""
        return _EXIT_HEADINGS[self]

    @property
    def entry_heading(self) -> Heading:
        """Heading taken on when stepping onto the face across this edge."""
        return _EXIT_HEADINGS[self].reversed


_EXIT_HEADINGS = {
    Edge.TOP: Heading.UP,
    Edge.BOTTOM: Heading.DOWN,
    Edge.LEFT: Heading.LEFT,
    Edge.RIGHT: Heading.RIGHT,
}


@dataclass(frozen=True)
class SegmentPair:
    """
    One glued cube edge: the run along source_edge of source_face meets the
    run along dest_edge of dest_face.

    Runs are ordered left-to-right for TOP/BOTTOM and top-to-bottom for
    LEFT/RIGHT. With axis_reversed the i-th source cell meets the i-th cell
    from the far end of the destination run.
    """
    source_face: int
    source_edge: Edge
    dest_face: int
    dest_edge: Edge
    axis_reversed: bool = False
    heading_forward: Optional[Heading] = None
    heading_backward: Optional[Heading] = None

    def __post_init__(self):
        if self.heading_forward is None:
            object.__setattr__(self, 'heading_forward', self.dest_edge.entry_heading)
        if self.heading_backward is None:
            object.__setattr__(self, 'heading_backward', self.source_edge.entry_heading)


@dataclass
class CubeNet:
    """Fixed six-face layout: face origins in face units plus glued edges."""
    face_size: int
    faces: Dict[int, Tuple[int, int]]  # face id -> (face_col, face_row)
    segments: List[SegmentPair] = field(default_factory=list)

    @classmethod
    def from_config(cls, net_config: "CubeNetConfig") -> "CubeNet":
        """Convert raw layout config into typed segment records."""
        segments = []
        for spec in net_config.segments:
            try:
                source_edge = Edge(spec.source_edge)
                dest_edge = Edge(spec.dest_edge)
            except ValueError:
                raise ValueError(
                    f"Unknown edge in segment {spec.source_face}/{spec.source_edge} -> "
                    f"{spec.dest_face}/{spec.dest_edge}") from None
            segments.append(SegmentPair(
                source_face=spec.source_face,
                source_edge=source_edge,
                dest_face=spec.dest_face,
                dest_edge=dest_edge,
                axis_reversed=spec.reversed,
                heading_forward=_optional_heading(spec.heading_forward),
                heading_backward=_optional_heading(spec.heading_backward),
            ))
        return cls(net_config.face_size, dict(net_config.faces), segments)

    def edge_cells(self, face: int, edge: Edge) -> List[Position]:
        """Cells along one edge of a face, in run order."""
        if face not in self.faces:
            raise ValueError(f"Unknown face {face}")
        n = self.face_size
        face_col, face_row = self.faces[face]
        left, top = face_col * n, face_row * n

        if edge is Edge.TOP:
            return [Position(left + i, top) for i in range(n)]
        if edge is Edge.BOTTOM:
            return [Position(left + i, top + n - 1) for i in range(n)]
        if edge is Edge.LEFT:
            return [Position(left, top + i) for i in range(n)]
        return [Position(left + n - 1, top + i) for i in range(n)]

    def face_cells(self, face: int) -> Iterator[Position]:
        n = self.face_size
        face_col, face_row = self.faces[face]
        for row in range(face_row * n, (face_row + 1) * n):
            for col in range(face_col * n, (face_col + 1) * n):
                yield Position(col, row)


def _optional_heading(name: Optional[str]) -> Optional[Heading]:
    if name is None:
        return None
    try:
        return Heading[name.upper()]
    except KeyError:
        raise ValueError(f"Unknown heading: {name}") from None


class FlatWrap:
    """Wrap to the first non-VOID cell on the far side of the row or column."""

    def __init__(self, grid: Grid):
        self.grid = grid

    def resolve(self, position: Position, heading: Heading) -> Transition:
        # Fails fast on a position that is not on the grid at all
        self.grid.tile_at(position)

        if heading in (Heading.LEFT, Heading.RIGHT):
            line = self.grid.tiles[position.row, :]
        else:
            line = self.grid.tiles[:, position.col]
        footprint = np.flatnonzero(line != Tile.VOID)

        # Travelling right/down re-enters at the low end, left/up at the high end
        index = int(footprint[0] if heading in (Heading.RIGHT, Heading.DOWN) else footprint[-1])

        if heading in (Heading.LEFT, Heading.RIGHT):
            return Position(index, position.row), heading
        return Position(position.col, index), heading


class CubeWrap:
    """
    Precomputed (position, heading) -> (position, heading) table for a cube net.

    Each SegmentPair contributes two runs of face_size entries, one per
    crossing direction.
    """

    def __init__(self, net: CubeNet):
        self.net = net
        self.table: Dict[Transition, Transition] = {}
        for segment in net.segments:
            self._add_run(segment.source_face, segment.source_edge,
                          segment.dest_face, segment.dest_edge,
                          segment.axis_reversed, segment.heading_forward)
            self._add_run(segment.dest_face, segment.dest_edge,
                          segment.source_face, segment.source_edge,
                          segment.axis_reversed, segment.heading_backward)

        logger.debug("Expanded %d segment pairs into %d edge transitions",
                     len(net.segments), len(self.table))

    def _add_run(self, from_face: int, from_edge: Edge,
                 to_face: int, to_edge: Edge,
                 axis_reversed: bool, new_heading: Heading) -> None:
        sources = self.net.edge_cells(from_face, from_edge)
        targets = self.net.edge_cells(to_face, to_edge)
        if axis_reversed:
            targets = targets[::-1]

        heading = from_edge.exit_heading
        for source, target in zip(sources, targets):
            key = (source, heading)
            if key in self.table:
                raise ValueError(
                    f"Edge {from_edge.value} of face {from_face} is claimed by "
                    f"more than one segment (cell {source})")
            self.table[key] = (target, new_heading)

    def resolve(self, position: Position, heading: Heading) -> Transition:
        try:
            return self.table[(position, heading)]
        except KeyError:
            raise UnmappedEdgeError(position, heading) from None

    def validate(self, grid: Grid) -> None:
        """
        Check the net against a grid: every face must sit on map tiles and
        every boundary exit of the grid must have a table entry.
        """
        for face in self.net.faces:
            for position in self.net.face_cells(face):
                if not grid.in_range(position):
                    raise OutOfRangeError(position, grid.width, grid.height)
                if grid.tile_at(position) is Tile.VOID:
                    raise ValueError(f"Face {face} covers void cell {position}")

        for position, heading in grid.boundary_exits():
            if (position, heading) not in self.table:
                raise UnmappedEdgeError(position, heading)

    def __len__(self) -> int:
        return len(self.table)


def build_resolver(config: "SimulationConfig", grid: Grid):
    """Create the edge resolver selected by config.wrap_mode."""
    if config.wrap_mode == "flat":
        return FlatWrap(grid)

    if config.net is None:
        raise ValueError("Cube wrapping needs a net layout")
    resolver = CubeWrap(CubeNet.from_config(config.net))
    resolver.validate(grid)
    logger.info("Cube net: face size %d, %d transitions",
                config.net.face_size, len(resolver))
    return resolver
