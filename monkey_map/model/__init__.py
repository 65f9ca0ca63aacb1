"""Model package for Monkey Map simulation."""

from .state import Heading, Instruction, Player, Position, SimulationState, Tile, Turn
from .grid import Grid
from .parser import load_notes, parse_notes, parse_path
from .edges import CubeNet, CubeWrap, Edge, FlatWrap, SegmentPair, build_resolver
from .scorer import score
from .engine import Simulator

__all__ = [
    'Heading',
    'Instruction',
    'Player',
    'Position',
    'SimulationState',
    'Tile',
    'Turn',
    'Grid',
    'load_notes',
    'parse_notes',
    'parse_path',
    'CubeNet',
    'CubeWrap',
    'Edge',
    'FlatWrap',
    'SegmentPair',
    'build_resolver',
    'score',
    'Simulator',
]
