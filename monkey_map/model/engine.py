"""Simulation engine for Monkey Map."""

import logging
from typing import List, Optional, Sequence, Tuple

from .grid import Grid
from .scorer import score
from .state import Heading, Instruction, Player, Position, SimulationState, Tile

logger = logging.getLogger(__name__)


class Simulator:
    """
    Walks a player across the grid, one instruction per step().

    Each instruction:
    1. Advance up to `steps` tiles, wrapping off-map steps through the resolver
    2. Stop early if the next tile (direct or wrapped) is a wall
    3. Apply the trailing turn
    4. Return current state snapshot
    """

    def __init__(self, grid: Grid, resolver, instructions: Sequence[Instruction]):
        self.grid = grid
        self.resolver = resolver
        self.instructions: List[Instruction] = list(instructions)
        self.current_step = 0

        self.player = Player(grid.starting_position(), Heading.RIGHT)
        self.trail: List[Tuple[Position, Heading]] = [
            (self.player.position, self.player.heading)
        ]

        # Metrics tracking
        self.tiles_walked = 0
        self.wrap_count = 0
        self.blocked_count = 0

    def _next_move(self) -> Optional[Tuple[Position, Heading, bool]]:
        """Target of one unit move, or None if a wall is in the way."""
        position, heading = self.player.position, self.player.heading
        target = position.moved(heading)
        wrapped = False

        if not self.grid.in_range(target) or self.grid.tile_at(target) is Tile.VOID:
            target, heading = self.resolver.resolve(position, heading)
            wrapped = True

        if self.grid.tile_at(target) is Tile.WALL:
            return None
        return target, heading, wrapped

    def advance(self) -> Optional[bool]:
        """
        Take one unit move. Returns None when blocked, otherwise whether the
        move wrapped across an edge.
        """
        move = self._next_move()
        if move is None:
            logger.debug("Wall ahead of %s facing %s", self.player.position,
                         self.player.heading.name.lower())
            return None

        target, heading, wrapped = move
        if wrapped:
            logger.debug("Wrapped %s %s -> %s %s", self.player.position,
                         self.player.heading.name.lower(), target, heading.name.lower())
        self.player.position = target
        self.player.heading = heading
        self.trail.append((target, heading))
        return wrapped

    def step(self) -> SimulationState:
        """Execute the next instruction."""
        instruction = self.instructions[self.current_step]
        self.current_step += 1

        moved = wrapped = 0
        blocked = False
        while moved < instruction.steps:
            result = self.advance()
            if result is None:
                blocked = True
                break
            moved += 1
            wrapped += int(result)

        self.player.heading = self.player.heading.turned(instruction.turn)
        if instruction.turn.value:
            self.trail.append((self.player.position, self.player.heading))

        self.tiles_walked += moved
        self.wrap_count += wrapped
        self.blocked_count += int(blocked)

        logger.debug("Instruction %d (%s): moved %d, now %s facing %s",
                     self.current_step, instruction, moved,
                     self.player.position, self.player.heading.name.lower())

        return SimulationState(
            step=self.current_step,
            instruction=instruction,
            moved=moved,
            wrapped=wrapped,
            blocked=blocked,
            position=self.player.position,
            heading=self.player.heading,
            metrics=self.get_summary(),
        )

    def is_finished(self) -> bool:
        return self.current_step >= len(self.instructions)

    def run(self) -> Optional[SimulationState]:
        """Execute all remaining instructions and return the last snapshot."""
        state = None
        while not self.is_finished():
            state = self.step()
        logger.info("Finished %d instructions at %s facing %s",
                    self.current_step, self.player.position,
                    self.player.heading.name.lower())
        return state

    def score(self) -> int:
        return score(self.player.position, self.player.heading)

    def get_summary(self) -> dict:
        """Get summary statistics for the run so far."""
        return {
            'instructions': self.current_step,
            'tiles_walked': self.tiles_walked,
            'wraps': self.wrap_count,
            'wall_stops': self.blocked_count,
        }
