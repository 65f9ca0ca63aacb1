"""Tests for the Simulator."""

import pytest

from monkey_map.errors import NoStartError, UnmappedEdgeError
from monkey_map.model.edges import CubeWrap, FlatWrap
from monkey_map.model.engine import Simulator
from monkey_map.model.parser import parse_map, parse_path
from monkey_map.model.scorer import score
from monkey_map.model.state import Heading, Instruction, Position, Turn


@pytest.fixture
def flat_sim(sample_grid, sample_instructions):
    return Simulator(sample_grid, FlatWrap(sample_grid), sample_instructions)


@pytest.fixture
def cube_sim(sample_grid, sample_instructions, sample_net):
    return Simulator(sample_grid, CubeWrap(sample_net), sample_instructions)


class TestScenarios:
    """Complete walks over the worked example."""

    def test_flat_sample(self, flat_sim) -> None:
        final = flat_sim.run()
        assert final.position == Position(7, 5)
        assert final.heading is Heading.RIGHT
        assert flat_sim.score() == 6032

    def test_cube_sample(self, cube_sim) -> None:
        final = cube_sim.run()
        assert final.position == Position(6, 4)
        assert final.heading is Heading.UP
        assert cube_sim.score() == 5031

    def test_straight_walk(self) -> None:
        grid = parse_map(["......"])
        sim = Simulator(grid, FlatWrap(grid), parse_path("3"))
        start = sim.player.position
        start_score = score(start, Heading.RIGHT)

        final = sim.run()
        assert final.position == Position(start.col + 3, start.row)
        assert final.heading is Heading.RIGHT
        assert sim.score() == start_score + 12


class TestMovement:

    def test_player_starts_facing_right(self, flat_sim) -> None:
        assert flat_sim.player.position == Position(8, 0)
        assert flat_sim.player.heading is Heading.RIGHT

    def test_wall_halts_instruction(self, sample_grid) -> None:
        sim = Simulator(sample_grid, FlatWrap(sample_grid), [Instruction(10)])
        state = sim.step()
        assert state.moved == 2
        assert state.blocked
        assert state.position == Position(10, 0)

    def test_wrapped_wall_leaves_player_in_place(self, sample_grid) -> None:
        sim = Simulator(sample_grid, FlatWrap(sample_grid), [])
        sim.player.heading = Heading.LEFT
        # Row 0 wraps onto the wall at its right end
        assert sim.advance() is None
        assert sim.player.position == Position(8, 0)
        assert sim.player.heading is Heading.LEFT

    def test_cube_wrap_changes_heading(self, sample_grid, sample_net) -> None:
        sim = Simulator(sample_grid, CubeWrap(sample_net), [])
        sim.player.heading = Heading.LEFT
        assert sim.advance() is True
        assert sim.player.position == Position(4, 4)
        assert sim.player.heading is Heading.DOWN

    def test_cube_wrap_into_wall(self, sample_grid, sample_net) -> None:
        sim = Simulator(sample_grid, CubeWrap(sample_net), [])
        sim.player.heading = Heading.UP
        assert sim.advance() is None
        assert sim.player.position == Position(8, 0)
        assert sim.player.heading is Heading.UP

    def test_flat_wrap_keeps_heading(self, sample_grid) -> None:
        sim = Simulator(sample_grid, FlatWrap(sample_grid), [])
        sim.player.heading = Heading.UP
        assert sim.advance() is True
        assert sim.player.position == Position(8, 11)
        assert sim.player.heading is Heading.UP

    def test_zero_steps_only_turns(self, flat_sim) -> None:
        flat_sim.instructions = [Instruction(0, Turn.RIGHT)]
        state = flat_sim.step()
        assert state.moved == 0
        assert not state.blocked
        assert state.position == Position(8, 0)
        assert state.heading is Heading.DOWN

    def test_four_turns_restore_heading(self, sample_grid) -> None:
        sim = Simulator(sample_grid, FlatWrap(sample_grid), [Instruction(0, Turn.LEFT)] * 4)
        sim.run()
        assert sim.player.position == Position(8, 0)
        assert sim.player.heading is Heading.RIGHT

    def test_unmapped_edge_propagates(self, sample_grid, sample_net) -> None:
        # Drop the face 1 left / face 3 top pair
        sample_net.segments = [s for s in sample_net.segments
                               if (s.source_face, s.dest_face) != (1, 3)]
        sim = Simulator(sample_grid, CubeWrap(sample_net), [Instruction(1)])
        sim.player.heading = Heading.LEFT
        with pytest.raises(UnmappedEdgeError):
            sim.step()

    def test_no_start(self) -> None:
        grid = parse_map(["  #", "..."])
        with pytest.raises(NoStartError):
            Simulator(grid, FlatWrap(grid), [])


class TestRunBookkeeping:

    def test_step_until_finished(self, flat_sim) -> None:
        states = []
        while not flat_sim.is_finished():
            states.append(flat_sim.step())
        assert [s.step for s in states] == list(range(1, 8))
        assert states[0].instruction == Instruction(10, Turn.RIGHT)
        assert states[0].heading is Heading.DOWN

    def test_run_without_instructions(self, sample_grid) -> None:
        sim = Simulator(sample_grid, FlatWrap(sample_grid), [])
        assert sim.is_finished()
        assert sim.run() is None
        assert sim.score() == 1036

    def test_summary(self, cube_sim) -> None:
        final = cube_sim.run()
        summary = cube_sim.get_summary()
        assert summary['instructions'] == 7
        assert summary['wraps'] > 0
        assert final.metrics == summary

    def test_trail_starts_at_start(self, flat_sim) -> None:
        flat_sim.run()
        assert flat_sim.trail[0] == (Position(8, 0), Heading.RIGHT)
        assert flat_sim.trail[-1] == (Position(7, 5), Heading.RIGHT)
