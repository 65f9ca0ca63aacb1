"""Shared fixtures for Monkey Map tests."""

import pytest

from monkey_map.config import load_layout
from monkey_map.model.edges import CubeNet
from monkey_map.model.parser import parse_map, parse_notes

SAMPLE_MAP = [
    "        ...#",
    "        .#..",
    "        #...",
    "        ....",
    "...#.......#",
    "........#...",
    "..#....#....",
    "..........#.",
    "        ...#....",
    "        .....#..",
    "        .#......",
    "        ......#.",
]

SAMPLE_PATH = "10R5L5R10L4R5L5"

SAMPLE_NOTES = "\n".join(SAMPLE_MAP) + "\n\n" + SAMPLE_PATH + "\n"


@pytest.fixture
def sample_map():
    return list(SAMPLE_MAP)


@pytest.fixture
def sample_notes() -> str:
    return SAMPLE_NOTES


@pytest.fixture
def sample_grid():
    grid, _ = parse_notes(SAMPLE_NOTES)
    return grid


@pytest.fixture
def sample_instructions():
    _, instructions = parse_notes(SAMPLE_NOTES)
    return instructions


@pytest.fixture
def sample_net() -> CubeNet:
    return CubeNet.from_config(load_layout("sample"))


@pytest.fixture
def net_grid():
    """Factory: an all-open grid covering exactly the faces of a net layout."""
    def build(net_config):
        n = net_config.face_size
        origins = set(net_config.faces.values())
        width = n * (max(col for col, _ in origins) + 1)
        height = n * (max(row for _, row in origins) + 1)
        lines = [
            "".join('.' if (col // n, row // n) in origins else ' ' for col in range(width))
            for row in range(height)
        ]
        return parse_map(lines)
    return build


@pytest.fixture
def notes_file(tmp_path):
    """Factory: write notes text to a file and return its path."""
    def write(text: str = SAMPLE_NOTES, name: str = "notes.txt"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return write
