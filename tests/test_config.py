"""Tests for YAML configuration loading."""

import pytest

from monkey_map.config import available_layouts, load_config, load_layout


class TestLoadLayout:

    def test_bundled_layouts(self) -> None:
        assert {"sample", "input"} <= set(available_layouts())

    def test_sample_layout(self) -> None:
        net = load_layout("sample")
        assert net.face_size == 4
        assert net.faces[1] == (2, 0)
        assert len(net.faces) == 6
        assert len(net.segments) == 7
        first = net.segments[0]
        assert (first.source_face, first.source_edge) == (1, "top")
        assert (first.dest_face, first.dest_edge) == (2, "top")
        assert first.reversed

    def test_input_layout(self) -> None:
        net = load_layout("input")
        assert net.face_size == 50
        assert len(net.segments) == 7

    def test_unknown_layout(self) -> None:
        with pytest.raises(ValueError, match="Unknown layout"):
            load_layout("dodecahedron")


class TestLoadConfig:

    def test_defaults(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.wrap_mode == "flat"
        assert config.net is None
        assert not config.csv_enabled

    def test_named_layout(self, tmp_path) -> None:
        path = tmp_path / "cube.yaml"
        path.write_text("wrap:\n  mode: cube\n  layout: sample\nexport:\n  csv: true\n")
        config = load_config(path)
        assert config.wrap_mode == "cube"
        assert config.layout_name == "sample"
        assert config.net.face_size == 4
        assert config.csv_enabled

    def test_inline_net(self, tmp_path) -> None:
        path = tmp_path / "inline.yaml"
        path.write_text(
            "wrap:\n"
            "  mode: cube\n"
            "net:\n"
            "  face_size: 2\n"
            "  faces: {1: [1, 0], 2: [0, 1], 3: [1, 1], 4: [2, 1], 5: [1, 2], 6: [1, 3]}\n"
            "  segments:\n"
            "    - {from: [1, left], to: [2, top], heading_forward: down}\n"
        )
        config = load_config(path)
        assert config.net.faces[4] == (2, 1)
        segment = config.net.segments[0]
        assert segment.heading_forward == "down"
        assert segment.heading_backward is None
        assert not segment.reversed

    def test_unknown_wrap_mode(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("wrap:\n  mode: spherical\n")
        with pytest.raises(ValueError, match="Unknown wrap mode"):
            load_config(path)

    def test_cube_needs_net(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("wrap:\n  mode: cube\n")
        with pytest.raises(ValueError, match="net"):
            load_config(path)

    def test_net_needs_six_faces(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("wrap:\n  mode: cube\nnet:\n  face_size: 1\n  faces: {1: [0, 0]}\n")
        with pytest.raises(ValueError, match="6 faces"):
            load_config(path)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.yaml")
