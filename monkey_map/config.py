"""Configuration dataclasses and YAML loader for Monkey Map simulation."""

from dataclasses import dataclass, field
from typing import List, Tuple, Dict, Any, Optional
from pathlib import Path
import yaml

LAYOUT_DIR = Path(__file__).parent / "configs"
WRAP_MODES = ("flat", "cube")


@dataclass
class SegmentSpec:
    source_face: int
    source_edge: str  # "top", "bottom", "left" or "right"
    dest_face: int
    dest_edge: str
    reversed: bool = False
    heading_forward: Optional[str] = None   # defaults to entering dest_edge
    heading_backward: Optional[str] = None  # defaults to entering source_edge


@dataclass
class CubeNetConfig:
    face_size: int
    faces: Dict[int, Tuple[int, int]]  # face id -> (face_col, face_row)
    segments: List[SegmentSpec]


@dataclass
class SimulationConfig:
    wrap_mode: str = "flat"
    net: Optional[CubeNetConfig] = None
    layout_name: Optional[str] = None

    # Export flags (can be overridden by CLI)
    csv_enabled: bool = False
    snapshot_enabled: bool = False
    gif_enabled: bool = False
    quiet: bool = False
    out_dir: Path = field(default_factory=lambda: Path("./output"))


def _parse_segments(segments_raw: List[Dict]) -> List[SegmentSpec]:
    """Parse segment pair specifications from raw YAML data."""
    segments = []
    for s in segments_raw:
        source_face, source_edge = s['from']
        dest_face, dest_edge = s['to']
        segments.append(SegmentSpec(
            source_face=int(source_face),
            source_edge=str(source_edge),
            dest_face=int(dest_face),
            dest_edge=str(dest_edge),
            reversed=bool(s.get('reversed', False)),
            heading_forward=s.get('heading_forward'),
            heading_backward=s.get('heading_backward'),
        ))
    return segments


def _parse_net(net_raw: Dict[str, Any]) -> CubeNetConfig:
    """Parse a cube net layout from raw YAML data."""
    faces = {}
    for face_id, origin in net_raw['faces'].items():
        face_col, face_row = origin
        faces[int(face_id)] = (int(face_col), int(face_row))
    if len(faces) != 6:
        raise ValueError(f"A cube net needs 6 faces, got {len(faces)}")

    return CubeNetConfig(
        face_size=int(net_raw['face_size']),
        faces=faces,
        segments=_parse_segments(net_raw.get('segments', []))
    )


def available_layouts() -> List[str]:
    """Names of the bundled net layouts."""
    return sorted(p.stem for p in LAYOUT_DIR.glob("*.yaml"))


def load_layout(name: str) -> CubeNetConfig:
    """Load a bundled net layout by name."""
    layout_path = LAYOUT_DIR / f"{name}.yaml"
    if not layout_path.is_file():
        raise ValueError(
            f"Unknown layout: {name} (available: {', '.join(available_layouts())})")
    with open(layout_path) as f:
        raw = yaml.safe_load(f)
    return _parse_net(raw['net'])


def load_config(config_path: Path) -> SimulationConfig:
    """Load and validate YAML configuration file."""
    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    # Parse wrap config
    wrap_raw = raw.get('wrap', {})
    wrap_mode = wrap_raw.get('mode', 'flat')
    if wrap_mode not in WRAP_MODES:
        raise ValueError(f"Unknown wrap mode: {wrap_mode}")

    # Inline net takes precedence over a named layout
    layout_name = wrap_raw.get('layout')
    net = None
    if 'net' in raw:
        net = _parse_net(raw['net'])
    elif layout_name is not None:
        net = load_layout(layout_name)

    if wrap_mode == 'cube' and net is None:
        raise ValueError("Cube wrapping needs a 'net' block or a 'wrap.layout' name")

    # Parse export config (optional)
    export_raw = raw.get('export', {})

    return SimulationConfig(
        wrap_mode=wrap_mode,
        net=net,
        layout_name=layout_name,
        csv_enabled=export_raw.get('csv', False),
        snapshot_enabled=export_raw.get('snapshot', False),
        gif_enabled=export_raw.get('gif', False)
    )
