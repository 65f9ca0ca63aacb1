"""Visualization and export for Monkey Map simulation."""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgb
from pathlib import Path
from typing import List, Sequence, Tuple, TYPE_CHECKING
from PIL import Image
import io

from ..model.state import Tile

if TYPE_CHECKING:
    from ..model.grid import Grid
    from ..model.state import Heading, Position, SimulationState

# matplotlib marker per heading value (right, down, left, up)
HEADING_MARKERS = ['>', 'v', '<', '^']


def render_trail(grid: "Grid", trail: Sequence[Tuple["Position", "Heading"]]) -> str:
    """ASCII map with the last heading seen on each visited tile."""
    marks = {position: heading.symbol for position, heading in trail}
    return grid.render(marks)


class Visualizer:
    """
    Generates visual outputs using matplotlib.

    Supports:
    - Single PNG snapshots
    - Animated GIF compilation
    """

    # Color scheme
    COLORS = {
        'void': '#FFFFFF',      # White
        'open': '#ECF0F1',      # Light gray
        'wall': '#2C3E50',      # Dark blue-gray
        'trail': '#3498DB',     # Blue
        'player': '#E74C3C',    # Red
    }

    def __init__(self, grid: "Grid"):
        self.grid = grid
        self.width = grid.width
        self.height = grid.height
        self.frames: List[Image.Image] = []

    def _base_image(self) -> np.ndarray:
        """RGB image of the tile layer."""
        base = np.ones((self.height, self.width, 3))
        for tile, color in ((Tile.VOID, 'void'), (Tile.OPEN, 'open'), (Tile.WALL, 'wall')):
            base[self.grid.tiles == tile] = to_rgb(self.COLORS[color])
        return base

    def _create_figure(self, state: "SimulationState",
                       trail: Sequence[Tuple["Position", "Heading"]]) -> plt.Figure:
        """Create matplotlib figure for state visualization."""
        # Determine figure size based on grid aspect ratio
        aspect = self.width / max(1, self.height)
        fig_height = 6
        fig_width = max(6, fig_height * aspect)
        fig, ax = plt.subplots(figsize=(fig_width, fig_height))

        ax.imshow(self._base_image(), origin='upper', aspect='equal',
                  extent=[-0.5, self.width - 0.5, self.height - 0.5, -0.5])

        # Trail segments, broken wherever a wrap jumps across the map
        if trail:
            xs, ys = [], []
            prev = None
            for position, _ in trail:
                if prev is not None and abs(position.col - prev.col) + abs(position.row - prev.row) > 1:
                    ax.plot(xs, ys, '-', color=self.COLORS['trail'], linewidth=1)
                    xs, ys = [], []
                xs.append(position.col)
                ys.append(position.row)
                prev = position
            ax.plot(xs, ys, '-', color=self.COLORS['trail'], linewidth=1)

        ax.plot(state.position.col, state.position.row,
                HEADING_MARKERS[int(state.heading)], color=self.COLORS['player'],
                markersize=8, markeredgecolor='black', markeredgewidth=0.5)

        # Title and labels
        ax.set_title(f'Instruction {state.step} | '
                     f'Row {state.position.row + 1}, Col {state.position.col + 1} | '
                     f'Facing {state.heading.name.lower()}')
        ax.set_xlabel('Column')
        ax.set_ylabel('Row')

        # Set axis limits
        ax.set_xlim(-0.5, self.width - 0.5)
        ax.set_ylim(self.height - 0.5, -0.5)

        plt.tight_layout()
        return fig

    def buffer_frame(self, state: "SimulationState",
                     trail: Sequence[Tuple["Position", "Heading"]]) -> None:
        """Store frame for GIF generation."""
        fig = self._create_figure(state, trail)

        # Convert to PIL Image
        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=80)
        buf.seek(0)
        img = Image.open(buf).copy()
        self.frames.append(img)
        buf.close()
        plt.close(fig)

    def save_snapshot(self, state: "SimulationState",
                      trail: Sequence[Tuple["Position", "Heading"]],
                      output_path: Path) -> None:
        """Save single PNG image of current state."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig = self._create_figure(state, trail)
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    def generate_gif(self, output_path: Path, fps: int = 10) -> None:
        """Compile buffered frames into animated GIF."""
        if not self.frames:
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        duration = int(1000 / fps)  # milliseconds per frame

        self.frames[0].save(
            output_path,
            save_all=True,
            append_images=self.frames[1:],
            duration=duration,
            loop=0
        )

    def clear_frames(self) -> None:
        """Clear buffered frames."""
        self.frames.clear()
