"""Summary report generation for Monkey Map simulation."""

from pathlib import Path
from typing import Optional, TYPE_CHECKING

from ..model.scorer import score

if TYPE_CHECKING:
    from ..model.state import SimulationState


class Reporter:
    """Tracks per-instruction results and formats the final text report."""

    def __init__(self, notes_path: str, wrap_mode: str, layout_name: Optional[str] = None):
        self.notes_path = notes_path
        self.wrap_mode = wrap_mode
        self.layout_name = layout_name
        self.longest_walk = 0
        self.full_walks = 0

    def update(self, state: "SimulationState") -> None:
        """Accumulate per-instruction figures."""
        self.longest_walk = max(self.longest_walk, state.moved)
        if not state.blocked:
            self.full_walks += 1

    def generate_summary(self, final_state: "SimulationState",
                         output_dir: Path,
                         csv_enabled: bool,
                         snapshot_enabled: bool,
                         gif_enabled: bool) -> str:
        """Returns formatted text report."""
        metrics = final_state.metrics
        instructions = metrics.get('instructions', 0)
        position = final_state.position
        wrap = self.wrap_mode
        if self.layout_name:
            wrap = f"{wrap} ({self.layout_name})"

        lines = [
            "",
            "=" * 60,
            "                 MONKEY MAP SIMULATION REPORT",
            "=" * 60,
            f"Notes:       {self.notes_path}",
            f"Wrapping:    {wrap}",
            "",
            "WALK",
            "-" * 40,
            f"Instructions:      {instructions}",
            f"Completed fully:   {self.full_walks} / {instructions}",
            f"Tiles walked:      {metrics.get('tiles_walked', 0)}",
            f"Longest walk:      {self.longest_walk}",
            f"Edge wraps:        {metrics.get('wraps', 0)}",
            f"Wall stops:        {metrics.get('wall_stops', 0)}",
            "",
            "FINAL STATE",
            "-" * 40,
            f"Row / column:      {position.row + 1} / {position.col + 1}",
            f"Facing:            {final_state.heading.name.lower()} ({int(final_state.heading)})",
            f"Password:          {score(position, final_state.heading)}",
            "",
            "OUTPUT FILES",
            "-" * 40,
        ]

        # Output file paths
        if csv_enabled:
            lines.append(f"CSV Log:    {output_dir / 'trace.csv'}")
        else:
            lines.append("CSV Log:    (disabled)")

        if snapshot_enabled:
            lines.append(f"Snapshot:   {output_dir / 'final_state.png'}")
        else:
            lines.append("Snapshot:   (disabled)")

        if gif_enabled:
            lines.append(f"Animation:  {output_dir / 'walk.gif'}")
        else:
            lines.append("Animation:  (disabled)")

        lines.append("=" * 60)

        return "\n".join(lines)
