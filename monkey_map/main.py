#!/usr/bin/env python3
"""
Monkey Map Simulation

Walks a path across a map of open tiles and walls, wrapping off-map steps
either around the flat map or around the faces of a folded cube, and prints
the final password.

Usage:
    monkey-map NOTES [options]

Examples:
    monkey-map notes.txt
    monkey-map notes.txt --wrap cube --layout input
    monkey-map sample.txt --config my_net.yaml --csv --snapshot --out-dir results/
    monkey-map sample.txt --wrap cube --layout sample --report --show-path
"""

import argparse
import logging
import sys
from pathlib import Path

from monkey_map.config import SimulationConfig, WRAP_MODES, load_config, load_layout
from monkey_map.errors import MonkeyMapError
from monkey_map.model.edges import build_resolver
from monkey_map.model.engine import Simulator
from monkey_map.model.parser import load_notes
from monkey_map.export.csv_writer import CSVWriter
from monkey_map.export.visualizer import Visualizer, render_trail
from monkey_map.export.reporter import Reporter


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Monkey Map path simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    monkey-map notes.txt
    monkey-map notes.txt --wrap cube --layout input
    monkey-map sample.txt --config my_net.yaml --csv --snapshot --out-dir results/
    monkey-map sample.txt --wrap cube --layout sample --report --show-path
        """
    )

    # Required arguments
    parser.add_argument('notes', type=Path,
                        help='Path to the notes file (map, blank line, path)')

    # Optional overrides
    parser.add_argument('--config', type=Path, default=None,
                        help='Path to YAML configuration file')
    parser.add_argument('--wrap', choices=WRAP_MODES, default=None,
                        help='Edge wrapping mode (default: flat)')
    parser.add_argument('--layout', default=None,
                        help='Bundled cube net layout name, e.g. sample or input')
    parser.add_argument('--out-dir', type=Path, default=Path('./output'),
                        help='Output directory for exports (default: ./output)')

    # Export toggles
    parser.add_argument('--csv', dest='csv', action='store_true', default=None,
                        help='Enable CSV trace export')
    parser.add_argument('--no-csv', dest='csv', action='store_false',
                        help='Disable CSV trace export')

    parser.add_argument('--snapshot', dest='snapshot', action='store_true', default=None,
                        help='Enable final snapshot')
    parser.add_argument('--no-snapshot', dest='snapshot', action='store_false',
                        help='Disable final snapshot')

    parser.add_argument('--gif', action='store_true', default=False,
                        help='Enable GIF animation export')

    parser.add_argument('--report', action='store_true', default=False,
                        help='Print a summary report to stderr')
    parser.add_argument('--show-path', action='store_true', default=False,
                        help='Print the map with the walked path to stderr')
    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress progress output on stderr')
    parser.add_argument('-v', '--verbose', action='store_true', default=False,
                        help='Log every move')

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    # Load configuration
    try:
        config = load_config(args.config) if args.config else SimulationConfig()
        if args.layout is not None:
            config.net = load_layout(args.layout)
            config.layout_name = args.layout
            config.wrap_mode = 'cube'
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    # Apply CLI overrides
    if args.wrap is not None:
        config.wrap_mode = args.wrap
    if args.csv is not None:
        config.csv_enabled = args.csv
    if args.snapshot is not None:
        config.snapshot_enabled = args.snapshot
    if args.gif:
        config.gif_enabled = True
    config.quiet = args.quiet
    config.out_dir = args.out_dir

    # Load notes and build the simulation
    try:
        grid, instructions = load_notes(args.notes)
        resolver = build_resolver(config, grid)
        simulator = Simulator(grid, resolver, instructions)
    except FileNotFoundError:
        print(f"Error: Notes file not found: {args.notes}", file=sys.stderr)
        return 1
    except (MonkeyMapError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.quiet:
        print(f"Map: {grid.width}x{grid.height}, {len(instructions)} instructions, "
              f"{config.wrap_mode} wrapping", file=sys.stderr)

    # Initialize exporters
    csv_writer = None
    if config.csv_enabled:
        csv_writer = CSVWriter(config.out_dir / 'trace.csv')
        csv_writer.open()

    visualizer = Visualizer(grid)
    reporter = Reporter(str(args.notes), config.wrap_mode, config.layout_name)

    # Main simulation loop
    final_state = None
    try:
        while not simulator.is_finished():
            state = simulator.step()
            final_state = state

            if csv_writer:
                csv_writer.append(state)
            if config.gif_enabled:
                visualizer.buffer_frame(state, simulator.trail)
            reporter.update(state)
    except MonkeyMapError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if csv_writer:
            csv_writer.close()

    # Final exports
    if config.csv_enabled and not config.quiet:
        print(f"CSV saved: {config.out_dir / 'trace.csv'}", file=sys.stderr)

    if config.snapshot_enabled and final_state:
        snapshot_path = config.out_dir / 'final_state.png'
        visualizer.save_snapshot(final_state, simulator.trail, snapshot_path)
        if not config.quiet:
            print(f"Snapshot saved: {snapshot_path}", file=sys.stderr)

    if config.gif_enabled:
        gif_path = config.out_dir / 'walk.gif'
        visualizer.generate_gif(gif_path, fps=10)
        visualizer.clear_frames()
        if not config.quiet:
            print(f"Animation saved: {gif_path}", file=sys.stderr)

    if args.show_path:
        print(render_trail(grid, simulator.trail), file=sys.stderr)

    if args.report and final_state:
        report = reporter.generate_summary(
            final_state,
            config.out_dir,
            config.csv_enabled,
            config.snapshot_enabled,
            config.gif_enabled
        )
        print(report, file=sys.stderr)

    print(simulator.score())
    return 0


if __name__ == '__main__':
    sys.exit(main())
