"""I/O package for Monkey Map simulation."""

from .csv_writer import CSVWriter
from .visualizer import Visualizer, render_trail
from .reporter import Reporter

__all__ = ['CSVWriter', 'Visualizer', 'render_trail', 'Reporter']
