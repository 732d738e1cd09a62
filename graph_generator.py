"""
Graph Generator for DarkCalc
Charts the results in the calculation history
"""
import logging

from matplotlib import style
from matplotlib.figure import Figure

import config
from formatter import ParseFailure, parse_number

logger = logging.getLogger(__name__)


class GraphGenerator:
    def __init__(self, dark=True):
        self.theme = config.get_theme(dark)
        try:
            style.use('dark_background' if dark else 'seaborn-v0_8-darkgrid')
        except OSError:
            style.use('ggplot')

    def _create_fig(self, figsize=None):
        """Internal helper to create a figure with optional custom size"""
        if figsize is None:
            figsize = config.GRAPH_FIGSIZE
        return Figure(figsize=figsize, dpi=config.GRAPH_DPI)

    def history_points(self, entries):
        """(label, value) pairs, oldest first, for entries with numeric results"""
        points = []
        for entry in reversed(list(entries)):
            try:
                points.append((entry.expression, parse_number(entry.result)))
            except ParseFailure:
                logger.debug("Skipping non-numeric history result %r", entry.result)
        return points

    def create_history_graph(self, entries, figsize=None):
        """Create a bar chart of history results, oldest on the left"""
        fig = self._create_fig(figsize)
        ax = fig.add_subplot(111)
        points = self.history_points(entries)

        if not points:
            ax.text(0.5, 0.5, 'No calculations yet', ha='center', va='center',
                    transform=ax.transAxes, color=self.theme["title_fg"])
            ax.set_xticks([])
            ax.set_yticks([])
            return fig

        labels = [label for label, _ in points]
        values = [value for _, value in points]
        positions = range(len(points))
        colors = [self.theme["result_fg"] if v >= 0 else self.theme["operator_fg"]
                  for v in values]

        ax.bar(positions, values, color=colors, alpha=0.85)
        ax.axhline(0, color=self.theme["title_fg"], linewidth=0.8)
        ax.set_xticks(list(positions))
        ax.set_xticklabels(labels, rotation=45, ha='right', fontsize=7)
        ax.set_ylabel('Result')
        ax.set_title('Calculation History', fontsize=10, fontweight='bold')
        fig.tight_layout()
        return fig
