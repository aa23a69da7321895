"""
Lightweight 2D visualization for mission shapes using matplotlib.

Renders polygons with their ear-clipping triangles, lines, centroids and
optional random samples in a top-down map view. Useful to check that a
drawing triangulated fully before sampling spawn points from it.
"""

import matplotlib.pyplot as plt
import matplotlib.patches as patches
from typing import Iterable, Optional, Tuple

from ..classes.shapes import Line, Polygon
from ..misc.logger import create_logger


class ShapeMap2DVisualizer:
    """
    Static 2D renderer for pyshapes shapes.

    Draws:
    - Polygon outlines with filled triangles from the decomposition
    - Polygon centroids and bounding boxes (optional)
    - Lines with start/end markers
    - Random sample points drawn from each polygon (optional)

    Example:
        >>> from pyshapes import ShapeDatabase, MissionData
        >>> from pyshapes.visualization import ShapeMap2DVisualizer
        >>>
        >>> db = ShapeDatabase.from_mission(MissionData.from_json("mission.json"))
        >>> viz = ShapeMap2DVisualizer(db)
        >>> viz.save_shape_overview("shapes.png", samples_per_polygon=200)
    """

    def __init__(self, shapes: Iterable, figsize: Tuple[int, int] = (10, 10), dpi: int = 120, verbose: bool = True):
        """
        Initialize 2D visualizer.

        Args:
            shapes: Polygons and lines to draw (a ShapeDatabase works too)
            figsize: Figure size in inches (width, height)
            dpi: Image resolution (dots per inch)
            verbose: Whether to print progress messages
        """
        self.shapes = list(shapes)
        self.figsize = figsize
        self.dpi = dpi
        self.logger = create_logger(verbose=verbose, name="Map2D")
        self.logger.info(f"Initialized 2D visualizer with {len(self.shapes)} shapes")

        self.colors = {
            'outline': '#1F4E79',
            'triangle_edge': '#6C757D',
            'triangle_fill': ['#A8D5BA', '#F6D186', '#F19C79', '#CBAACB', '#9AD1D4'],
            'centroid': '#CC0000',
            'bbox': '#808080',
            'line': '#FF6600',
            'samples': '#222222',
        }

    @property
    def polygons(self):
        return [s for s in self.shapes if isinstance(s, Polygon)]

    @property
    def lines(self):
        return [s for s in self.shapes if isinstance(s, Line)]

    def _create_polygons_layer(self, ax, show_triangles: bool = True, show_bbox: bool = False):
        polygons = self.polygons
        if not polygons:
            return

        self.logger.info(f"Drawing {len(polygons)} polygons...")
        fills = self.colors['triangle_fill']

        for polygon in polygons:
            if show_triangles:
                for i, triangle in enumerate(polygon.triangles):
                    ax.add_patch(patches.Polygon(
                        triangle, closed=True, facecolor=fills[i % len(fills)],
                        edgecolor=self.colors['triangle_edge'], linewidth=0.5, alpha=0.6
                    ))

            xs = [p.x for p in polygon.points] + [polygon.points[0].x]
            ys = [p.y for p in polygon.points] + [polygon.points[0].y]
            ax.plot(xs, ys, color=self.colors['outline'], linewidth=2, zorder=5)

            cx, cy = polygon.centroid
            ax.scatter(cx, cy, s=60, c=self.colors['centroid'], marker='x', zorder=8)
            if polygon.name:
                ax.annotate(polygon.name, (cx, cy), xytext=(5, 5), textcoords='offset points',
                            fontsize=8, fontweight='bold')

            if show_bbox:
                corners = polygon.get_bounding_box()
                (min_x, min_y), (max_x, max_y) = corners[0], corners[2]
                ax.add_patch(patches.Rectangle(
                    (min_x, min_y), max_x - min_x, max_y - min_y,
                    fill=False, edgecolor=self.colors['bbox'], linestyle=':', linewidth=1
                ))

            if len(polygon.triangles) < len(polygon.points) - 2:
                self.logger.warning(
                    f"Polygon {polygon.name!r} is only partially triangulated "
                    f"({len(polygon.triangles)}/{len(polygon.points) - 2})"
                )

    def _create_lines_layer(self, ax):
        lines = self.lines
        if not lines:
            return

        self.logger.info(f"Drawing {len(lines)} lines...")
        for line in lines:
            xs = [p.x for p in line.points]
            ys = [p.y for p in line.points]
            ax.plot(xs, ys, color=self.colors['line'], linewidth=2, linestyle='--', zorder=6)
            start, end = line.get_start_point(), line.get_end_point()
            ax.scatter([start.x], [start.y], s=50, c=self.colors['line'], marker='o', zorder=7)
            ax.scatter([end.x], [end.y], s=50, c=self.colors['line'], marker='s', zorder=7)

    def _create_samples_layer(self, ax, samples_per_polygon: int, rng=None):
        polygons = [p for p in self.polygons if p.triangles]
        if not polygons or samples_per_polygon <= 0:
            return

        self.logger.info(f"Sampling {samples_per_polygon} points in {len(polygons)} polygons...")
        for polygon in polygons:
            samples = polygon.get_random_points(samples_per_polygon, rng=rng)
            ax.scatter([p.x for p in samples], [p.y for p in samples],
                       s=4, c=self.colors['samples'], alpha=0.7, zorder=4)

    def render(self, show_triangles: bool = True, show_bbox: bool = False,
               samples_per_polygon: int = 0, rng=None, title: Optional[str] = None):
        """
        Draw every layer on a new figure.

        Returns:
            (fig, ax) tuple; the caller owns the figure
        """
        fig, ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)

        self._create_polygons_layer(ax, show_triangles=show_triangles, show_bbox=show_bbox)
        self._create_lines_layer(ax)
        self._create_samples_layer(ax, samples_per_polygon, rng=rng)

        ax.set_xlabel('X (map)', fontsize=11)
        ax.set_ylabel('Y (map)', fontsize=11)
        ax.set_title(title or 'Mission Shapes', fontsize=13, fontweight='bold')
        ax.grid(True, alpha=0.3)
        ax.set_aspect('equal')
        ax.autoscale_view()
        return fig, ax

    def save_shape_overview(self, filename: str, **kwargs) -> str:
        """
        Save an overview image of all shapes.

        Args:
            filename: Output filename (with extension)
            **kwargs: Passed to render()

        Returns:
            Path to saved file
        """
        self.logger.info(f"Creating shape overview: {filename}")
        fig, _ = self.render(**kwargs)
        fig.tight_layout()
        fig.savefig(filename, dpi=self.dpi, bbox_inches='tight')
        plt.close(fig)
        self.logger.info(f"✓ Shape overview saved: {filename}")
        return filename


def save_shape_map(shapes: Iterable, filename: str, verbose: bool = False, **kwargs) -> str:
    """One-call helper: render shapes and save the image."""
    return ShapeMap2DVisualizer(shapes, verbose=verbose).save_shape_overview(filename, **kwargs)
