"""
Raster canvas backed by matplotlib.

The renderer only needs a surface it can fill, draw filled rectangles on and
save; `Canvas` names that contract so layout stays independent of the
backend. Coordinates are pixels with the origin at the top-left corner.
"""

from pathlib import Path
from typing import Protocol

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from core.colors import RGBA
from core.config import DPI


def to_unit_rgba(color: RGBA) -> tuple[float, float, float, float]:
    """Convert 0-255 channels to the 0.0-1.0 floats matplotlib expects."""
    return tuple(channel / 255 for channel in color)


class Canvas(Protocol):
    width: float
    height: float

    def fill(self, color: RGBA): ...

    def draw_rectangle(self, x: float, y: float, width: float, height: float, color: RGBA): ...

    def save(self, path: Path): ...


class MatplotlibCanvas:
    """
    Pixel-sized figure with a single axes spanning it edge to edge.

    The figure is attached to an Agg canvas directly rather than through
    pyplot, so no global figure state is kept between renders.
    """

    def __init__(self, width: float, height: float, dpi: int = DPI):
        self.width = width
        self.height = height
        self.dpi = dpi

        self.figure = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        FigureCanvasAgg(self.figure)

        self.axes = self.figure.add_axes((0, 0, 1, 1))
        self.axes.set_axis_off()
        self.axes.set_xlim(0, width)
        self.axes.set_ylim(height, 0)  # y grows downward

    def fill(self, color: RGBA):
        self.draw_rectangle(0, 0, self.width, self.height, color)

    def draw_rectangle(self, x: float, y: float, width: float, height: float, color: RGBA):
        self.axes.add_patch(
            Rectangle(
                (x, y),
                width,
                height,
                facecolor=to_unit_rgba(color),
                edgecolor="none",
                linewidth=0,
                antialiased=False,
            )
        )

    def save(self, path: Path):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.figure.savefig(path, dpi=self.dpi, format="png")
