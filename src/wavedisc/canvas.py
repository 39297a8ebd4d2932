"""Pillow-backed raster canvas."""
import math

import numpy as np
from PIL import Image, ImageDraw

from .color import to_rgba
from .geometry import Arc, Path, Segment


class RasterCanvas:
    """
    Freshly allocated, transparent RGBA pixel buffer.

    All coordinates and widths are in pixels. Strokes are drawn onto a
    transparent overlay and alpha-composited, so translucent colors blend
    with whatever is already on the canvas.
    """

    def __init__(self, size: tuple[int, int]):
        width, height = size
        self.width = int(width)
        self.height = int(height)
        self._image = Image.new('RGBA', (self.width, self.height), (0, 0, 0, 0))

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def fill_rect(self, color, rect: tuple[float, float, float, float] = None):
        """Fill rect (left, top, right, bottom), the whole canvas by default."""
        if rect is None:
            rect = (0, 0, self.width - 1, self.height - 1)
        overlay = Image.new('RGBA', self._image.size, (0, 0, 0, 0))
        ImageDraw.Draw(overlay).rectangle(rect, fill=to_rgba(color))
        self._image = Image.alpha_composite(self._image, overlay)

    def stroke_path(self, path: Path, color, width: float = 1.0):
        """Stroke every segment and arc of path."""
        overlay = Image.new('RGBA', self._image.size, (0, 0, 0, 0))
        _trace(ImageDraw.Draw(overlay), path, to_rgba(color), _line_width(width))
        self._image = Image.alpha_composite(self._image, overlay)

    def fill_gradient(self, path: Path, colors: list, start_y: float, end_y: float, width: float = 1.0):
        """
        Fill the stroked outline of path with a vertical linear gradient.

        The stroked outline becomes the clip region. Stops are spread evenly
        between start_y and end_y; rows outside that span take the nearest
        stop. When start_y == end_y the gradient collapses onto its last stop
        and the clip region is tinted uniformly.
        """
        mask = Image.new('L', self._image.size, 0)
        _trace(ImageDraw.Draw(mask), path, 255, _line_width(width))

        gradient = Image.fromarray(self._gradient_rows(colors, start_y, end_y))
        layer = Image.composite(gradient, Image.new('RGBA', self._image.size, (0, 0, 0, 0)), mask)
        self._image = Image.alpha_composite(self._image, layer)

    def _gradient_rows(self, colors: list, start_y: float, end_y: float) -> np.ndarray:
        stops = np.array([to_rgba(c) for c in colors], dtype=np.float64)
        if len(stops) == 1:
            stops = np.vstack([stops, stops])
        locations = np.linspace(0.0, 1.0, len(stops))

        rows = np.arange(self.height, dtype=np.float64)
        if end_y == start_y:
            t = np.ones_like(rows)
        else:
            t = np.clip((rows - start_y) / (end_y - start_y), 0.0, 1.0)

        channels = [np.interp(t, locations, stops[:, c]) for c in range(4)]
        row_colors = np.stack(channels, axis=1).round().astype(np.uint8)
        return np.repeat(row_colors[:, np.newaxis, :], self.width, axis=1)

    def image(self) -> Image.Image:
        """Extract the rendered image."""
        return self._image.copy()


def _line_width(width: float) -> int:
    return max(1, int(round(width)))


def _trace(draw: ImageDraw.ImageDraw, path: Path, fill, width: int):
    for item in path:
        if isinstance(item, Segment):
            draw.line([(item.x0, item.y0), (item.x1, item.y1)], fill=fill, width=width)
        elif isinstance(item, Arc):
            r = item.radius
            bbox = [item.cx - r, item.cy - r, item.cx + r, item.cy + r]
            # Pillow measures degrees clockwise on screen
            draw.arc(bbox, -math.degrees(item.end), -math.degrees(item.start), fill=fill, width=width)
