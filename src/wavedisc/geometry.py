"""Geometry primitives produced by the visualizers and consumed by the canvas."""
from dataclasses import dataclass, field
import math


@dataclass(frozen=True)
class Segment:
    """Straight line between two pixel-space points."""
    x0: float
    y0: float
    x1: float
    y1: float


@dataclass(frozen=True)
class Arc:
    """Circular arc; angles in radians, counter-clockwise as seen on screen."""
    cx: float
    cy: float
    radius: float
    start: float = 0.0
    end: float = math.pi


@dataclass
class Path:
    """Ordered collection of segments and arcs."""
    items: list = field(default_factory=list)

    def add_segment(self, x0: float, y0: float, x1: float, y1: float):
        self.items.append(Segment(x0, y0, x1, y1))

    def add_arc(self, cx: float, cy: float, radius: float, start: float = 0.0, end: float = math.pi):
        self.items.append(Arc(cx, cy, radius, start, end))

    @property
    def segments(self) -> list[Segment]:
        return [item for item in self.items if isinstance(item, Segment)]

    @property
    def arcs(self) -> list[Arc]:
        return [item for item in self.items if isinstance(item, Arc)]

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def bounds(self) -> tuple[float, float, float, float] | None:
        """Axis-aligned bounding box (left, top, right, bottom), or None when empty."""
        if not self.items:
            return None
        xs, ys = [], []
        for item in self.items:
            if isinstance(item, Segment):
                xs.extend((item.x0, item.x1))
                ys.extend((item.y0, item.y1))
            else:
                xs.extend((item.cx - item.radius, item.cx + item.radius))
                ys.extend((item.cy - item.radius, item.cy + item.radius))
        return min(xs), min(ys), max(xs), max(ys)
