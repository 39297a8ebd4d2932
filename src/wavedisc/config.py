"""Render configuration."""
from dataclasses import dataclass, replace
from enum import Enum

from .color import to_rgba


class Style(Enum):
    """How the graph path is painted."""
    FILLED = 'filled'
    STRIPED = 'striped'
    GRADIENT = 'gradient'


# Named anchors, normalized to the canvas (0 = top/left, 1 = bottom/right)
POSITIONS = {
    'top': 0.0,
    'middle': 0.5,
    'bottom': 1.0,
}


def position_value(position) -> float:
    """Resolve a named anchor or a float to a value in [0, 1]."""
    if isinstance(position, str):
        if position in POSITIONS:
            return POSITIONS[position]
        try:
            position = float(position)
        except ValueError:
            raise ValueError(f"Unknown position: {position}") from None
    value = float(position)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"Position must be within [0, 1], got {value}")
    return value


@dataclass(frozen=True)
class Configuration:
    """Immutable input to a single render call."""
    size: tuple[float, float]
    color: tuple[int, int, int, int] = (0, 0, 0, 255)
    background_color: tuple[int, int, int, int] = (0, 0, 0, 0)
    style: Style = Style.FILLED
    position: float = 0.5
    scale: float = 1.0
    padding_factor: float | None = None

    def __post_init__(self):
        width, height = self.size
        if width <= 0 or height <= 0:
            raise ValueError(f"Size must be positive, got {width}x{height}")
        if self.scale <= 0:
            raise ValueError(f"Scale must be positive, got {self.scale}")
        if self.padding_factor is not None and self.padding_factor <= 0:
            raise ValueError(f"Padding factor must be positive, got {self.padding_factor}")

        # Frozen dataclass: coerce inputs through object.__setattr__
        object.__setattr__(self, 'size', (float(width), float(height)))
        object.__setattr__(self, 'color', to_rgba(self.color))
        object.__setattr__(self, 'background_color', to_rgba(self.background_color))
        object.__setattr__(self, 'style', Style(self.style))
        object.__setattr__(self, 'position', position_value(self.position))

    @property
    def width(self) -> float:
        return self.size[0]

    @property
    def height(self) -> float:
        return self.size[1]

    @property
    def pixel_size(self) -> tuple[int, int]:
        """Integer buffer dimensions for this (already scaled) size."""
        return max(1, int(self.width)), max(1, int(self.height))

    @property
    def vertical_padding_divisor(self) -> float:
        if self.padding_factor is not None:
            return self.padding_factor
        return 2.5 if self.position == 0.5 else 1.5

    def scaled(self) -> 'Configuration':
        """Return a copy whose size is expressed in pixels."""
        return replace(self, size=(self.width * self.scale, self.height * self.scale))
