"""Amplitude bars visualizer."""
import numpy as np

from ..canvas import RasterCanvas
from ..color import highlighted
from ..config import Configuration, Style
from ..geometry import Path
from .base import BaseVisualizer

MIN_AMPLITUDE = 1.0  # points; silence still shows a 1pt line
STRIPE_EVERY = 5
GRADIENT_BRIGHTNESS = 0.5


def draw_mapping_factor(configuration: Configuration) -> float:
    """Pixels of half-height per unit of (1 - sample)."""
    return configuration.height / 2 / 2 / configuration.vertical_padding_divisor


def graph_center(configuration: Configuration) -> tuple[float, float]:
    # A single anchor value drives both axes
    return (configuration.position * configuration.width,
            configuration.position * configuration.height)


def amplitude_segments(samples, configuration: Configuration) -> Path:
    """
    Map samples to one vertical segment per pixel column.

    configuration must already be scaled to pixels. Each sample is an
    inverted normalized dB value (1.0 = silence), so smaller samples give
    taller bars. Half-heights are floored at 1pt.
    """
    _, center_y = graph_center(configuration)
    factor = draw_mapping_factor(configuration)
    min_amplitude = MIN_AMPLITUDE * configuration.scale

    path = Path()
    for x, sample in enumerate(np.asarray(samples, dtype=np.float64)):
        if configuration.style == Style.STRIPED and int(x / configuration.scale) % STRIPE_EVERY != 0:
            continue
        amplitude = max(min_amplitude, (1.0 - sample) * factor)
        path.add_segment(x, center_y - amplitude, x, center_y + amplitude)
    return path


class AmplitudeVisualizer(BaseVisualizer):
    """Vertical amplitude bars around the anchored center line."""

    def fetch(self, waveform, configuration: Configuration):
        samples = waveform.samples(self.sample_count(configuration))
        if samples is None or len(samples) == 0:
            return None
        return samples

    def draw_graph(self, data, canvas: RasterCanvas, configuration: Configuration):
        path = amplitude_segments(data, configuration)
        # Hairline: 1/scale points is one pixel
        line_width = 1.0

        if configuration.style in (Style.FILLED, Style.STRIPED):
            canvas.stroke_path(path, configuration.color, width=line_width)
        elif configuration.style == Style.GRADIENT:
            # Start and end share the center line, so the fill is a flat tint
            _, center_y = graph_center(configuration)
            colors = [configuration.color, highlighted(configuration.color, GRADIENT_BRIGHTNESS)]
            canvas.fill_gradient(path, colors, start_y=center_y, end_y=center_y, width=line_width)
        else:
            raise ValueError(f"Unsupported style: {configuration.style}")
