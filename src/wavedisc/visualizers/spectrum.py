"""Spectrum arcs visualizer."""
import numpy as np

from ..canvas import RasterCanvas
from ..config import Configuration, Style
from ..geometry import Path
from .base import BaseVisualizer

MAX_DRAW_RADIUS = 80.0
MIN_AMPLITUDE = 1.0
ROW_SPACING = 10
BIN_STEP = 50
STRIPE_EVERY = 5
MAGNITUDE_FLOOR = 1e-12
FLOOR_DB = 20 * np.log10(MAGNITUDE_FLOOR)


def normalize_spectrum(frames) -> list[np.ndarray]:
    """
    Convert raw magnitudes to dB and scale by the global maximum dB.

    With a positive maximum each value is divided by it. A maximum of
    exactly 0 dB cannot be divided by, so every value becomes 0. When the
    whole spectrum sits below 0 dB the ratio is inverted (max / value),
    keeping the loudest bin at 1.0 and quieter bins proportionally lower.
    Input entirely at the magnitude floor normalizes to 1.0.
    Results are clamped to [0, 1].
    """
    dbs = [20 * np.log10(np.maximum(np.abs(np.asarray(f, dtype=np.float64)), MAGNITUDE_FLOOR))
           for f in frames]
    non_empty = [d for d in dbs if d.size]
    if not non_empty:
        return dbs

    max_value = max(float(np.max(d)) for d in non_empty)
    if max_value <= FLOOR_DB + 1e-9:
        return [np.ones_like(d) for d in dbs]
    if max_value == 0.0:
        return [np.zeros_like(d) for d in dbs]
    if max_value < 0.0:
        return [np.clip(max_value / d, 0.0, 1.0) for d in dbs]
    return [np.clip(d / max_value, 0.0, 1.0) for d in dbs]


def spectrum_arcs(frames, configuration: Configuration) -> Path:
    """Two half-circle arcs per sampled bin, one row of them per frame."""
    path = Path()
    for y, row in enumerate(normalize_spectrum(frames)):
        y_pos = y * ROW_SPACING
        for x, value in enumerate(row):
            if configuration.style == Style.STRIPED and x % STRIPE_EVERY != 0:
                continue
            if x % BIN_STEP != 0:
                continue
            drawing_amplitude = max(MIN_AMPLITUDE, (1.0 - value) * MAX_DRAW_RADIUS)
            path.add_arc(x, y_pos, 1.0)
            path.add_arc(x, y_pos, drawing_amplitude)
    return path


class SpectrumVisualizer(BaseVisualizer):
    """Rows of frequency-bin arcs, one row per FFT frame."""

    def fetch(self, waveform, configuration: Configuration):
        analysis = waveform.analysis(self.sample_count(configuration))
        if analysis is None or len(analysis) == 0:
            return None
        return analysis

    def draw_graph(self, data, canvas: RasterCanvas, configuration: Configuration):
        path = spectrum_arcs(data, configuration)
        canvas.stroke_path(path, configuration.color, width=1.0 * configuration.scale)
