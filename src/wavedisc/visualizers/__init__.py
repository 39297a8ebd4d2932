"""Visualizer modules."""
from .amplitude import AmplitudeVisualizer
from .spectrum import SpectrumVisualizer

VISUALIZERS = {
    'amplitude': AmplitudeVisualizer,
    'spectrum': SpectrumVisualizer,
}

def get_visualizer(name: str):
    """Get visualizer class by name."""
    return VISUALIZERS.get(name, AmplitudeVisualizer)
