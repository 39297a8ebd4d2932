"""Render audio waveforms and spectra to still images."""
from .audio import ArrayWaveform, AudioWaveform, SpectrumAnalysis
from .config import Configuration, Style
from .visualizers import AmplitudeVisualizer, SpectrumVisualizer, get_visualizer

__all__ = [
    'AmplitudeVisualizer',
    'ArrayWaveform',
    'AudioWaveform',
    'Configuration',
    'SpectrumAnalysis',
    'SpectrumVisualizer',
    'Style',
    'get_visualizer',
]
