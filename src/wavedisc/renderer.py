"""Audio file to waveform image."""
from pathlib import Path

from .audio import AudioWaveform
from .config import Configuration
from .visualizers import get_visualizer

OPAQUE_FORMATS = {'.jpg', '.jpeg', '.bmp'}


def render_image(
    input_audio: str,
    output_image: str,
    visualizer: str = 'amplitude',
    style: str = 'filled',
    width: int = 800,
    height: int = 200,
    scale: float = 1.0,
    color: str = '#00ff88',
    bg_color: str = '#1a1a2e',
    position='middle',
    padding_factor: float = None,
    progress_callback=None
) -> bool:
    """Render a waveform image for input_audio and save it to output_image."""

    configuration = Configuration(
        size=(width, height),
        color=color,
        background_color=bg_color,
        style=style,
        position=position,
        scale=scale,
        padding_factor=padding_factor,
    )

    if progress_callback:
        progress_callback("Loading audio...")

    waveform = AudioWaveform.from_file(input_audio)

    if progress_callback:
        progress_callback(f"Audio duration: {waveform.duration:.1f}s")
        progress_callback(f"Drawing {visualizer} ({configuration.style.value})...")

    image = get_visualizer(visualizer)().waveform_image(waveform, configuration)
    if image is None:
        if progress_callback:
            progress_callback("Error: not enough audio data for the requested width")
        return False

    if Path(output_image).suffix.lower() in OPAQUE_FORMATS:
        image = image.convert('RGB')
    image.save(output_image)

    if progress_callback:
        progress_callback("Done!")

    return True
