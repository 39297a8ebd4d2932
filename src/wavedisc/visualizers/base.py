"""Base visualizer class."""
from abc import ABC, abstractmethod
from PIL import Image

from ..canvas import RasterCanvas
from ..config import Configuration


class BaseVisualizer(ABC):
    """
    Abstract base class for visualizers.

    Owns the shared render skeleton: scale the configuration to pixels,
    fetch data sized to the pixel width, paint the background, draw the
    graph, extract the image. Subclasses supply only fetch() and draw_graph().
    Instances keep no render-time state and can be shared across threads.
    """

    def waveform_image(self, waveform, configuration: Configuration) -> Image.Image | None:
        """Render waveform with configuration, or return None when it has no data."""
        scaled = configuration.scaled()
        data = self.fetch(waveform, scaled)
        if data is None:
            return None

        canvas = RasterCanvas(scaled.pixel_size)
        self.draw_background(canvas, scaled)
        self.draw_graph(data, canvas, scaled)
        return canvas.image()

    def sample_count(self, configuration: Configuration) -> int:
        """One sample per pixel column of the scaled configuration."""
        return configuration.pixel_size[0]

    def draw_background(self, canvas: RasterCanvas, configuration: Configuration):
        canvas.fill_rect(configuration.background_color)

    @abstractmethod
    def fetch(self, waveform, configuration: Configuration):
        """Ask the data source for this visualizer's input; None means no data."""
        pass

    @abstractmethod
    def draw_graph(self, data, canvas: RasterCanvas, configuration: Configuration):
        """Compute geometry from data and issue draw commands to canvas."""
        pass
