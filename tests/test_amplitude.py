from concurrent.futures import ThreadPoolExecutor

import numpy as np

from wavedisc.audio import ArrayWaveform
from wavedisc.color import highlighted
from wavedisc.config import Configuration, Style
from wavedisc.visualizers.amplitude import AmplitudeVisualizer, amplitude_segments, draw_mapping_factor


def test_literal_input_segment_endpoints():
    config = Configuration(size=(4, 10), scale=1, position=0.5, padding_factor=2.5).scaled()
    assert draw_mapping_factor(config) == 1.0

    path = amplitude_segments([1.0, 0.5, 1.0, 0.5], config)

    # (1 - 0.5) * 1.0 = 0.5 is below the 1pt floor, so every bar is the minimum
    assert [(s.x0, s.y0, s.x1, s.y1) for s in path.segments] == [
        (0, 4.0, 0, 6.0),
        (1, 4.0, 1, 6.0),
        (2, 4.0, 2, 6.0),
        (3, 4.0, 3, 6.0),
    ]


def test_silence_draws_minimum_bars_at_every_scale():
    for scale in (1, 2, 3):
        config = Configuration(size=(10, 20), scale=scale).scaled()
        samples = np.ones(config.pixel_size[0])
        path = amplitude_segments(samples, config)
        assert len(path) == len(samples)
        for segment in path.segments:
            assert segment.y1 - segment.y0 == 2 * scale


def test_louder_samples_draw_taller_bars():
    config = Configuration(size=(50, 200)).scaled()
    samples = np.linspace(0.0, 1.0, 50)
    heights = [s.y1 - s.y0 for s in amplitude_segments(samples, config).segments]
    assert all(a >= b for a, b in zip(heights, heights[1:]))
    assert min(heights) == 2.0


def test_half_height_follows_mapping_factor():
    config = Configuration(size=(1, 100), position='bottom').scaled()
    # divisor 1.5 -> factor 100 / 4 / 1.5
    segment = amplitude_segments([0.0], config).segments[0]
    assert segment.y0 == 100 - 100 / 4 / 1.5
    assert segment.y1 == 100 + 100 / 4 / 1.5


def test_striped_keeps_every_fifth_column():
    config = Configuration(size=(20, 10), style=Style.STRIPED).scaled()
    path = amplitude_segments(np.zeros(20), config)
    assert [s.x0 for s in path.segments] == [0, 5, 10, 15]


def test_striped_uses_logical_columns_when_scaled():
    config = Configuration(size=(10, 10), style=Style.STRIPED, scale=2).scaled()
    path = amplitude_segments(np.zeros(20), config)
    assert [s.x0 for s in path.segments] == [0, 1, 10, 11]


def test_image_is_scaled_to_pixels():
    waveform = ArrayWaveform(samples=np.zeros(40))
    config = Configuration(size=(20, 30), scale=2)
    image = AmplitudeVisualizer().waveform_image(waveform, config)
    assert image.size == (40, 60)
    assert image.mode == 'RGBA'


def test_filled_bar_pixels():
    waveform = ArrayWaveform(samples=np.zeros(20))
    config = Configuration(size=(20, 20), color='#ff0000', background_color='#000000')
    image = AmplitudeVisualizer().waveform_image(waveform, config)
    # factor 20 / 4 / 2.5 = 2 -> bars span rows 8..12
    assert image.getpixel((0, 10)) == (255, 0, 0, 255)
    assert image.getpixel((0, 0)) == (0, 0, 0, 255)


def test_gradient_differs_from_filled():
    waveform = ArrayWaveform(samples=np.zeros(20))
    filled = Configuration(size=(20, 20), color='#ff0000', background_color='#000000')
    gradient = Configuration(size=(20, 20), color='#ff0000', background_color='#000000',
                             style=Style.GRADIENT)

    visualizer = AmplitudeVisualizer()
    filled_image = visualizer.waveform_image(waveform, filled)
    gradient_image = visualizer.waveform_image(waveform, gradient)

    assert np.any(np.asarray(filled_image) != np.asarray(gradient_image))
    assert gradient_image.getpixel((0, 10)) == highlighted('#ff0000', 0.5)
    assert gradient_image.getpixel((0, 0)) == (0, 0, 0, 255)


def test_no_data_returns_none():
    visualizer = AmplitudeVisualizer()
    config = Configuration(size=(20, 20))
    assert visualizer.waveform_image(ArrayWaveform(), config) is None
    assert visualizer.waveform_image(ArrayWaveform(samples=np.zeros(5)), config) is None


def test_visualizer_is_reusable_across_configs():
    visualizer = AmplitudeVisualizer()
    waveform = ArrayWaveform(samples=np.random.default_rng(0).random(60))
    first = visualizer.waveform_image(waveform, Configuration(size=(30, 10)))
    visualizer.waveform_image(waveform, Configuration(size=(60, 10), style='striped'))
    again = visualizer.waveform_image(waveform, Configuration(size=(30, 10)))
    assert np.array_equal(np.asarray(first), np.asarray(again))


def test_fractional_width_requests_truncated_sample_count():
    waveform = ArrayWaveform(samples=np.zeros(10))
    image = AmplitudeVisualizer().waveform_image(waveform, Configuration(size=(10.5, 4)))
    assert image.size == (10, 4)


def test_concurrent_renders_match_serial_renders():
    visualizer = AmplitudeVisualizer()
    waveform = ArrayWaveform(samples=np.random.default_rng(2).random(240))
    configs = [
        Configuration(size=(width, 30), style=style, color='#ff0000', scale=scale)
        for width in (40, 60, 120)
        for style in ('filled', 'striped', 'gradient')
        for scale in (1, 2)
    ]

    serial = [np.asarray(visualizer.waveform_image(waveform, c)) for c in configs]
    with ThreadPoolExecutor(max_workers=6) as pool:
        parallel = list(pool.map(lambda c: np.asarray(visualizer.waveform_image(waveform, c)), configs))

    for expected, actual in zip(serial, parallel):
        assert np.array_equal(expected, actual)
