import wave

import numpy as np
import pytest

SR = 22050


def write_wav(path, y, sr=SR):
    pcm = (np.clip(y, -1.0, 1.0) * 32767).astype(np.int16)
    with wave.open(str(path), 'wb') as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(sr)
        w.writeframes(pcm.tobytes())
    return path


def sine(duration: float = 1.0, freq: float = 440.0, amplitude: float = 0.8, sr: int = SR) -> np.ndarray:
    t = np.linspace(0, duration, int(sr * duration), endpoint=False)
    return (amplitude * np.sin(2 * np.pi * freq * t)).astype(np.float32)


@pytest.fixture
def sine_wav(tmp_path):
    return write_wav(tmp_path / 'sine.wav', sine())


@pytest.fixture
def short_wav(tmp_path):
    return write_wav(tmp_path / 'short.wav', sine(duration=0.001))
