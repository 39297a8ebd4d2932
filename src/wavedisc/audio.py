"""Audio loading and waveform data sources."""
from dataclasses import dataclass, field

import numpy as np
import librosa

NOISE_FLOOR_DB = -50.0
N_FFT = 2048


def load_audio(path: str, sr: int = 22050) -> tuple[np.ndarray, int, float]:
    """Load audio file and return waveform, sample rate, duration."""
    y, sr = librosa.load(path, sr=sr, mono=True)
    duration = librosa.get_duration(y=y, sr=sr)
    return y, sr, duration


def amplitude_to_normalized_db(peaks: np.ndarray, noise_floor: float = NOISE_FLOOR_DB) -> np.ndarray:
    """
    Map linear peak amplitudes to inverted, linearly normalized decibels.

    0 dBFS maps to 0.0 and anything at or below the noise floor maps to 1.0.
    """
    with np.errstate(divide='ignore'):
        db = 20 * np.log10(np.abs(peaks))
    db = np.clip(np.nan_to_num(db, neginf=noise_floor), noise_floor, 0.0)
    return (db / noise_floor).astype(np.float32)


def downsample_peaks(values: np.ndarray, count: int) -> np.ndarray:
    """Split values into count chunks and keep each chunk's maximum."""
    chunks = np.array_split(values, count)
    return np.array([np.max(c) for c in chunks])


@dataclass
class SpectrumAnalysis:
    """Per-frame FFT magnitudes, one 1-D array per frame."""
    frames: list = field(default_factory=list)

    def __len__(self):
        return len(self.frames)

    def __iter__(self):
        return iter(self.frames)

    def __getitem__(self, idx):
        return self.frames[idx]


class ArrayWaveform:
    """Data source over precomputed samples and/or spectrum frames."""

    def __init__(self, samples=None, frames=None):
        self._samples = None if samples is None else np.asarray(samples, dtype=np.float32)
        self._frames = None if frames is None else [np.asarray(f, dtype=np.float32) for f in frames]

    def samples(self, count: int) -> np.ndarray | None:
        """Return exactly count normalized samples, or None if not enough data."""
        if self._samples is None or count < 1 or len(self._samples) < count:
            return None
        if len(self._samples) == count:
            return self._samples.copy()
        # Larger values are quieter, so the loudest sample in a chunk is its minimum
        return 1.0 - downsample_peaks(1.0 - self._samples, count)

    def analysis(self, count: int) -> SpectrumAnalysis | None:
        """Return up to count frames, or None if there are none."""
        if not self._frames or count < 1:
            return None
        return SpectrumAnalysis(frames=self._frames[:count])


class AudioWaveform:
    """Data source backed by a decoded mono signal."""

    def __init__(self, y: np.ndarray, sr: int):
        self.y = np.asarray(y, dtype=np.float32)
        self.sr = sr

    @classmethod
    def from_file(cls, path: str, sr: int = 22050) -> 'AudioWaveform':
        y, sr, _ = load_audio(path, sr=sr)
        return cls(y, sr)

    @property
    def duration(self) -> float:
        return len(self.y) / self.sr if self.sr else 0.0

    def samples(self, count: int) -> np.ndarray | None:
        """Peak amplitude per output column, as inverted normalized dB."""
        if count < 1 or len(self.y) < count:
            return None
        peaks = downsample_peaks(np.abs(self.y), count)
        return amplitude_to_normalized_db(peaks)

    def analysis(self, count: int) -> SpectrumAnalysis | None:
        """STFT magnitude frames, at most count of them."""
        if count < 1 or len(self.y) < count:
            return None
        hop_length = max(1, len(self.y) // count)
        n_fft = min(N_FFT, len(self.y))
        S = np.abs(librosa.stft(self.y, n_fft=n_fft, hop_length=hop_length))
        frames = list(S.T[:count])
        if not frames:
            return None
        return SpectrumAnalysis(frames=frames)
