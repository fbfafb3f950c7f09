"""
Audio data model consumed by SoundCanvas visualizers.
Author: markus(at)schrodt.at
AI Tools: GPT-5 (OpenAI) - Code development and architecture
License: GPL-3.0-or-later
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol, Sequence, Tuple, runtime_checkable

import numpy as np

PLAYING_THRESHOLD = 0.01
PREVIEW_SAMPLE_COUNT = 100

ChangeCallback = Callable[[str, Any], None]


@runtime_checkable
class AudioDataProvider(Protocol):
    """Anything a visualizer can read audio fields from."""

    frequency: float
    amplitude: float
    waveform: Sequence[float]
    is_playing: bool


@dataclass(frozen=True)
class AudioData:
    """Immutable snapshot of the four audio fields."""

    frequency: float = 440.0
    amplitude: float = 1.0
    waveform: Tuple[float, ...] = ()
    is_playing: bool = False

    def __post_init__(self):
        object.__setattr__(self, "waveform", tuple(float(v) for v in self.waveform))

    @classmethod
    def from_samples(cls, samples: Sequence[float], frequency: float = 440.0) -> "AudioData":
        """Derive amplitude and playing state from a captured buffer."""
        amplitude, is_playing = _measure(samples)
        return cls(frequency=frequency, amplitude=amplitude, waveform=tuple(samples), is_playing=is_playing)


def _measure(samples: Sequence[float]) -> Tuple[float, bool]:
    values = np.asarray(samples, dtype=np.float64)
    amplitude = float(np.abs(values).max()) if values.size else 0.0
    return amplitude, amplitude > PLAYING_THRESHOLD


class _ObservableAudio:
    """Holds the audio fields and notifies subscribers when one changes."""

    _FIELDS = ("frequency", "amplitude", "waveform", "is_playing")

    def __init__(self, frequency: float, amplitude: float, is_playing: bool):
        self._values: Dict[str, Any] = {
            "frequency": frequency,
            "amplitude": amplitude,
            "waveform": (),
            "is_playing": is_playing,
        }
        self._callbacks: Dict[int, ChangeCallback] = {}
        self._next_id = 0

    # -- subscription -----------------------------------------------------

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register *callback(field, value)*; returns a function that removes it."""
        callback_id = self._next_id
        self._next_id += 1
        self._callbacks[callback_id] = callback

        def unsubscribe() -> None:
            self._callbacks.pop(callback_id, None)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def _set(self, name: str, value: Any) -> None:
        if _same(self._values[name], value):
            return
        self._values[name] = value
        # Copy so callbacks may unsubscribe while being notified
        for callback in list(self._callbacks.values()):
            callback(name, value)

    # -- fields -----------------------------------------------------------

    @property
    def frequency(self) -> float:
        return self._values["frequency"]

    @frequency.setter
    def frequency(self, value: float) -> None:
        self._set("frequency", float(value))

    @property
    def amplitude(self) -> float:
        return self._values["amplitude"]

    @amplitude.setter
    def amplitude(self, value: float) -> None:
        self._set("amplitude", float(value))

    @property
    def waveform(self) -> Tuple[float, ...]:
        return self._values["waveform"]

    @waveform.setter
    def waveform(self, value: Sequence[float]) -> None:
        self._set("waveform", tuple(float(v) for v in value))

    @property
    def is_playing(self) -> bool:
        return self._values["is_playing"]

    @is_playing.setter
    def is_playing(self, value: bool) -> None:
        self._set("is_playing", bool(value))

    def snapshot(self) -> AudioData:
        return AudioData(**{name: self._values[name] for name in self._FIELDS})


def _same(old: Any, new: Any) -> bool:
    if isinstance(old, float) and isinstance(new, float) and math.isnan(old) and math.isnan(new):
        return True
    return old == new


class LiveAudioData(_ObservableAudio):
    """
    Audio fields fed from a capture buffer owned by the caller.
    No device I/O happens here; push each captured block through ingest_samples().
    """

    def __init__(self, frequency: float = 440.0, amplitude: float = 1.0):
        super().__init__(frequency=frequency, amplitude=amplitude, is_playing=False)

    def ingest_samples(self, samples: Sequence[float]) -> None:
        """Store a captured block and update amplitude and playing state from it."""
        self.waveform = samples
        amplitude, is_playing = _measure(self.waveform)
        self.amplitude = amplitude
        self.is_playing = is_playing

    def stop(self) -> None:
        logging.info('Audio Data: live input stopped')
        self.is_playing = False


class PreviewAudioData(_ObservableAudio):
    """
    Simulated audio source for previews. Each update() renders PREVIEW_SAMPLE_COUNT
    samples of a sine whose phase is offset by the current clock reading, so the
    preview drifts over time. Pass ``now`` explicitly for repeatable output.
    """

    def __init__(self, frequency: float = 440.0, amplitude: float = 0.5,
                 clock: Optional[Callable[[], float]] = None):
        super().__init__(frequency=frequency, amplitude=amplitude, is_playing=True)
        self._clock = clock or time.time

    def render(self, now: Optional[float] = None) -> np.ndarray:
        phase = self._clock() if now is None else now
        t = np.arange(PREVIEW_SAMPLE_COUNT, dtype=np.float64) / PREVIEW_SAMPLE_COUNT
        return self.amplitude * np.sin(2 * np.pi * self.frequency * t + phase)

    def update(self, now: Optional[float] = None) -> Tuple[float, ...]:
        self.waveform = self.render(now)
        return self.waveform


__all__ = [
    "PLAYING_THRESHOLD",
    "PREVIEW_SAMPLE_COUNT",
    "AudioDataProvider",
    "AudioData",
    "LiveAudioData",
    "PreviewAudioData",
]
