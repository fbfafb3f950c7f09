"""Waveform generator modules for SoundCanvas."""

from .signal import (
    DEFAULT_DURATION,
    DEFAULT_HARMONIC_COUNT,
    DEFAULT_SAMPLE_RATE,
    SignalSpec,
    SignalValidationError,
    WaveformResult,
    WaveShape,
    sample_count,
    time_axis,
)
from .sine import generate_sine_wave
from .square import generate_square_wave
from .saw import generate_saw_wave
from .triangle import generate_triangle_wave
from .harmonic import generate_harmonic_wave
from .dispatch import GENERATORS, generate, generate_waveform

__all__ = [
    "DEFAULT_DURATION",
    "DEFAULT_HARMONIC_COUNT",
    "DEFAULT_SAMPLE_RATE",
    "SignalSpec",
    "SignalValidationError",
    "WaveformResult",
    "WaveShape",
    "sample_count",
    "time_axis",
    "generate_sine_wave",
    "generate_square_wave",
    "generate_saw_wave",
    "generate_triangle_wave",
    "generate_harmonic_wave",
    "GENERATORS",
    "generate",
    "generate_waveform",
]
