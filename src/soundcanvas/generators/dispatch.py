"""
Shape dispatch for the SoundCanvas waveform generators.
Author: markus(at)schrodt.at
AI Tools: GPT-5 (OpenAI) - Code development and architecture
License: GPL-3.0-or-later
"""

from __future__ import annotations

from typing import Callable, Dict, Union

import numpy as np

from .harmonic import generate_harmonic_wave
from .saw import generate_saw_wave
from .signal import (
    DEFAULT_DURATION,
    DEFAULT_HARMONIC_COUNT,
    DEFAULT_SAMPLE_RATE,
    SignalSpec,
    WaveformResult,
    WaveShape,
)
from .sine import generate_sine_wave
from .square import generate_square_wave
from .triangle import generate_triangle_wave

GENERATORS: Dict[WaveShape, Callable[[SignalSpec], WaveformResult]] = {
    WaveShape.SINE: generate_sine_wave,
    WaveShape.SQUARE: generate_square_wave,
    WaveShape.SAWTOOTH: generate_saw_wave,
    WaveShape.TRIANGLE: generate_triangle_wave,
    WaveShape.HARMONIC: generate_harmonic_wave,
}


def generate_waveform(spec: SignalSpec) -> WaveformResult:
    """Run the generator registered for ``spec.shape``."""
    return GENERATORS[spec.shape](spec)


def generate(
    shape: Union[WaveShape, str],
    frequency: float,
    amplitude: float,
    sample_rate: float = DEFAULT_SAMPLE_RATE,
    duration: float = DEFAULT_DURATION,
    harmonic_count: int = DEFAULT_HARMONIC_COUNT,
) -> np.ndarray:
    """Synthesize one sample buffer and return the samples only.

    Args:
        shape: ``WaveShape`` member or its name (``"sine"``, ``"square"``,
            ``"sawtooth"``, ``"triangle"``, ``"harmonic"``).
        frequency: Fundamental frequency in Hz. Negative values are accepted.
        amplitude: Peak magnitude. Negative values invert the signal.
        sample_rate: Samples per second.
        duration: Buffer length in seconds.
        harmonic_count: Number of partials, harmonic shape only.

    Returns:
        float64 array of length ``floor(sample_rate * duration)``.

    Raises:
        SignalValidationError: for unknown shapes, negative or non-finite
            ``sample_rate``/``duration`` and ``harmonic_count < 1`` on the
            harmonic shape.
    """
    spec = SignalSpec(
        shape=shape,
        frequency=frequency,
        amplitude=amplitude,
        sample_rate=sample_rate,
        duration=duration,
        harmonic_count=harmonic_count,
    )
    return generate_waveform(spec).samples


__all__ = ["GENERATORS", "generate", "generate_waveform"]
