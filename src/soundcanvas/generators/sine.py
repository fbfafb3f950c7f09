"""
Sine waveform generator for SoundCanvas.
Author: markus(at)schrodt.at
AI Tools: GPT-5 (OpenAI) - Code development and architecture
License: GPL-3.0-or-later
"""

from __future__ import annotations

import numpy as np

from .signal import (
    SignalSpec,
    WaveformResult,
    derive_common_warnings,
    finish,
    raise_if_invalid,
    time_axis,
    validate_spec,
)


def generate_sine_wave(spec: SignalSpec) -> WaveformResult:
    """Generate ``amplitude * sin(2π f t)`` over the buffer described by *spec*.

    Args:
        spec: Signal parameters. ``spec.shape`` and ``spec.harmonic_count`` are
            not consulted.

    Returns:
        WaveformResult containing the samples and any warnings.
    """

    raise_if_invalid(spec, validate_spec(spec))

    samples = _generate_samples(spec)
    return finish(spec, samples, derive_common_warnings(spec))


def _generate_samples(spec: SignalSpec) -> np.ndarray:
    t = time_axis(spec)
    return spec.amplitude * np.sin(2 * np.pi * spec.frequency * t)


__all__ = ["generate_sine_wave"]
