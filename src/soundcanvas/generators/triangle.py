"""
Triangle waveform generator for SoundCanvas.
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


def generate_triangle_wave(spec: SignalSpec) -> WaveformResult:
    """Generate a triangle waveform based on *spec*."""

    raise_if_invalid(spec, validate_spec(spec))

    samples = _generate_samples(spec)
    return finish(spec, samples, derive_common_warnings(spec))


def _generate_samples(spec: SignalSpec) -> np.ndarray:
    phase = time_axis(spec) * spec.frequency
    # Fold the centred ramp into |ramp|, then map 0..1 onto -1..1
    ramp = 2.0 * (phase - np.floor(phase + 0.5))
    return spec.amplitude * (2.0 * np.abs(ramp) - 1.0)


__all__ = ["generate_triangle_wave"]
