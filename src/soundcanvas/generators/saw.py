"""
Sawtooth waveform generator for SoundCanvas.
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


def generate_saw_wave(spec: SignalSpec) -> WaveformResult:
    """Generate a centred sawtooth ramp from ``-amplitude`` to ``+amplitude``."""

    raise_if_invalid(spec, validate_spec(spec))

    samples = _generate_samples(spec)
    return finish(spec, samples, derive_common_warnings(spec))


def _generate_samples(spec: SignalSpec) -> np.ndarray:
    phase = time_axis(spec) * spec.frequency
    return spec.amplitude * (2.0 * (phase - np.floor(phase + 0.5)))


__all__ = ["generate_saw_wave"]
