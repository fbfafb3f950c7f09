"""
Square waveform generator for SoundCanvas.
Author: markus(at)schrodt.at
AI Tools: GPT-5 (OpenAI) - Code development and architecture
License: GPL-3.0-or-later
"""

from __future__ import annotations

from typing import List

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


def generate_square_wave(spec: SignalSpec) -> WaveformResult:
    """Generate a square waveform based on *spec*.

    The level is ``+amplitude`` while ``sin(2π f t)`` is strictly positive and
    ``-amplitude`` otherwise, so exact zero crossings land on the low level.
    """

    raise_if_invalid(spec, validate_spec(spec))

    samples = _generate_samples(spec)
    warnings = derive_common_warnings(spec) + _derive_warnings(spec)
    return finish(spec, samples, warnings)


# ---------------------------------------------------------------------------
# Internal helpers


def _generate_samples(spec: SignalSpec) -> np.ndarray:
    t = time_axis(spec)
    carrier = np.sin(2 * np.pi * spec.frequency * t)
    return spec.amplitude * np.where(carrier > 0, 1.0, -1.0)


def _derive_warnings(spec: SignalSpec) -> List[str]:
    warnings: List[str] = []
    if spec.sample_count and spec.frequency == 0 and spec.amplitude != 0:
        warnings.append("Zero frequency holds the square wave at the low level.")
    return warnings


__all__ = ["generate_square_wave"]
