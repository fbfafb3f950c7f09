"""
Harmonic-series (additive) waveform generator for SoundCanvas.
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


def generate_harmonic_wave(spec: SignalSpec) -> WaveformResult:
    """Sum ``spec.harmonic_count`` sine partials with amplitude ``amplitude / h``.

    The sum is not normalized: with more than one partial the peak of the
    buffer may exceed ``spec.amplitude``. Callers that need a bounded signal
    have to scale the samples themselves.

    Raises:
        SignalValidationError: if ``harmonic_count`` is below 1, in addition to
            the checks shared by every shape.
    """

    errors = validate_spec(spec) + _validate_harmonics(spec)
    raise_if_invalid(spec, errors)

    samples = _generate_samples(spec)
    highest = spec.frequency * spec.harmonic_count
    warnings = derive_common_warnings(spec, highest_frequency=highest) + _derive_warnings(spec)
    return finish(spec, samples, warnings)


# ---------------------------------------------------------------------------
# Internal helpers


def _validate_harmonics(spec: SignalSpec) -> List[str]:
    errors: List[str] = []
    if isinstance(spec.harmonic_count, bool) or not isinstance(spec.harmonic_count, (int, np.integer)):
        errors.append("harmonic_count must be an integer")
    elif spec.harmonic_count < 1:
        errors.append("harmonic_count must be at least 1")
    return errors


def _generate_samples(spec: SignalSpec) -> np.ndarray:
    t = time_axis(spec)
    samples = np.zeros_like(t)
    for h in range(1, int(spec.harmonic_count) + 1):
        partial_frequency = spec.frequency * h
        partial_amplitude = spec.amplitude / h
        samples += partial_amplitude * np.sin(2 * np.pi * partial_frequency * t)
    return samples


def _derive_warnings(spec: SignalSpec) -> List[str]:
    warnings: List[str] = []
    if spec.harmonic_count > 1 and spec.amplitude != 0 and spec.sample_count:
        warnings.append("Harmonic sum is not normalized; peaks may exceed the nominal amplitude.")
    return warnings


__all__ = ["generate_harmonic_wave"]
