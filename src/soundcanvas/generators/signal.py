"""
Signal request model shared by the SoundCanvas waveform generators.
Author: markus(at)schrodt.at
AI Tools: GPT-5 (OpenAI) - Code development and architecture
License: GPL-3.0-or-later
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

import numpy as np

from ..services.formatting import parse_si_value

DEFAULT_SAMPLE_RATE = 44100.0
DEFAULT_DURATION = 1.0
DEFAULT_HARMONIC_COUNT = 5


class SignalValidationError(ValueError):
    """Raised when a signal request cannot be synthesized."""


class WaveShape(str, Enum):
    """Waveform family selecting the generation formula."""

    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"
    HARMONIC = "harmonic"

    @classmethod
    def parse(cls, value: Union["WaveShape", str]) -> "WaveShape":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        key = _SHAPE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            names = ", ".join(member.value for member in cls)
            raise SignalValidationError(f"unknown shape '{value}' (expected one of: {names})") from None


_SHAPE_ALIASES = {
    "saw": "sawtooth",
    "harmonic-series": "harmonic",
    "harmonics": "harmonic",
}


@dataclass(frozen=True)
class SignalSpec:
    """Parameter set describing one sample buffer to synthesize."""

    shape: WaveShape
    frequency: float
    amplitude: float
    sample_rate: float = DEFAULT_SAMPLE_RATE
    duration: float = DEFAULT_DURATION
    harmonic_count: int = DEFAULT_HARMONIC_COUNT

    def __post_init__(self):
        # Accept plain strings for the shape; frozen dataclasses need object.__setattr__.
        object.__setattr__(self, "shape", WaveShape.parse(self.shape))

    @property
    def sample_count(self) -> int:
        """Number of samples in the buffer, ``floor(sample_rate * duration)``."""
        return sample_count(self.sample_rate, self.duration)

    @property
    def nyquist(self) -> float:
        return self.sample_rate / 2.0

    @classmethod
    def from_strings(
        cls,
        shape: Union[WaveShape, str],
        frequency: str,
        amplitude: str,
        sample_rate: Optional[str] = None,
        duration: Optional[str] = None,
        harmonic_count: Optional[str] = None,
    ) -> "SignalSpec":
        """Build a spec from SI-prefixed text such as ``"44.1k"`` or ``"100m"``."""
        values = {
            "frequency": frequency,
            "amplitude": amplitude,
            "sample_rate": sample_rate,
            "duration": duration,
        }
        parsed = {}
        errors: List[str] = []
        for name, text in values.items():
            if text is None:
                continue
            try:
                parsed[name] = parse_si_value(text)
            except ValueError:
                errors.append(f"{name} '{text}' is not a number")

        if harmonic_count is not None:
            try:
                parsed["harmonic_count"] = int(harmonic_count)
            except ValueError:
                errors.append(f"harmonic_count '{harmonic_count}' is not an integer")

        if errors:
            raise SignalValidationError("; ".join(errors))
        return cls(shape=shape, **parsed)


@dataclass(frozen=True)
class WaveformResult:
    """Result bundle returned by the ``generate_*_wave`` functions."""

    spec: SignalSpec
    samples: np.ndarray
    warnings: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.samples)


def sample_count(sample_rate: float, duration: float) -> int:
    # int() truncates, which is floor for the non-negative values validation allows
    return int(sample_rate * duration)


def time_axis(spec: SignalSpec) -> np.ndarray:
    """Sample instants ``t_i = i / sample_rate`` for ``i`` in ``0..N-1``."""
    count = spec.sample_count
    if count == 0:
        return np.zeros(0, dtype=np.float64)
    return np.arange(count, dtype=np.float64) / spec.sample_rate


def validate_spec(spec: SignalSpec) -> List[str]:
    errors: List[str] = []
    if not math.isfinite(spec.sample_rate):
        errors.append("sample_rate must be finite")
    elif spec.sample_rate < 0:
        errors.append("sample_rate must be non-negative")
    if not math.isfinite(spec.duration):
        errors.append("duration must be finite")
    elif spec.duration < 0:
        errors.append("duration must be non-negative")
    return errors


def raise_if_invalid(spec: SignalSpec, errors: List[str]) -> None:
    if errors:
        message = "; ".join(errors)
        logging.error("Waveform Generator: rejected %s request (%s)", spec.shape.value, message)
        raise SignalValidationError(message)


def derive_common_warnings(spec: SignalSpec, highest_frequency: Optional[float] = None) -> List[str]:
    warnings: List[str] = []

    if spec.sample_count == 0:
        warnings.append("Sample buffer is empty; sample_rate * duration is below one sample.")
        return warnings

    top = abs(spec.frequency if highest_frequency is None else highest_frequency)
    if top > spec.nyquist:
        warnings.append(
            f"Frequency {top:g} Hz exceeds the Nyquist limit of {spec.nyquist:g} Hz; samples will alias."
        )
    return warnings


def finish(spec: SignalSpec, samples: np.ndarray, warnings: List[str]) -> WaveformResult:
    logging.debug(
        "Waveform Generator: %s %g Hz x %g, %d samples at %g S/s",
        spec.shape.value,
        spec.frequency,
        spec.amplitude,
        len(samples),
        spec.sample_rate,
    )
    for warning in warnings:
        logging.warning("Waveform Generator: %s", warning)
    return WaveformResult(spec=spec, samples=samples, warnings=warnings)


__all__ = [
    "DEFAULT_SAMPLE_RATE",
    "DEFAULT_DURATION",
    "DEFAULT_HARMONIC_COUNT",
    "SignalValidationError",
    "WaveShape",
    "SignalSpec",
    "WaveformResult",
    "sample_count",
    "time_axis",
    "validate_spec",
]
