"""
Spectrum bar bucketing for SoundCanvas visualizers.
Author: markus(at)schrodt.at
AI Tools: GPT-5 (OpenAI) - Code development and architecture
License: GPL-3.0-or-later

The bars are peak magnitudes over contiguous sample ranges, not a frequency
transform.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

DEFAULT_BAR_COUNT = 32
BAR_CEILING = 1.0


def bar_ranges(sample_count: int, bar_count: int = DEFAULT_BAR_COUNT) -> List[Tuple[int, int]]:
    """Half-open index range ``[start, end)`` covered by each bar."""
    if bar_count < 1:
        raise ValueError("bar_count must be at least 1")
    ranges: List[Tuple[int, int]] = []
    for index in range(bar_count):
        start = index * sample_count // bar_count
        end = min((index + 1) * sample_count // bar_count, sample_count)
        ranges.append((start, end))
    return ranges


def bar_amplitudes(waveform: Sequence[float], bar_count: int = DEFAULT_BAR_COUNT) -> np.ndarray:
    """Peak ``|sample|`` per bar, clamped to 1.0. Empty ranges read as 0."""
    samples = np.abs(np.asarray(waveform, dtype=np.float64))
    ranges = bar_ranges(len(samples), bar_count)
    bars = np.zeros(bar_count, dtype=np.float64)

    for index, (start, end) in enumerate(ranges):
        if end > start:
            bars[index] = min(float(samples[start:end].max()), BAR_CEILING)
    return bars


__all__ = ["DEFAULT_BAR_COUNT", "BAR_CEILING", "bar_ranges", "bar_amplitudes"]
