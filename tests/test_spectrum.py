import numpy as np
import pytest

from soundcanvas.generators import generate
from soundcanvas.services.spectrum import bar_amplitudes, bar_ranges


def test_bar_ranges_cover_the_buffer_contiguously():
    assert bar_ranges(10, 3) == [(0, 3), (3, 6), (6, 10)]


def test_bars_hold_peak_magnitude_clamped_to_one():
    bars = bar_amplitudes([0.1, -0.5, 0.2, 2.0], bar_count=2)
    np.testing.assert_array_equal(bars, [0.5, 1.0])


def test_empty_waveform_gives_silent_bars():
    np.testing.assert_array_equal(bar_amplitudes([], bar_count=4), np.zeros(4))


def test_short_waveform_leaves_empty_ranges_at_zero():
    np.testing.assert_array_equal(bar_amplitudes([0.3], bar_count=4), [0.0, 0.0, 0.0, 0.3])


def test_bar_count_must_be_positive():
    with pytest.raises(ValueError):
        bar_amplitudes([0.1, 0.2], bar_count=0)


def test_square_buffer_fills_every_bar():
    samples = generate("square", 440.0, 1.0, sample_rate=1000.0, duration=0.1)
    bars = bar_amplitudes(samples)
    assert len(bars) == 32
    assert np.all(bars == 1.0)
