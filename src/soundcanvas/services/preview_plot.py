"""
Matplotlib preview rendering for SoundCanvas sample buffers.
Author: markus(at)schrodt.at
AI Tools: GPT-5 (OpenAI) - Code development and architecture
License: GPL-3.0-or-later
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from .spectrum import DEFAULT_BAR_COUNT, bar_amplitudes


def plot_waveform(samples: Sequence[float], sample_rate: float, ax=None, title: Optional[str] = None):
    """Draw *samples* against their time axis and return ``(figure, ax)``."""
    values = np.asarray(samples, dtype=np.float64)
    if ax is None:
        figure, ax = plt.subplots(figsize=(6, 4))
        figure.patch.set_facecolor('white')
    else:
        figure = ax.figure

    if sample_rate > 0:
        times = np.arange(len(values), dtype=np.float64) / sample_rate
    else:
        times = np.zeros(0, dtype=np.float64)
        values = values[:0]

    ax.plot(times, values, linewidth=1.0)
    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Value')
    ax.grid(True, alpha=0.3)
    ax.set_title(title or 'Waveform')
    return figure, ax


def plot_spectrum_bars(samples: Sequence[float], ax=None, bar_count: int = DEFAULT_BAR_COUNT,
                       title: Optional[str] = None):
    """Draw bucketed peak bars of *samples* and return ``(figure, ax)``."""
    bars = bar_amplitudes(samples, bar_count)
    if ax is None:
        figure, ax = plt.subplots(figsize=(6, 4))
        figure.patch.set_facecolor('white')
    else:
        figure = ax.figure

    ax.bar(np.arange(bar_count), bars, width=0.9, color='green')
    ax.set_ylim(0.0, 1.0)
    ax.set_xlabel('Bar')
    ax.set_ylabel('Peak')
    ax.grid(True, alpha=0.3, axis='y')
    ax.set_title(title or 'Spectrum')
    return figure, ax


def save_waveform_preview(samples: Sequence[float], sample_rate: float, path: str,
                          title: Optional[str] = None, with_spectrum: bool = False) -> str:
    """Render a preview image to *path* and return the path written."""
    if with_spectrum:
        figure, (wave_ax, bar_ax) = plt.subplots(2, 1, figsize=(6, 7))
        figure.patch.set_facecolor('white')
        plot_waveform(samples, sample_rate, ax=wave_ax, title=title)
        plot_spectrum_bars(samples, ax=bar_ax)
        figure.tight_layout()
    else:
        figure, _ = plot_waveform(samples, sample_rate, title=title)

    try:
        directory = os.path.dirname(os.path.abspath(path))
        os.makedirs(directory, exist_ok=True)
        figure.savefig(path)
    finally:
        plt.close(figure)

    logging.info('Preview Plot: wrote %s', path)
    return path


__all__ = ['plot_waveform', 'plot_spectrum_bars', 'save_waveform_preview']
