#!/usr/bin/env python3
"""
Waveform preview renderer for SoundCanvas.
Author: markus(at)schrodt.at
AI Tools: GPT-5 (OpenAI) - Code development and architecture
License: GPL-3.0-or-later

Synthesizes one sample buffer and writes a PNG preview. Numeric options accept
SI prefixes, e.g. ``--sample-rate 44.1k --duration 10m``.
"""

import argparse
import logging
import sys
from pathlib import Path

# Ensure src is on sys.path so package imports resolve without installation
ROOT = Path(__file__).resolve().parent.parent
SRC_ROOT = ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

import matplotlib
matplotlib.use("Agg")

from soundcanvas.generators import SignalSpec, SignalValidationError, WaveShape, generate_waveform
from soundcanvas.services.formatting import describe_spec
from soundcanvas.services.preview_plot import save_waveform_preview
from soundcanvas.version import get_version


def build_parser():
    parser = argparse.ArgumentParser(description="Render a SoundCanvas waveform preview")
    parser.add_argument("shape", choices=[shape.value for shape in WaveShape] + ["saw", "harmonic-series"],
                        help="Waveform shape")
    parser.add_argument("--frequency", default="440", help="Frequency in Hz (default: 440)")
    parser.add_argument("--amplitude", default="1", help="Peak amplitude (default: 1)")
    parser.add_argument("--sample-rate", default="44.1k", help="Samples per second (default: 44.1k)")
    parser.add_argument("--duration", default="10m", help="Buffer length in seconds (default: 10m)")
    parser.add_argument("--harmonics", default="5", help="Partials for the harmonic shape (default: 5)")
    parser.add_argument("--spectrum", action="store_true", help="Add a spectrum bar panel")
    parser.add_argument("--output", default=None, help="PNG path (default: <shape>.png)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    """Parse arguments, render and report; returns True on success"""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(message)s")

    print(f"SoundCanvas waveform renderer v{get_version()}")

    try:
        spec = SignalSpec.from_strings(
            shape=args.shape,
            frequency=args.frequency,
            amplitude=args.amplitude,
            sample_rate=args.sample_rate,
            duration=args.duration,
            harmonic_count=args.harmonics,
        )
        result = generate_waveform(spec)
    except SignalValidationError as e:
        print(f"Error: {e}")
        return False

    summary = describe_spec(spec)
    print(summary)
    for warning in result.warnings:
        print(f"Warning: {warning}")

    output = args.output or f"{spec.shape.value}.png"
    save_waveform_preview(result.samples, spec.sample_rate, output, title=summary, with_spectrum=args.spectrum)
    print(f"Wrote {output}")
    return True


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
