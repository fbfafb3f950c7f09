"""
Parameter parsing and formatting utilities for SoundCanvas.
Author: markus(at)schrodt.at
AI Tools: GPT-5 (OpenAI) - Code development and architecture
License: GPL-3.0-or-later
"""

from __future__ import annotations

import math
from typing import Optional, Tuple

from si_prefix import si_parse

# Unified SI prefix map (include femto for tiny durations)
SI_PREFIXES = {
    'f': 1e-15,
    'p': 1e-12,
    'n': 1e-9,
    'u': 1e-6,
    'm': 1e-3,
    '': 1.0,
    'k': 1e3,
    'M': 1e6,
    'G': 1e9,
}


def parse_si_value(value_str: str) -> float:
    """
    Parse an SI-prefixed number such as ``"44.1k"``, ``"100m"`` or ``"5u"``.
    A leading '+' is ignored. Raises ValueError for text that is not a number.
    """
    clean_str = str(value_str).strip().lstrip('+')
    if not clean_str:
        raise ValueError("empty value")

    # si_prefix only knows 'µ' for micro
    if clean_str.endswith('u'):
        return float(clean_str[:-1]) * 1e-6

    try:
        return float(si_parse(clean_str))
    except (AttributeError, AssertionError, ValueError):
        # si_parse fails with AttributeError/AssertionError on unmatched text
        raise ValueError(f"cannot parse '{value_str}' as an SI value") from None


def strip_trailing_zeros(s: str) -> str:
    if '.' in s:
        s = s.rstrip('0').rstrip('.')
    return s


def _format_significant(value: float, digits: int = 12) -> str:
    """Format *value* with up to *digits* significant figures, trimming
    redundant zeros."""
    if value == 0:
        return '0'

    formatted = f"{value:.{digits}g}"
    if 'e' in formatted or 'E' in formatted:
        return formatted.lower()
    if '.' in formatted:
        return strip_trailing_zeros(formatted)
    return formatted


def _best_si_for(value: float) -> Tuple[str, float]:
    """Pick an SI prefix yielding a human-friendly mantissa (prefer 1..999)."""
    if value == 0 or not math.isfinite(value):
        return '', 1.0

    best = None
    for prefix, mult in SI_PREFIXES.items():
        conv = abs(value / mult)
        if 1 <= conv < 1000:
            score = abs(conv - 1)  # closer to 1 is nicer (e.g., 1k vs 1000)
            if best is None or score < best[0]:
                best = (score, prefix, mult)
    if best is not None:
        return best[1], best[2]

    # Out of prefix range; keep the base unit
    return '', 1.0


def split_si(value: float, target_prefix: Optional[str] = None) -> Tuple[str, str]:
    """Return ``(mantissa, prefix)`` for *value*, e.g. ``("44.1", "k")``."""
    if value == 0:
        return '0', ''

    if target_prefix is not None and target_prefix in SI_PREFIXES:
        prefix, mult = target_prefix, SI_PREFIXES[target_prefix]
    else:
        prefix, mult = _best_si_for(value)

    converted = value / mult
    nearest = round(converted) if math.isfinite(converted) else converted
    if math.isfinite(converted) and math.isclose(converted, nearest, rel_tol=0.0, abs_tol=1e-6):
        return f"{int(nearest)}", prefix
    return _format_significant(converted, digits=6), prefix


def format_si(value: float, target_prefix: Optional[str] = None) -> str:
    mantissa, prefix = split_si(value, target_prefix)
    return f"{mantissa}{prefix}"


def format_with_unit(value: float, unit: str) -> str:
    mantissa, prefix = split_si(value)
    return f"{mantissa} {prefix}{unit}"


def format_frequency(value: float) -> str:
    return format_with_unit(value, 'Hz')


def format_sample_rate(value: float) -> str:
    return format_with_unit(value, 'S/s')


def format_duration(value: float) -> str:
    return format_with_unit(value, 's')


def describe_spec(spec) -> str:
    """One-line summary of a signal request, used in logs, titles and CLI output."""
    text = (
        f"{spec.shape.value} {format_frequency(spec.frequency)}, "
        f"amplitude {_format_significant(spec.amplitude, digits=6)}, "
        f"{spec.sample_count} samples @ {format_sample_rate(spec.sample_rate)} "
        f"({format_duration(spec.duration)})"
    )
    if spec.shape.value == 'harmonic':
        text += f", {spec.harmonic_count} harmonics"
    return text


__all__ = [
    'SI_PREFIXES',
    'parse_si_value', 'strip_trailing_zeros', 'split_si', 'format_si', 'format_with_unit',
    'format_frequency', 'format_sample_rate', 'format_duration', 'describe_spec',
    'FormatService',
]


class FormatService:
    """App-facing formatting service built on top of the utilities in this module."""
    def parse(self, value_str: str) -> float:
        return parse_si_value(value_str)

    def format_frequency(self, value: float) -> str:
        return format_frequency(value)

    def format_sample_rate(self, value: float) -> str:
        return format_sample_rate(value)

    def format_duration(self, value: float) -> str:
        return format_duration(value)

    def describe(self, spec) -> str:
        return describe_spec(spec)
