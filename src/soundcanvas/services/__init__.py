"""Service package exports."""

from .formatting import FormatService, describe_spec, format_si, parse_si_value
from .spectrum import DEFAULT_BAR_COUNT, bar_amplitudes, bar_ranges

__all__ = [
    "FormatService",
    "describe_spec",
    "format_si",
    "parse_si_value",
    "DEFAULT_BAR_COUNT",
    "bar_amplitudes",
    "bar_ranges",
]
