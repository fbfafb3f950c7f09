import pytest

from soundcanvas.generators import SignalSpec
from soundcanvas.services.formatting import (
    FormatService,
    describe_spec,
    format_duration,
    format_frequency,
    format_sample_rate,
    format_si,
    parse_si_value,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("440", 440.0),
        ("44.1k", 44100.0),
        ("100m", 0.1),
        ("5u", 5e-6),
        ("+2.5", 2.5),
        ("1e3", 1000.0),
        ("-3", -3.0),
    ],
)
def test_parse_si_value(text, expected):
    assert parse_si_value(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "   ", "abc", "fastu"])
def test_parse_si_value_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_si_value(text)


def test_format_si_picks_friendly_prefix():
    assert format_si(0) == "0"
    assert format_si(1500.0) == "1.5k"
    assert format_si(0.002) == "2m"
    assert format_si(440.0) == "440"


def test_unit_formatting():
    assert format_frequency(440.0) == "440 Hz"
    assert format_frequency(1500.0) == "1.5 kHz"
    assert format_sample_rate(44100.0) == "44.1 kS/s"
    assert format_sample_rate(1000.0) == "1 kS/s"
    assert format_duration(0.1) == "100 ms"
    assert format_duration(1.0) == "1 s"


def test_describe_spec():
    spec = SignalSpec("harmonic", 440.0, 1.0, sample_rate=1000.0, duration=0.1, harmonic_count=3)
    text = describe_spec(spec)
    assert text.startswith("harmonic 440 Hz, amplitude 1, 100 samples @ 1 kS/s")
    assert text.endswith("3 harmonics")

    assert "harmonics" not in describe_spec(SignalSpec("sine", 440.0, 1.0))


def test_format_service_wraps_module_helpers():
    service = FormatService()
    assert service.parse("2k") == pytest.approx(2000.0)
    assert service.format_frequency(2000.0) == "2 kHz"
    assert service.describe(SignalSpec("sine", 440.0, 1.0)).startswith("sine 440 Hz")
